"""
gridnav Configuration

Loads configuration from environment variables with sensible defaults.
The library itself never reads this; the command line entry point turns it
into a validated ``SessionSettings``.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from .schemas import SessionSettings

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Application configuration loaded from environment variables."""

    # Board
    GRID_WIDTH: int = int(os.getenv("GRIDNAV_WIDTH", "20"))
    GRID_HEIGHT: int = int(os.getenv("GRIDNAV_HEIGHT", "10"))
    OBSTACLE_DENSITY: float = float(os.getenv("GRIDNAV_OBSTACLE_DENSITY", "0.2"))
    SEED: Optional[int] = _env_optional_int("GRIDNAV_SEED")

    # Pacing (seconds)
    STEP_DELAY: float = float(os.getenv("GRIDNAV_STEP_DELAY", "0.3"))
    MESSAGE_DELAY: float = float(os.getenv("GRIDNAV_MESSAGE_DELAY", "1.0"))
    INVALID_DELAY: float = float(os.getenv("GRIDNAV_INVALID_DELAY", "0.5"))

    # Behaviour
    CLEAR_TARGET_ON_NO_PATH: bool = _env_flag("GRIDNAV_CLEAR_TARGET_ON_NO_PATH")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for impossible values."""
        if cls.GRID_WIDTH <= 0 or cls.GRID_HEIGHT <= 0:
            raise ValueError(
                f"GRIDNAV_WIDTH and GRIDNAV_HEIGHT must be positive (got {cls.GRID_WIDTH}x{cls.GRID_HEIGHT})"
            )
        if not 0.0 <= cls.OBSTACLE_DENSITY < 1.0:
            raise ValueError(
                f"GRIDNAV_OBSTACLE_DENSITY must be in [0, 1) (got {cls.OBSTACLE_DENSITY})"
            )
        for name in ("STEP_DELAY", "MESSAGE_DELAY", "INVALID_DELAY"):
            if getattr(cls, name) < 0:
                raise ValueError(f"GRIDNAV_{name} must not be negative")

    @classmethod
    def session_settings(cls, **overrides) -> SessionSettings:
        """Build validated session settings, letting explicit overrides win."""
        values = {
            "width": cls.GRID_WIDTH,
            "height": cls.GRID_HEIGHT,
            "obstacle_density": cls.OBSTACLE_DENSITY,
            "seed": cls.SEED,
            "step_delay": cls.STEP_DELAY,
            "message_delay": cls.MESSAGE_DELAY,
            "invalid_delay": cls.INVALID_DELAY,
            "clear_target_on_no_path": cls.CLEAR_TARGET_ON_NO_PATH,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return SessionSettings(**values)

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "gridnav Configuration:",
            f"  Grid: {cls.GRID_WIDTH}x{cls.GRID_HEIGHT} (cols x rows)",
            f"  Obstacle density: {cls.OBSTACLE_DENSITY:.0%}",
            f"  Seed: {cls.SEED if cls.SEED is not None else 'random'}",
            f"  Step delay: {cls.STEP_DELAY}s",
            f"  Clear target on no path: {cls.CLEAR_TARGET_ON_NO_PATH}",
        ]
        return "\n".join(lines)
