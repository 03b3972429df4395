"""Tests for environment helper utilities."""

from gridnav.environment import (
    Cell,
    Grid,
    GridState,
    bfs_distance,
    grid_shortest_path,
    is_adjacent,
    is_orthogonal_path,
    manhattan_distance,
    neighbors4,
    render_ascii,
    validate_target,
)


def test_manhattan_distance_and_adjacency():
    assert manhattan_distance((0, 0), (3, 4)) == 7
    assert manhattan_distance((5, 2), (5, 2)) == 0
    assert is_adjacent((1, 1), (0, 1))
    assert not is_adjacent((1, 1), (0, 0))
    assert not is_adjacent((1, 1), (1, 1))


def test_neighbors4_order_and_filtering():
    grid = Grid.from_rows([
        "...",
        ".#.",
        "...",
    ])

    # up, down, left, right
    assert list(neighbors4(grid, (1, 0))) == [(0, 0), (2, 0)]
    assert list(neighbors4(grid, (0, 1))) == [(0, 0), (0, 2)]
    assert list(neighbors4(grid, (2, 2))) == [(1, 2), (2, 1)]


def test_grid_shortest_path():
    grid = Grid.from_rows([
        "....",
        ".##.",
        "....",
        "....",
    ])

    path = grid_shortest_path(grid, (0, 0), (2, 3))
    assert path is not None
    assert path[0] == (0, 0)
    assert path[-1] == (2, 3)
    assert (1, 1) not in path and (1, 2) not in path
    assert bfs_distance(grid, (0, 0), (2, 3)) == 5


def test_grid_shortest_path_disconnected():
    grid = Grid.from_rows([
        ".#.",
        "##.",
        "...",
    ])

    assert grid_shortest_path(grid, (0, 0), (2, 2)) is None
    assert bfs_distance(grid, (0, 0), (2, 2)) is None
    assert grid_shortest_path(grid, (0, 0), (0, 0)) == [(0, 0)]


def test_is_orthogonal_path():
    grid = Grid.from_rows([
        "...",
        ".#.",
    ])

    assert is_orthogonal_path(grid, (0, 0), [(0, 1), (0, 2), (1, 2)])
    assert is_orthogonal_path(grid, (0, 0), [])
    # Diagonal step
    assert not is_orthogonal_path(grid, (0, 0), [(1, 1)])
    # Through an obstacle
    assert not is_orthogonal_path(grid, (0, 1), [(1, 1)])
    # Off the grid
    assert not is_orthogonal_path(grid, (0, 2), [(0, 3)])


def test_validate_target():
    # 10-row grid: valid rows are 0..9
    grid = Grid.generate(20, 10, obstacle_density=0.0)
    grid.set_cell((4, 4), Cell.OBSTACLE)

    assert validate_target(grid, (9, 19)) is True
    assert validate_target(grid, [3, 3]) is True
    assert validate_target(grid, (10, 0)) is False
    assert validate_target(grid, (0, 20)) is False
    assert validate_target(grid, (-1, 0)) is False
    assert validate_target(grid, (4, 4)) is False


def test_render_ascii_uses_layout_symbols():
    grid = Grid.from_rows(["P*T", ".#."])
    state = grid.snapshot()

    assert render_ascii(state) == "P*T\n.#."
    assert render_ascii(state, symbols={Cell.OBSTACLE: "X"}) == "P*T\n.X."
    assert isinstance(state, GridState)
