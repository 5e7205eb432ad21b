from promethean.pathfinding import find_path


def _open(width, height):
    return [[0] * width for _ in range(height)]


def _assert_connected(path):
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        assert abs(x0 - x1) + abs(y0 - y1) == 1


def test_open_grid_path_is_shortest_and_connected():
    path = find_path(_open(3, 3), (0, 0), (2, 2))
    assert path[0] == (0, 0)
    assert path[-1] == (2, 2)
    assert len(path) == 5
    _assert_connected(path)


def test_start_equals_goal():
    assert find_path(_open(2, 2), (1, 1), (1, 1)) == [(1, 1)]


def test_invalid_endpoints_give_empty_path():
    grid = [[1, 0], [0, 0]]
    assert find_path(grid, (0, 0), (1, 1)) == []
    assert find_path(grid, (1, 1), (0, 0)) == []
    assert find_path(grid, (5, 0), (1, 1)) == []
    assert find_path(grid, (-1, 0), (1, 1)) == []


def test_empty_grid():
    assert find_path([], (0, 0), (0, 0)) == []
    assert find_path([[]], (0, 0), (0, 0)) == []


def test_walled_off_goal():
    grid = [
        [0, 1, 0],
        [0, 1, 0],
        [0, 1, 0],
    ]
    assert find_path(grid, (0, 0), (2, 0)) == []


def test_corridor_has_unique_path():
    grid = [
        [0, 1, 0],
        [0, 1, 0],
        [0, 0, 0],
    ]
    path = find_path(grid, (0, 0), (2, 0))
    assert path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]


def test_path_avoids_obstacles():
    grid = [
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 1, 0],
        [1, 1, 0, 1, 0],
        [0, 0, 0, 0, 0],
    ]
    path = find_path(grid, (0, 4), (4, 0))
    assert path[0] == (0, 4) and path[-1] == (4, 0)
    assert all(grid[y][x] == 0 for x, y in path)
    _assert_connected(path)
    assert len(set(path)) == len(path)


def test_long_path_is_truncated_from_the_start():
    grid = [[0] * 2000]
    path = find_path(grid, (0, 0), (1999, 0))
    assert len(path) == 1025
    assert path[-1] == (1999, 0)
    assert path[0] != (0, 0)
    _assert_connected(path)