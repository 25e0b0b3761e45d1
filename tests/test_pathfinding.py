import random
from collections import deque

from gridwalk.sim.grid import Direction, Grid, Point, parse_grid
from gridwalk.sim.pathfinding import PathSearch, SearchStatus, pathfind

RING = "XXXXX\nX   X\nX X X\nX   X\nXXXXX\n"


def test_ring_board_path() -> None:
    grid = parse_grid(RING)
    path = pathfind(grid, Point(1, 1), Point(3, 3))

    assert path == [Point(2, 1), Point(3, 1), Point(3, 2), Point(3, 3)]
    assert Point(2, 2) not in path


def test_enclosed_goal_is_unreachable() -> None:
    grid = parse_grid(
        "       \n"
        "   X   \n"
        "  X X  \n"
        "   X   \n"
        "       \n"
    )

    assert pathfind(grid, Point(0, 0), Point(3, 2)) is None


def test_blocked_goal_is_unreachable() -> None:
    grid = parse_grid(RING)

    assert pathfind(grid, Point(1, 1), Point(2, 2)) is None


def test_start_equals_goal() -> None:
    grid = parse_grid(RING)

    assert pathfind(grid, Point(1, 1), Point(1, 1)) == []


def test_off_grid_goal_is_unreachable() -> None:
    grid = parse_grid(RING)

    assert pathfind(grid, Point(1, 1), Point(9, 9)) is None
    assert pathfind(grid, Point(-1, 0), Point(3, 3)) is None


def test_empty_grid_search_fails_quietly() -> None:
    search = PathSearch(Grid.empty(), Point(0, 0), Point(1, 0))

    assert search.run() is None
    assert search.status == SearchStatus.FAILED
    assert pathfind(Grid.empty(), Point(0, 0), Point(1, 0)) is None


def test_search_state_machine() -> None:
    grid = parse_grid(RING)
    search = PathSearch(grid, Point(1, 1), Point(3, 3))

    assert search.status == SearchStatus.RUNNING
    assert search.step() == SearchStatus.RUNNING
    assert search.expanded == 1
    assert search.frontier.is_explored(Point(1, 1))
    assert len(search.frontier) == 2

    search.run()
    assert search.status == SearchStatus.SUCCEEDED
    assert search.done
    assert search.step() == SearchStatus.SUCCEEDED
    assert search.path is not None
    assert len(search.path) == 4


def test_failed_search_reports_status() -> None:
    grid = parse_grid("   \nXXX\n   \n")
    search = PathSearch(grid, Point(0, 0), Point(2, 2))

    assert search.run() is None
    assert search.status == SearchStatus.FAILED
    assert search.path is None
    assert search.expanded == 3


def test_pathfind_is_deterministic() -> None:
    grid = _random_grid(random.Random(7), 9, 7, 0.2)
    start, goal = Point(0, 0), Point(8, 6)
    grid = _clear(grid, start, goal)

    assert pathfind(grid, start, goal) == pathfind(grid, start, goal)


def test_paths_are_shortest_and_valid_on_random_grids() -> None:
    rng = random.Random(1234)
    checked = 0
    for _ in range(200):
        width = rng.randint(1, 8)
        height = rng.randint(1, 8)
        grid = _random_grid(rng, width, height, 0.3)
        start = Point(rng.randrange(width), rng.randrange(height))
        goal = Point(rng.randrange(width), rng.randrange(height))
        grid = _clear(grid, start)

        expected = _bfs_distance(grid, start, goal)
        path = pathfind(grid, start, goal)

        if expected is None:
            assert path is None
            continue
        assert path is not None
        assert len(path) == expected
        _assert_valid_path(grid, start, goal, path)
        checked += 1
    assert checked > 20


def _assert_valid_path(grid: Grid, start: Point, goal: Point, path: list[Point]) -> None:
    if start == goal:
        assert path == []
        return
    assert path[-1] == goal
    previous = start
    for cell in path:
        assert grid.in_bounds(cell)
        assert not grid.is_blocked(cell)
        Direction.between(previous, cell)
        previous = cell


def _bfs_distance(grid: Grid, start: Point, goal: Point) -> int | None:
    queue: deque[Point] = deque([start])
    distance = {start: 0}
    while queue:
        current = queue.popleft()
        if current == goal:
            return distance[current]
        for direction in Direction:
            neighbor = current.moved(direction)
            if neighbor in distance:
                continue
            if not grid.in_bounds(neighbor) or grid.is_blocked(neighbor):
                continue
            distance[neighbor] = distance[current] + 1
            queue.append(neighbor)
    return None


def _random_grid(rng: random.Random, width: int, height: int, density: float) -> Grid:
    rows = [
        "".join("X" if rng.random() < density else " " for _ in range(width))
        for _ in range(height)
    ]
    return parse_grid("\n".join(rows) + "\n")


def _clear(grid: Grid, *cells: Point) -> Grid:
    tiles = list(grid.tiles)
    for cell in cells:
        tiles[cell.x + cell.y * grid.width] = False
    return Grid(width=grid.width, tiles=tuple(tiles))
