import pytest

from gridwalk.sim.grid import Direction, Grid, Point, parse_grid, validate_layout

RING = "XXXXX\nX   X\nX X X\nX   X\nXXXXX"


def test_parse_grid_dimensions_and_cells() -> None:
    grid = parse_grid(RING)

    assert grid.width == 5
    assert grid.height == 5
    assert len(grid.tiles) == grid.width * grid.height
    assert grid.is_blocked(Point(0, 0))
    assert grid.is_blocked(Point(2, 2))
    assert not grid.is_blocked(Point(1, 1))
    assert not grid.is_blocked(Point(3, 3))


def test_parse_grid_treats_non_x_characters_as_open() -> None:
    grid = parse_grid("X.o\n#X \n")

    assert grid.blocked_cells() == {Point(0, 0), Point(1, 1)}


def test_parse_grid_without_newline_is_empty() -> None:
    grid = parse_grid("XXXX")

    assert grid == Grid.empty()
    assert grid.height == 0
    assert not grid.in_bounds(Point(0, 0))


def test_parse_grid_handles_crlf_rows() -> None:
    grid = parse_grid("X \r\n X\r\n")

    assert grid.width == 2
    assert grid.height == 2
    assert grid.blocked_cells() == {Point(0, 0), Point(1, 1)}


def test_in_bounds_edges() -> None:
    grid = parse_grid("   \n   \n")

    assert grid.in_bounds(Point(0, 0))
    assert grid.in_bounds(Point(2, 1))
    assert not grid.in_bounds(Point(3, 0))
    assert not grid.in_bounds(Point(0, 2))
    assert not grid.in_bounds(Point(-1, 0))


def test_is_blocked_requires_bounds_check() -> None:
    grid = parse_grid(RING)

    with pytest.raises(IndexError):
        grid.is_blocked(Point(5, 0))


def test_validate_layout_rejects_degenerate_text() -> None:
    validate_layout(RING)
    validate_layout(RING + "\n")

    with pytest.raises(ValueError):
        validate_layout("XXX")
    with pytest.raises(ValueError):
        validate_layout("\nXXX\n")
    with pytest.raises(ValueError, match="row 1"):
        validate_layout("XXX\nXX\nXXX\n")


def test_direction_order_and_between() -> None:
    assert [direction.name for direction in Direction] == [
        "UP",
        "RIGHT",
        "DOWN",
        "LEFT",
    ]
    origin = Point(2, 2)
    for direction in Direction:
        assert Direction.between(origin, origin.moved(direction)) == direction

    with pytest.raises(ValueError):
        Direction.between(origin, Point(3, 3))
