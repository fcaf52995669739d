import pytest

from photosynthesis.hex import Direction, HexCoord, hex_distance, step


def test_hexcoord_equality_is_structural() -> None:
    assert HexCoord(1, 2) == HexCoord(1, 2)
    assert HexCoord(1, 2) != HexCoord(2, 1)
    assert len({HexCoord(1, 2), HexCoord(1, 2)}) == 1


def test_hexcoord_arithmetic() -> None:
    assert HexCoord(1, 2) + HexCoord(3, -1) == HexCoord(4, 1)
    assert HexCoord(1, 2) - HexCoord(3, -1) == HexCoord(-2, 3)


def test_rotate_cw_wraps() -> None:
    assert Direction.EAST.rotate_cw() == Direction.SOUTH_EAST
    assert Direction.NORTH_EAST.rotate_cw() == Direction.EAST


def test_rotate_cw_has_period_six() -> None:
    for start in Direction:
        d = start
        for _ in range(6):
            d = d.rotate_cw()
        assert d == start


def test_opposite_directions_cancel() -> None:
    origin = HexCoord(0, 0)
    for d in Direction:
        assert step(step(origin, d), d.opposite()) == origin


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (0, 0), 0),
        ((0, 0), (1, 0), 1),
        ((0, 0), (1, -1), 1),
        ((0, 0), (1, 1), 2),
        ((3, 3), (6, 0), 3),
        ((0, 3), (6, 3), 6),
        ((3, 0), (0, 6), 6),
    ],
)
def test_hex_distance(a: tuple, b: tuple, expected: int) -> None:
    assert hex_distance(HexCoord(*a), HexCoord(*b)) == expected
    assert hex_distance(HexCoord(*b), HexCoord(*a)) == expected


def test_every_direction_is_one_step_away() -> None:
    origin = HexCoord(3, 3)
    neighbours = {step(origin, d) for d in Direction}
    assert len(neighbours) == 6
    assert all(hex_distance(origin, n) == 1 for n in neighbours)


def test_step_adds_direction_offset() -> None:
    origin = HexCoord(3, 3)
    assert step(origin, Direction.EAST) == HexCoord(4, 3)
    assert step(origin, Direction.SOUTH_WEST) == HexCoord(2, 4)
    assert step(origin, Direction.NORTH_EAST) == HexCoord(4, 2)
