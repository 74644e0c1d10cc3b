import pytest

from boxclip.geometry import Bound, Orientation, Point, Ring
from boxclip.smartclip.around_bound import (
    NEXTS,
    NOT_ON_SIDE,
    around_bound,
    bit_code_open,
    point_for,
    point_side,
)

CCW = Orientation.CCW
CW = Orientation.CW


def test_nexts_are_inverse():
    for code, nxt in NEXTS[CW].items():
        assert NEXTS[CCW][nxt] == code


CASES = [
    (
        "simple ccw",
        Bound((-1, -1), (1, 1)),
        [(-1, -1), (1, 1)],
        [(-1, -1), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1)],
        CCW,
    ),
    (
        "simple cw",
        Bound((-1, -1), (1, 1)),
        [(-1, -1), (1, 1)],
        [(-1, -1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1)],
        CW,
    ),
    (
        "wrap edge around whole box ccw",
        Bound((1, 1), (6, 6)),
        [(1, 3), (1, 2)],
        [(1, 3), (1, 2), (1, 1), (3.5, 1), (6, 1), (6, 3.5), (6, 6), (3.5, 6), (1, 6), (1, 3)],
        CCW,
    ),
    (
        "wrap around whole box ccw",
        Bound((-1, -1), (1, 1)),
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5)],
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5), (-1, -1), (0, -1), (1, -1),
         (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0.5)],
        CCW,
    ),
    (
        "wrap around whole box cw",
        Bound((-1, -1), (1, 1)),
        [(-1, -0.5), (0, -0.5), (0, 0.5), (-1, 0.5)],
        [(-1, -0.5), (0, -0.5), (0, 0.5), (-1, 0.5), (-1, 1), (0, 1), (1, 1),
         (1, 0), (1, -1), (0, -1), (-1, -1), (-1, -0.5)],
        CW,
    ),
    (
        "already cw with endpoints in same section",
        Bound((-1, -1), (1, 1)),
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5)],
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5), (-1, 0.5)],
        CW,
    ),
    (
        "cw but want ccw with endpoints in same section",
        Bound((-1, -1), (1, 1)),
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5)],
        [(-1, 0.5), (0, 0.5), (0, -0.5), (-1, -0.5), (-1, -1), (0, -1), (1, -1),
         (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0.5)],
        CCW,
    ),
    (
        "one point on edge ccw",
        Bound((-1, -1), (1, 1)),
        [(-1, 0.0), (-0.5, -0.5), (0, 0), (-0.5, 0.5), (-1, 0.0)],
        [(-1, 0.0), (-0.5, -0.5), (0, 0), (-0.5, 0.5), (-1, 0.0)],
        CCW,
    ),
    (
        "one point on edge cw",
        Bound((-1, -1), (1, 1)),
        [(-1, 0.0), (-0.5, -0.5), (0, 0), (-0.5, 0.5), (-1, 0.0)],
        [(-1, 0.0), (-0.5, -0.5), (0, 0), (-0.5, 0.5), (-1, 0.0), (-1, 1), (0, 1),
         (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0)],
        CW,
    ),
]


@pytest.mark.parametrize("name,box,given,expected,orientation", CASES, ids=[c[0] for c in CASES])
def test_around_bound(name, box, given, expected, orientation):
    assert around_bound(box, Ring(given), orientation) == Ring(expected)


def test_around_bound_does_not_modify_input():
    given = Ring([(-1, -1), (1, 1)])
    around_bound(Bound((-1, -1), (1, 1)), given, CCW)
    assert given == Ring([(-1, -1), (1, 1)])


def test_around_bound_empty_input():
    assert around_bound(Bound((0, 0), (1, 1)), Ring(), CCW) is None


def test_around_bound_invalid_orientation():
    with pytest.raises(ValueError):
        around_bound(Bound((0, 0), (1, 1)), Ring([(0, 0), (1, 1)]), 0)


def test_around_bound_endpoint_inside():
    with pytest.raises(ValueError):
        around_bound(Bound((0, 0), (2, 2)), Ring([(1, 1), (2, 2)]), CCW)


def test_point_for_corners_and_sides():
    box = Bound((0, 0), (4, 2))
    assert point_for(box, 1) == Point(0, 1)
    assert point_for(box, 2) == Point(4, 1)
    assert point_for(box, 4) == Point(2, 0)
    assert point_for(box, 5) == Point(0, 0)
    assert point_for(box, 6) == Point(4, 0)
    assert point_for(box, 8) == Point(2, 2)
    assert point_for(box, 9) == Point(0, 2)
    assert point_for(box, 10) == Point(4, 2)


def test_point_for_invalid_code():
    with pytest.raises(ValueError):
        point_for(Bound((0, 0), (1, 1)), 3)


def test_point_side():
    box = Bound((0, 0), (4, 4))
    assert point_side(box, (0, 2)) == 1
    assert point_side(box, (2, 0)) == 2
    assert point_side(box, (4, 2)) == 3
    assert point_side(box, (2, 4)) == 4
    assert point_side(box, (4, 4)) == 4
    assert point_side(box, (2, 2)) == NOT_ON_SIDE


def test_bit_code_open_boundary_is_outside():
    box = Bound((0, 0), (4, 4))
    assert bit_code_open(box, (2, 2)) == 0
    assert bit_code_open(box, (0, 2)) == 1
    assert bit_code_open(box, (4, 4)) == 10