"""Close an open line by wrapping it around the sides of a bounding box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from boxclip.geometry import Bound, LineString, Orientation, Point, Ring

__all__ = [
    "NEXTS",
    "NOT_ON_SIDE",
    "around_bound",
    "bit_code_open",
    "point_for",
    "point_side",
]

NOT_ON_SIDE = 0xFF
"""Side value of a point that lies on no side of the bound."""

#         left  mid  right
#    top     9     8    10
#    mid     1     0     2
# bottom     5     4     6
NEXTS: dict[Orientation, dict[int, int]] = {
    Orientation.CW: {1: 9, 2: 6, 4: 5, 5: 1, 6: 4, 8: 10, 9: 8, 10: 2},
    Orientation.CCW: {1: 5, 2: 10, 4: 6, 5: 4, 6: 2, 8: 9, 9: 1, 10: 8},
}
"""For each orientation, the bit code of the next side or corner around the box."""


def bit_code_open(b: Bound, p: Iterable[float]) -> int:
    """Return the position of the point relative to the bound.

    A point on the boundary counts as outside.
    """
    x, y = p
    code = 0
    if x <= b.min.x:
        code |= 1
    elif x >= b.max.x:
        code |= 2
    if y <= b.min.y:
        code |= 4
    elif y >= b.max.y:
        code |= 8
    return code


def point_for(b: Bound, code: int) -> Point:
    """Return a representative point for the side or corner of a bit code."""
    mid_x = (b.max.x + b.min.x) / 2
    mid_y = (b.max.y + b.min.y) / 2
    points = {
        1: (b.min.x, mid_y),
        2: (b.max.x, mid_y),
        4: (mid_x, b.min.y),
        5: (b.min.x, b.min.y),
        6: (b.max.x, b.min.y),
        8: (mid_x, b.max.y),
        9: (b.min.x, b.max.y),
        10: (b.max.x, b.max.y),
    }
    try:
        return Point(*points[code])
    except KeyError:
        raise ValueError(f"invalid bit code: {code}") from None


def point_side(b: Bound, p: Iterable[float]) -> int:
    """Return the side of the bound the point lies on.

    ::

            4
           +-+
         1 | | 3
           +-+
            2

    A point on no side gives :data:`NOT_ON_SIDE`.
    """
    x, y = p
    if y == b.max.y:
        return 4
    if y == b.min.y:
        return 2
    if x == b.max.x:
        return 3
    if x == b.min.x:
        return 1
    return NOT_ON_SIDE


@dataclass(eq=False)
class _Endpoint:
    """One end of an open line whose ends lie on the boundary."""

    point: Point
    start: bool
    side: int
    line: LineString
    used: bool = False
    other_end: Optional["_Endpoint"] = None

    def before(self) -> Point:
        """The point that settles ties between endpoints at the same place."""
        return self.line[0] if self.start else self.line[-2]


def _order_key(ep: _Endpoint) -> tuple:
    side = ep.side
    if side == NOT_ON_SIDE:
        return (side,)
    before = ep.before()
    if side == 1:
        return (side, -ep.point.y, -before.y)
    if side == 2:
        return (side, ep.point.x, before.x)
    if side == 3:
        return (side, ep.point.y, before.y)
    return (side, -ep.point.x, -before.x)


def _sort_endpoints(points: list[_Endpoint], orientation: Orientation) -> list[_Endpoint]:
    """Order the endpoints around the bound in the given direction."""
    if sum(ep.side == NOT_ON_SIDE for ep in points) > 1:
        raise ValueError("endpoints must lie on the boundary of the bound")
    return sorted(points, key=_order_key, reverse=orientation == Orientation.CW)


def around_bound(box: Bound, ring: Iterable, orientation: Orientation) -> Optional[Ring]:
    """Connect the endpoints of a line by wrapping it around the bound.

    Returns a new ring: the input points followed by the corners passed on
    the way round and the first point again. None if the input is empty.
    """
    if orientation not in (Orientation.CCW, Orientation.CW):
        raise ValueError(f"invalid orientation: {orientation!r}")

    result = Ring(ring)
    if not result:
        return None

    nexts = NEXTS[Orientation(orientation)]
    first, last = result[0], result[-1]

    target = bit_code_open(box, first)
    current = bit_code_open(box, last)
    if target == 0 or current == 0:
        raise ValueError("endpoints must be outside the bound")

    if current == target:
        # both ends on the same side: either just connect them
        # or go all the way around
        line = LineString(result)
        endpoints = [
            _Endpoint(first, True, point_side(box, first), line),
            _Endpoint(last, False, point_side(box, last), line),
        ]
        if not _sort_endpoints(endpoints, orientation)[0].start:
            if first != result[-1]:
                result.append(first)
            return result

    current = nexts[current]
    while current != target:
        result.append(point_for(box, current))
        current = nexts[current]

    result.append(first)
    return result