"""Planar geometry types: points, bounds, lines, rings and polygons."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, NamedTuple, Union

EARTH_RADIUS = 6378137.0
"""Radius of the earth in meters, matching WGS84 Web Mercator."""

DEFAULT_ROUNDING_FACTOR = 1e6
"""Default rounding factor: six decimal places."""


class Orientation(IntEnum):
    """Order of the points in a closed ring, by the right hand rule."""

    CCW = 1
    CW = -1


class Point(NamedTuple):
    """A two dimensional point."""

    x: float
    y: float

    def bound(self) -> Bound:
        """Return the degenerate bound that holds only this point."""
        return Bound(self, self)

    def dimensions(self) -> int:
        """A point is a 0d object."""
        return 0


def _as_point(p: Iterable[float]) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Bound:
    """A closed axis aligned box."""

    min: Point = field(default_factory=lambda: Point(0.0, 0.0))
    max: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _as_point(self.min))
        object.__setattr__(self, "max", _as_point(self.max))

    def geojson_type(self) -> str:
        """A bound is represented as a GeoJSON polygon."""
        return "Polygon"

    def dimensions(self) -> int:
        """A bound is a 2d object."""
        return 2

    def to_polygon(self) -> Polygon:
        """Return the bound as a single ring polygon."""
        return Polygon([self.to_ring()])

    def to_ring(self) -> Ring:
        """Return the closed, counter clockwise boundary of the box."""
        return Ring(
            [
                self.min,
                Point(self.max.x, self.min.y),
                self.max,
                Point(self.min.x, self.max.y),
                self.min,
            ]
        )

    def extend(self, point: Iterable[float]) -> Bound:
        """Return a bound grown to include the point."""
        point = _as_point(point)
        if self.contains(point):
            return self
        return Bound(
            Point(min(self.min.x, point.x), min(self.min.y, point.y)),
            Point(max(self.max.x, point.x), max(self.max.y, point.y)),
        )

    def union(self, other: Bound) -> Bound:
        """Return a bound that holds both this bound and the other."""
        if other.is_empty():
            return self
        result = self
        for corner in (other.min, other.max, other.left_top(), other.right_bottom()):
            result = result.extend(corner)
        return result

    def contains(self, point: Iterable[float]) -> bool:
        """Whether the point is within the bound; the boundary counts as within."""
        x, y = point
        if y < self.min.y or self.max.y < y:
            return False
        if x < self.min.x or self.max.x < x:
            return False
        return True

    def intersects(self, other: Bound) -> bool:
        """Whether two bounds intersect; touching counts."""
        return not (
            self.max.x < other.min.x
            or self.min.x > other.max.x
            or self.max.y < other.min.y
            or self.min.y > other.max.y
        )

    def pad(self, d: float) -> Bound:
        """Return the bound extended by d in every direction."""
        return Bound(
            Point(self.min.x - d, self.min.y - d),
            Point(self.max.x + d, self.max.y + d),
        )

    def center(self) -> Point:
        """Return the average of the corners."""
        return Point((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def top(self) -> float:
        return self.max.y

    def bottom(self) -> float:
        return self.min.y

    def right(self) -> float:
        return self.max.x

    def left(self) -> float:
        return self.min.x

    def left_top(self) -> Point:
        return Point(self.left(), self.top())

    def right_bottom(self) -> Point:
        return Point(self.right(), self.bottom())

    def is_empty(self) -> bool:
        """Whether the bound is malformed, with min beyond max on an axis."""
        return self.min.x > self.max.x or self.min.y > self.max.y

    def is_zero(self) -> bool:
        """Whether the bound holds only the origin."""
        origin = Point(0.0, 0.0)
        return self.max == origin and self.min == origin

    def bound(self) -> Bound:
        return self

    def equal(self, other: Bound) -> bool:
        return self.min == other.min and self.max == other.max


EMPTY_BOUND = Bound(Point(1.0, 1.0), Point(-1.0, -1.0))


def _points_bound(points) -> Bound:
    if not points:
        return EMPTY_BOUND
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bound(Point(min(xs), min(ys)), Point(max(xs), max(ys)))


def _points_equal(a, b) -> bool:
    return len(a) == len(b) and all(
        _as_point(p) == _as_point(q) for p, q in zip(a, b)
    )


def _children_bound(children) -> Bound:
    if not children:
        return EMPTY_BOUND
    result = children[0].bound()
    for child in children[1:]:
        result = result.union(child.bound())
    return result


def _children_equal(a, b) -> bool:
    return len(a) == len(b) and all(p.equal(q) for p, q in zip(a, b))


class _PointList(list):
    """A list of points."""

    def __init__(self, points: Iterable[Iterable[float]] = ()) -> None:
        super().__init__(_as_point(p) for p in points)


class MultiPoint(_PointList):
    """A set of points."""

    def bound(self) -> Bound:
        return _points_bound(self)

    def dimensions(self) -> int:
        return 0

    def clone(self) -> MultiPoint:
        return MultiPoint(self)

    def equal(self, other) -> bool:
        return _points_equal(self, other)


class LineString(_PointList):
    """A sequence of connected points."""

    def bound(self) -> Bound:
        return _points_bound(self)

    def dimensions(self) -> int:
        return 1

    def clone(self) -> LineString:
        return LineString(self)

    def equal(self, other) -> bool:
        return _points_equal(self, other)

    def reverse(self) -> None:
        """Reverse the points in place."""
        super().reverse()


class Ring(_PointList):
    """A closed loop of points."""

    def bound(self) -> Bound:
        return _points_bound(self)

    def dimensions(self) -> int:
        return 2

    def clone(self) -> Ring:
        return Ring(self)

    def equal(self, other) -> bool:
        return _points_equal(self, other)

    def closed(self) -> bool:
        """Whether the first and last points are the same."""
        return bool(self) and self[0] == self[-1]


class _Nested(list):
    """A list of child geometries of one type."""

    _child: type = list

    def __init__(self, children: Iterable = ()) -> None:
        super().__init__(self._child(c) for c in children)


class MultiLineString(_Nested):
    """A set of line strings."""

    _child = LineString

    def bound(self) -> Bound:
        return _children_bound(self)

    def dimensions(self) -> int:
        return 1

    def clone(self) -> MultiLineString:
        return MultiLineString(self)

    def equal(self, other) -> bool:
        return _children_equal(self, other)


class Polygon(_Nested):
    """An outer ring followed by any number of inner rings."""

    _child = Ring

    def bound(self) -> Bound:
        if not self:
            return EMPTY_BOUND
        return self[0].bound()

    def dimensions(self) -> int:
        return 2

    def clone(self) -> Polygon:
        return Polygon(self)

    def equal(self, other) -> bool:
        return _children_equal(self, other)


class MultiPolygon(_Nested):
    """A set of polygons."""

    _child = Polygon

    def bound(self) -> Bound:
        return _children_bound(self)

    def dimensions(self) -> int:
        return 2

    def clone(self) -> MultiPolygon:
        return MultiPolygon(self)

    def equal(self, other) -> bool:
        return _children_equal(self, other)


class Collection(list):
    """A heterogeneous list of geometries."""

    def bound(self) -> Bound:
        return _children_bound([g for g in self if g is not None])

    def dimensions(self) -> int:
        return max((g.dimensions() for g in self), default=-1)

    def clone(self) -> Collection:
        return Collection(clone(g) for g in self)

    def equal(self, other) -> bool:
        return len(self) == len(other) and all(
            _geometry_equal(a, b) for a, b in zip(self, other)
        )


Geometry = Union[
    Point, MultiPoint, LineString, MultiLineString, Ring, Polygon, MultiPolygon,
    Collection, Bound,
]


def _geometry_equal(a, b) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if type(a) is not type(b):
        return False
    if isinstance(a, Point):
        return a == b
    return a.equal(b)


def clone(g):
    """Return a deep copy of the geometry; None stays None."""
    if g is None:
        return None
    if isinstance(g, (Point, Bound)):
        return g
    if isinstance(g, (_PointList, _Nested, Collection)):
        return g.clone()
    raise TypeError(f"geometry type not supported: {type(g).__name__}")