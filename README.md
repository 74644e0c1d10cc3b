# boxclip

Planar geometry types and clipping of geometry to an axis-aligned bounding
box. Pure Python, no dependencies.

## Installation

```
pip install boxclip
```

## Geometry

`boxclip.geometry` provides:

- `Point`: a named tuple `(x, y)`.
- `Bound`: a closed box with `min` and `max` points. It is immutable; every
  method that changes it, such as `extend`, `union` and `pad`, returns a new
  bound. It also has `contains`, `intersects`, `center`, `top`, `bottom`,
  `left`, `right`, `left_top`, `right_bottom`, `is_empty`, `is_zero`,
  `to_ring` (counter clockwise and closed), `to_polygon` and `equal`.
- `MultiPoint`, `LineString` and `Ring`: lists of points. Any pair of numbers
  given to them is turned into a `Point`. `Ring.closed()` tells whether the
  first and last points are the same. `LineString.reverse()` reverses in place.
- `MultiLineString`, `Polygon` (outer ring first, then inner rings),
  `MultiPolygon` and `Collection` (a list of any geometries).
- `Orientation`: `CCW` and `CW`.

Every geometry has `bound()` and `dimensions()`. The list types also have
`clone()` and `equal()`. `clone(g)` makes a deep copy of any geometry and
raises `TypeError` for anything else. The module also holds the constants
`EARTH_RADIUS`, `DEFAULT_ROUNDING_FACTOR` and `EMPTY_BOUND`.

```python
from boxclip.geometry import Bound, Point

box = Bound(Point(0, 0), Point(3, 5))
box.extend(Point(6, -1))       # a new bound from (0, -1) to (6, 5)
box.contains(Point(2, 1))      # True: the boundary counts as inside
box.pad(0.5).center()          # Point(1.5, 2.5)
```

## Simple clipping

`boxclip.clip.helpers` cuts geometry at the edges of a box:
`geometry`, `multi_point`, `line_string`, `multi_line_string`, `ring`,
`polygon`, `multi_polygon`, `collection` and `bound` (the intersection of two
bounds, which may be empty). A line that leaves and re-enters the box comes
back as several pieces.

```python
from boxclip.geometry import Bound, Point, LineString
from boxclip.clip.helpers import geometry

box = Bound(Point(0, 0), Point(30, 30))
ls = LineString([
    (-10, 10), (10, 10), (10, -10), (20, -10), (20, 10), (40, 10),
    (40, 20), (20, 20), (20, 40), (10, 40), (10, 20), (5, 20), (-10, 20),
])
clipped = geometry(box, ls)
# MultiLineString of four pieces; the first is (0, 10) (10, 10) (10, 0)
```

`geometry` returns `None` when nothing is left inside the box, and a single
member instead of a one-member multi geometry or collection.

`line_string` and `multi_line_string` take `open_bound`. When it is set,
segments that run along the edge of the box are dropped, and a point that
lies on the edge splits the line.

The lower level functions are in `boxclip.clip.lineclip`: `clip_line`,
`clip_ring`, `bit_code`, `bit_code_open` and `intersect`.

## Smart clipping

`boxclip.smartclip.smart` clips rings and polygons so that the result is
made of closed polygons. Open pieces are joined by walking around the box in
the direction given (`Orientation.CCW` or `Orientation.CW`). Its functions
are `geometry`, `ring`, `polygon` and `multi_polygon`, together with the
steps they are built from, `clip_rings` and `smart_wrap`. Rings that are not
closed and have an endpoint inside the box are closed implicitly. Geometries
that are not two dimensional are passed on to simple clipping.

```python
from boxclip.geometry import Bound, Point, Ring, Orientation
from boxclip.smartclip.smart import ring

box = Bound(Point(1, 1), Point(6, 6))
r = Ring([(0, 2), (2, 2), (2, 3), (0, 3)])
ring(box, r, Orientation.CCW)
# a MultiPolygon with one polygon: (1, 2) (2, 2) (2, 3) (1, 3) (1, 2)
```

`ring`, `polygon` and `multi_polygon` return `None` when nothing is inside
the box. `multi_polygon` returns the input object itself when every outer
ring lies wholly inside the box.

`boxclip.smartclip.around_bound` has the helper that closes an open line by
following the sides of the box, `around_bound`, and `bit_code_open`,
`point_for` and `point_side`.

## What it does not do

boxclip has no command-line tool, and it does not read or write any file
format such as GeoJSON or WKT. It has no projections, distance measures or
simplification: only the geometry types above and clipping to a box.