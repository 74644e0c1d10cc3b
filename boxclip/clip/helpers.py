"""Clip any geometry to a bounding box."""

from __future__ import annotations

from boxclip.clip.lineclip import clip_line, clip_ring
from boxclip.geometry import (
    Bound,
    Collection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
)


def geometry(b: Bound, g):
    """Clip the geometry to the bound with the function for its type.

    A result with a single member is returned as that member; a result with
    nothing left is returned as None.
    """
    if g is None:
        return None
    if not b.intersects(g.bound()):
        return None

    if isinstance(g, Point):
        return g
    if isinstance(g, Bound):
        result = bound(b, g)
        return None if result.is_empty() else result
    if isinstance(g, MultiPoint):
        return _single_or_none(multi_point(b, g))
    if isinstance(g, LineString):
        return _single_or_none(line_string(b, g))
    if isinstance(g, MultiLineString):
        return _single_or_none(multi_line_string(b, g))
    if isinstance(g, Ring):
        return ring(b, g)
    if isinstance(g, Polygon):
        return polygon(b, g)
    if isinstance(g, MultiPolygon):
        return _single_or_none(multi_polygon(b, g))
    if isinstance(g, Collection):
        return _single_or_none(collection(b, g))

    raise TypeError(f"geometry type not supported: {type(g).__name__}")


def _single_or_none(items):
    if len(items) == 1:
        return items[0]
    if not items:
        return None
    return items


def multi_point(b: Bound, mp) -> MultiPoint:
    """Return the points that lie within the bound."""
    return MultiPoint(p for p in mp if b.contains(p))


def line_string(b: Bound, ls, open_bound: bool = False) -> MultiLineString:
    """Clip the line string to the bound, possibly into several pieces."""
    return clip_line(b, ls, open_bound)


def multi_line_string(b: Bound, mls, open_bound: bool = False) -> MultiLineString:
    """Clip every line string and return all the pieces together."""
    result = MultiLineString()
    for ls in mls:
        result.extend(clip_line(b, ls, open_bound))
    return result


def ring(b: Bound, r) -> Ring | None:
    """Clip the ring to the bound; None if nothing is left."""
    result = clip_ring(b, r)
    return result if result else None


def polygon(b: Bound, p) -> Polygon | None:
    """Clip the polygon, dropping inner rings that fall outside the bound."""
    if not p:
        return None
    outer = ring(b, p[0])
    if outer is None:
        return None
    result = Polygon([outer])
    for inner in p[1:]:
        clipped = ring(b, inner)
        if clipped is not None:
            result.append(clipped)
    return result


def multi_polygon(b: Bound, mp) -> MultiPolygon:
    """Clip every polygon, dropping those that fall outside the bound."""
    result = MultiPolygon()
    for p in mp:
        clipped = polygon(b, p)
        if clipped is not None:
            result.append(clipped)
    return result


def collection(b: Bound, c) -> Collection:
    """Clip every member, dropping those that fall outside the bound."""
    result = Collection()
    for g in c:
        clipped = geometry(b, g)
        if clipped is not None:
            result.append(clipped)
    return result


def bound(b: Bound, other: Bound) -> Bound:
    """Intersect two bounds; the result may be empty."""
    if b.is_empty():
        return other
    if other.is_empty():
        return b
    return Bound(
        Point(max(b.min.x, other.min.x), max(b.min.y, other.min.y)),
        Point(min(b.max.x, other.max.x), min(b.max.y, other.max.y)),
    )