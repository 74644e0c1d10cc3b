"""Clip rings and polygons to a bound, wrapping open pieces along its sides."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, Optional

from boxclip.clip import helpers
from boxclip.geometry import (
    Bound,
    Collection,
    LineString,
    MultiPolygon,
    Orientation,
    Point,
    Polygon,
    Ring,
)
from boxclip.smartclip.around_bound import (
    NOT_ON_SIDE,
    _Endpoint,
    _sort_endpoints,
    around_bound,
    point_side,
)


def geometry(box: Bound, g, orientation: Orientation):
    """Smart clip a geometry to the bound, returning simple geometries.

    Geometries that are not two dimensional are clipped the plain way.
    Rings that are not closed and have an endpoint in the bound are
    implicitly closed.
    """
    if g is None:
        return None
    if g.dimensions() != 2:
        return helpers.geometry(box, g)

    if isinstance(g, Bound):
        return helpers.geometry(box, g)
    if isinstance(g, Ring):
        mp = ring(box, g, orientation)
    elif isinstance(g, Polygon):
        mp = polygon(box, g, orientation)
    elif isinstance(g, MultiPolygon):
        mp = multi_polygon(box, g, orientation)
    elif isinstance(g, Collection):
        result = Collection()
        for member in g:
            clipped = geometry(box, member, orientation)
            if clipped is not None:
                result.append(clipped)
        if len(result) == 1:
            return result[0]
        return result
    else:
        raise TypeError(f"geometry type not supported: {type(g).__name__}")

    if not mp:
        return None
    if len(mp) == 1:
        return mp[0]
    return mp


def ring(box: Bound, r, orientation: Orientation) -> Optional[MultiPolygon]:
    """Smart clip a ring; the result may hold several polygons.

    None if nothing of the ring is within the bound.
    """
    if not r:
        return None

    open_lines, closed = clip_rings(box, [r])
    if not open_lines:
        if not closed:
            return None
        return MultiPolygon([Polygon([r])])

    return smart_wrap(box, open_lines, orientation) or None


def polygon(box: Bound, p, orientation: Orientation) -> Optional[MultiPolygon]:
    """Smart clip a polygon; None if nothing of it is within the bound."""
    if not p:
        return None

    open_lines, closed = clip_rings(box, p)
    if not open_lines:
        if not closed:
            return None
        return MultiPolygon([p])

    result = smart_wrap(box, open_lines, orientation)
    if len(result) == 1:
        result[0].extend(closed)
    else:
        for inner in closed:
            _add_to_multi_polygon(result, inner)

    return result or None


def multi_polygon(box: Bound, mp, orientation: Orientation) -> Optional[MultiPolygon]:
    """Smart clip a multipolygon; None if nothing of it is within the bound."""
    if not mp:
        return None

    outers, closed_outers = clip_rings(box, [p[0] for p in mp])
    if not outers:
        if not closed_outers:
            return None
        return mp if isinstance(mp, MultiPolygon) else MultiPolygon(mp)

    inner_rings = list(chain.from_iterable(p[1:] for p in mp))
    inners, closed_inners = clip_rings(box, inner_rings)

    result = smart_wrap(box, outers + inners, orientation)
    for outer in closed_outers:
        result.append(Polygon([outer]))
    for inner in closed_inners:
        _add_to_multi_polygon(result, inner)

    return result or None


def clip_rings(box: Bound, rings: Iterable) -> tuple[list[LineString], list[Ring]]:
    """Clip rings to the bound.

    Returns the open lines whose endpoints lie on the boundary and the
    closed rings that lie inside the bound.
    """
    pieces: list[LineString] = []
    for r in rings:
        r = Ring(r)
        if not r:
            continue
        if not r.closed() and (box.contains(r[0]) or box.contains(r[-1])):
            r.append(r[0])

        out = list(helpers.line_string(box, LineString(r), open_bound=True))
        if not out:
            continue

        if r.closed():
            _join_sections(box, out)

        pieces.extend(out)

    open_lines: list[LineString] = []
    closed: list[Ring] = []
    for ls in pieces:
        # a closed piece is completely inside unless it touches the boundary
        if ls[0] == ls[-1] and point_side(box, ls[0]) == NOT_ON_SIDE:
            closed.append(Ring(ls))
        else:
            open_lines.append(ls)

    return open_lines, closed


def _join_sections(box: Bound, out: list[LineString]) -> None:
    """Join, in place, pieces of a closed ring that meet inside the bound."""
    i = 0
    while i < len(out):
        end = out[i][-1]
        if end.x in (box.min.x, box.max.x) or end.y in (box.min.y, box.max.y):
            # only an endpoint within the bound can be joined
            i += 1
            continue

        j = 0
        while j < len(out):
            if i != j and out[j][0] == end:
                out[i] = LineString(out[i] + out[j][1:])
                i -= 1
                out[j] = out[-1]
                out.pop()
            j += 1
        i += 1


def smart_wrap(box: Bound, lines: Iterable, orientation: Orientation) -> MultiPolygon:
    """Connect open lines whose endpoints lie on the boundary into polygons."""
    points: list[_Endpoint] = []
    for line in lines:
        line = LineString(line)
        start = _Endpoint(line[0], True, point_side(box, line[0]), line)
        end = _Endpoint(line[-1], False, point_side(box, line[-1]), line)
        start.other_end, end.other_end = end, start
        points.extend((start, end))

    points = _sort_endpoints(points, orientation)
    position = {id(ep): k for k, ep in enumerate(points)}

    result = MultiPolygon()
    current = Ring()
    count = len(points)

    i = 0
    while i < 2 * count:
        ep = points[i % count]
        if ep.used:
            i += 1
            continue

        if not ep.start:
            if not current:
                current = Ring(ep.line)
                ep.used = True
            i += 1
            continue

        if not current:
            i += 1
            continue
        ep.used = True

        # the previous endpoint was an end, connect it to this start
        if ep.point == current[-1]:
            link: list[Point] = []
        else:
            link = list(around_bound(box, Ring([ep.point, current[-1]]), orientation))

        if ep.point == current[0]:
            current.extend(link[2:])
            result.append(Polygon([current]))
            current = Ring()
            i = 0  # start over looking for unused endpoints
            continue

        if len(link) > 2:
            current.extend(link[2:-1])
        current.extend(ep.line)

        ep.other_end.used = True
        i = position[id(ep.other_end)] + 1

    return result


def _add_to_multi_polygon(mp: MultiPolygon, inner: Ring) -> None:
    """Add the ring to the first polygon that contains it, if any."""
    for p in mp:
        if _polygon_contains(p[0], inner):
            p.append(inner)
            return


def _polygon_contains(outer: Ring, r: Ring) -> bool:
    """Whether any point of the ring lies inside the outer ring."""
    if not outer:
        return False
    previous = [outer[-1], *outer[:-1]]
    for x, y in r:
        inside = False
        for (xi, yi), (xj, yj) in zip(outer, previous):
            if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
                inside = not inside
        if inside:
            return True
    return False