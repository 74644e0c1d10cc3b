"""Low level clipping of lines and rings against a bounding box."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable

from boxclip.geometry import Bound, LineString, MultiLineString, Point, Ring

LEFT = 1
RIGHT = 2
BOTTOM = 4
TOP = 8


def bit_code(b: Bound, p: Point) -> int:
    """Return the position of the point relative to the box.

    The boundary counts as inside::

                left  mid  right
           top  1001  1000  1010
           mid  0001  0000  0010
        bottom  0101  0100  0110
    """
    x, y = p
    code = 0
    if x < b.min.x:
        code |= LEFT
    elif x > b.max.x:
        code |= RIGHT
    if y < b.min.y:
        code |= BOTTOM
    elif y > b.max.y:
        code |= TOP
    return code


def bit_code_open(b: Bound, p: Point) -> int:
    """Like :func:`bit_code`, but a point on the boundary counts as outside."""
    x, y = p
    code = 0
    if x <= b.min.x:
        code |= LEFT
    elif x >= b.max.x:
        code |= RIGHT
    if y <= b.min.y:
        code |= BOTTOM
    elif y >= b.max.y:
        code |= TOP
    return code


def intersect(box: Bound, edge: int, a: Point, b: Point) -> Point:
    """Intersect segment a-b with the box side chosen by the edge code."""
    ax, ay = a
    bx, by = b
    if edge & TOP:
        return Point(ax + (bx - ax) * (box.max.y - ay) / (by - ay), box.max.y)
    if edge & BOTTOM:
        return Point(ax + (bx - ax) * (box.min.y - ay) / (by - ay), box.min.y)
    if edge & RIGHT:
        return Point(box.max.x, ay + (by - ay) * (box.max.x - ax) / (bx - ax))
    if edge & LEFT:
        return Point(box.min.x, ay + (by - ay) * (box.min.x - ax) / (bx - ax))
    raise ValueError(f"edge code {edge} names no side of the box")


def clip_line(box: Bound, ls, open_bound: bool = False) -> MultiLineString:
    """Clip a line into the pieces that lie within the box.

    With ``open_bound`` the box is treated as open: lines along its sides
    are dropped and a point on the boundary splits the line.
    """
    out = MultiLineString()
    if not ls:
        return out

    code_of: Callable[[Bound, Point], int] = bit_code_open if open_bound else bit_code
    last = len(ls) - 1
    line = 0

    def push(p: Point) -> None:
        if line >= len(out):
            out.append(LineString())
        out[line].append(p)

    code_a = code_of(box, ls[0])
    for i, (a, b) in enumerate(pairwise(ls), start=1):
        code_b = code_of(box, b)
        end_code = code_b

        # a segment can cross the box several times, e.g. across a corner
        while True:
            if code_a | code_b == 0:
                push(a)
                if code_b != end_code:
                    # the segment left the box
                    push(b)
                    if i < last:
                        line += 1
                elif i == last:
                    push(b)
                break
            if code_a & code_b:
                # both ends on the same outer side
                break
            if code_a:
                a = intersect(box, code_a, a, b)
                code_a = bit_code(box, a)
            else:
                b = intersect(box, code_b, a, b)
                code_b = bit_code(box, b)

        code_a = end_code

    return out


def clip_ring(box: Bound, ring) -> Ring:
    """Clip a ring to the box; an empty ring means nothing is left."""
    if not ring:
        return Ring()

    init_closed = ring[0] == ring[-1]
    current = list(ring)

    for edge in (LEFT, RIGHT, BOTTOM, TOP):
        out = []
        # an unclosed ring is not implicitly closed
        prev = current[-1] if init_closed else current[0]
        prev_inside = not bit_code(box, prev) & edge

        for p in current:
            inside = not bit_code(box, p) & edge
            if inside != prev_inside:
                out.append(intersect(box, edge, prev, p))
            if inside:
                out.append(p)
            prev, prev_inside = p, inside

        if not out:
            return Ring()
        current = out

    if init_closed and current[0] != current[-1]:
        current.append(current[0])

    return Ring(current)