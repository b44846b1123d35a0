"""
Bounded 2-D line intersection with a directional filter.

The source line is infinite; the second line is bounded by the box spanned by
its endpoints. Parallel lines, out-of-bounds points and points rejected by the
direction filter all give ``None``.
"""
import enum
from typing import Optional, Tuple

from . import _core


class Direction(enum.IntEnum):
    """Which side of the source line's start an intersection may lie on."""
    ANY = _core.ANY
    FORWARDS = _core.FORWARDS
    BACKWARDS = _core.BACKWARDS


def line_intersection(
    direction: Direction,
    # source line
    a: float, b: float,
    c: float, d: float,
    # intersecting line (bounded)
    f: float, g: float,
    h: float, i: float,
) -> Optional[Tuple[float, float]]:
    """
    Return ``(x, y)`` where the line (a,b)-(c,d) crosses the segment (f,g)-(h,i).

    ``x`` must lie between ``f`` and ``h`` and ``y`` between ``h`` and ``i``
    (both inclusive, in either order). With ``FORWARDS`` the point must not be
    behind ``(a, b)`` when looking towards ``(c, d)``; ``BACKWARDS`` is the
    reverse. Returns ``None`` otherwise.
    """
    ok, x, y = _core._line_intersection(
        int(Direction(direction)),
        float(a), float(b), float(c), float(d),
        float(f), float(g), float(h), float(i),
    )
    if not ok:
        return None
    return float(x), float(y)
