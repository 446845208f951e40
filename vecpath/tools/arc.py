"""
Circular arcs approximated by cubic beziers.

Every arc is built from a single quarter circle bezier running from 0 to 90
degrees on the unit circle. Whole quadrants are that bezier rotated and
scaled into place. Arcs that start or end inside a quadrant use the part of
it between the fractional positions, cut out by De Casteljau.

quadrant
 2 | 3
---+---
 1 | 0
"""
import math

from vecpath.tools.bezier import CubicBezier
from vecpath.tools.segments import EPSILON, Command

HALF_PI = math.pi / 2
KAPPA = (4 * (math.sqrt(2) - 1)) / 3
SIN_Q = (0, 1, 0, -1)
COS_Q = (1, 0, -1, 0)

UNIT_QUAD_BEZIER = CubicBezier(1 + 0j, complex(1, KAPPA), complex(KAPPA, 1), 1j)

# Control points of the quarter circle in quadrant 0, without its start.
QUAD_POINTS = (complex(1, KAPPA), complex(KAPPA, 1), 1j)


def _place(points, center, r, q):
    """
    Rotates unit points into quadrant q and scales them about center.
    """
    rotation = complex(COS_Q[q], SIN_Q[q])
    return [center + r * p * rotation for p in points]


def arc_points(center, r, start, end):
    """
    Start point followed by three points per cubic, from the smaller angle
    to the larger one.
    """
    low = min(start, end)
    high = max(start, end)

    points = [center + r * complex(math.cos(low), math.sin(low))]

    min_seg = math.ceil(low / HALF_PI - EPSILON)
    max_seg = math.floor(high / HALF_PI + EPSILON)

    t1 = (low / HALF_PI) % 1
    t2 = (high / HALF_PI) % 1

    if min_seg > max_seg:
        # Within a single quadrant.
        bezier = UNIT_QUAD_BEZIER.split(t1, t2)
        q = math.floor(low / HALF_PI) % 4
        points.extend(_place(bezier.points[1:], center, r, q))
        return points

    if abs(min_seg * HALF_PI - low) > EPSILON:
        bezier = UNIT_QUAD_BEZIER.split(t1, 1)
        points.extend(_place(bezier.points[1:], center, r, (min_seg - 1) % 4))

    for seg in range(min_seg, max_seg):
        points.extend(_place(QUAD_POINTS, center, r, seg % 4))

    if abs(max_seg * HALF_PI - high) > EPSILON:
        bezier = UNIT_QUAD_BEZIER.split(0, t2)
        points.extend(_place(bezier.points[1:], center, r, max_seg % 4))
    return points


def arc(center, r, start, end):
    """
    Circular arc as a path of cubic beziers.

    @param center: (x, y) of the circle
    @param r: radius
    @param start: start angle in radians
    @param end: end angle in radians, the path runs backwards if end < start
    @return: token stream starting with a move to the start angle
    """
    cx, cy = center
    points = arc_points(complex(cx, cy), r, start, end)
    if end < start:
        points.reverse()

    path = [Command.MOVE, points[0].real, points[0].imag]
    for i in range(1, len(points) - 2, 3):
        path.append(Command.CUBIC)
        for p in points[i : i + 3]:
            path.append(p.real)
            path.append(p.imag)
    return path
