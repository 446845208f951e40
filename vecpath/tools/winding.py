"""
Orientation of closed paths.

The rotation is the sum of the signed turns taken at every vertex. A simple
polygon turns a full circle, 2pi one way or the other, so rounding the sum
before taking its sign absorbs floating point noise. In screen coordinates
(y pointing down) a positive sum is a clockwise path.
"""
import math

from vecpath.tools.segments import Command, closed_q, iterate_segment

CLOCKWISE = 1
COUNTERCLOCKWISE = -1
INDETERMINATE = 0


def rotate_quarter(v):
    """v rotated by +90 degrees."""
    return v * 1j


def dot(a, b):
    return a.real * b.real + a.imag * b.imag


def vector_angle(a, b):
    """
    Unsigned angle between two vectors.
    """
    ma = abs(a)
    mb = abs(b)
    if ma == 0 or mb == 0:
        return 0.0
    cosine = dot(a, b) / (ma * mb)
    return math.acos(max(-1.0, min(1.0, cosine)))


def sign(value):
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def turn_angle(start, through, end):
    """
    Returns:
    A --- B----
           \\  <- this angle
            \\
             C
    The value is positive if ABC turns clockwise, else negative.
    """
    ab = through - start
    bc = end - through
    return vector_angle(ab, bc) * sign(dot(rotate_quarter(ab), bc))


def path_rotation(path):
    """
    Returns +1 if the path is clockwise and -1 when counterclockwise.

    Returns 0 if the direction is indeterminate, like when the path is open,
    has fewer than 3 vertices or is 8-shaped.

    @param path: token stream
    @return: 1, -1 or 0
    """
    if not closed_q(path):
        return INDETERMINATE
    segments = list(iterate_segment(path))
    segments.pop()
    if len(segments) < 3:
        return INDETERMINATE

    points = [complex(seg[-2], seg[-1]) for seg in segments if seg[0] is not Command.CLOSE]
    count = len(points)
    if len(set(points)) < 3:
        return INDETERMINATE

    rotation = 0.0
    for i in range(count):
        rotation += turn_angle(points[i - 1], points[i], points[(i + 1) % count])
    return sign(round(rotation))


def is_clockwise(path):
    return path_rotation(path) == CLOCKWISE
