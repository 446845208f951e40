"""
Arc-length parameterization of paths and the position, normal and angle
queries built on it.

The length table holds one cumulative length per curve. Moves and curves
shorter than EPSILON keep their entry in the table but are never selected
when searching for a length, so the local parameter of a selected curve is
always well defined.
"""
import math

from vecpath.core.exceptions import EmptyPathError
from vecpath.tools.bezier import CubicBezier
from vecpath.tools.segments import (
    EPSILON,
    Command,
    curve_end,
    curve_start,
    iterate_curve,
)
from vecpath.tools.winding import CLOCKWISE, path_rotation


def curve_length(curve):
    cmd = curve[0]
    if cmd is Command.LINE or cmd is Command.CLOSE:
        return abs(curve_end(curve) - curve_start(curve))
    if cmd is Command.CUBIC:
        return CubicBezier.from_coords(curve[1:]).length(error=EPSILON)
    return 0.0


def curves_with_length(path):
    """
    Yields (curve, cumulative length through the end of that curve).

    @param path: token stream
    @return: generator of (curve, length)
    """
    length = 0.0
    for curve in iterate_curve(path):
        length += curve_length(curve)
        yield curve, length


def path_length(path):
    length = 0.0
    for _, length in curves_with_length(path):
        pass
    return length


def is_degenerate(curve, start_length, end_length):
    return curve[0] is Command.MOVE or end_length - start_length < EPSILON


def locate_length(length, path):
    """
    Finds the index of the curve at the given length and the local t within
    it.

    @param length: distance from the start of the path
    @param path: token stream
    @return: index, curves, t
    """
    table = list(curves_with_length(path))
    length = max(length, 0)

    start_length = 0.0
    last = None
    for index, (curve, end_length) in enumerate(table):
        if is_degenerate(curve, start_length, end_length):
            start_length = end_length
            continue
        if length <= end_length:
            t = (length - start_length) / (end_length - start_length)
            return index, table, t
        start_length = end_length
        last = index

    if last is None:
        raise EmptyPathError("Cannot measure an empty path")
    return last, table, 1.0


def find_curve_at_length(length, path):
    """
    Returns the curve at the given length with the local t within it.

    @param length: distance from the start of the path
    @param path: token stream
    @return: curve, t
    """
    index, table, t = locate_length(length, path)
    return table[index][0], t


def _point_on_curve(curve, t):
    if curve[0] is Command.CUBIC:
        return CubicBezier.from_coords(curve[1:]).point(t)
    start = curve_start(curve)
    return start + (curve_end(curve) - start) * t


def _direction_on_curve(curve, t):
    """Unit forward tangent of the curve at t."""
    if curve[0] is Command.CUBIC:
        return CubicBezier.from_coords(curve[1:]).tangent(t)
    d = curve_end(curve) - curve_start(curve)
    return d / abs(d)


def position_at_length(length, path):
    curve, t = find_curve_at_length(length, path)
    p = _point_on_curve(curve, t)
    return p.real, p.imag


def normal_at_length(length, path):
    """
    Unit normal at the given length. The normal of a clockwise path is
    flipped so that it always points out of the shape.
    """
    curve, t = find_curve_at_length(length, path)
    mul = -1 if path_rotation(path) == CLOCKWISE else 1
    n = _direction_on_curve(curve, t) * 1j * mul
    return n.real, n.imag


def angle_at_length(length, path):
    """
    Angle of the forward tangent in radians.
    """
    curve, t = find_curve_at_length(length, path)
    d = _direction_on_curve(curve, t)
    return math.atan2(d.imag, d.real)


def normalized(function):
    """
    Turns a query taking a length into one taking t in [0, 1] over the
    whole path.
    """

    def query(t, path):
        return function(t * path_length(path), path)

    query.__name__ = function.__name__.replace("_length", "")
    query.__doc__ = function.__doc__
    return query


position_at = normalized(position_at_length)
normal_at = normalized(normal_at_length)
angle_at = normalized(angle_at_length)
