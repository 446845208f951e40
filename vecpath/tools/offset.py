"""
This module provides routines to create an offsetted path
"""
import math

from vecpath.core.exceptions import InvalidPathError
from vecpath.kernel.channel import get_channel
from vecpath.tools.arc import arc
from vecpath.tools.bezier import CubicBezier
from vecpath.tools.segments import EPSILON, Command, is_command, iterate_segment
from vecpath.tools.winding import CLOCKWISE, dot, path_rotation, vector_angle

channel = get_channel("path")


def offset_segment_bezier(coords, d):
    """
    Parallel curve of a cubic as a path fragment: M x y C ... [C ...]

    @param coords: 8 coordinates of the cubic
    @param d: distance
    @return: path fragment or None if the cubic is too short to offset
    """
    bezier = CubicBezier.from_coords(coords)
    if bezier.length(error=EPSILON) < EPSILON:
        return None
    pieces = bezier.offset(d)
    start = pieces[0].start
    fragment = [Command.MOVE, start.real, start.imag]
    for piece in pieces:
        fragment.append(Command.CUBIC)
        fragment.extend(piece.coords()[2:])
    return fragment


def offset_segment_line(a, b, d):
    """
    Line moved sideways by d as a path fragment: M x y L x y

    @param a: complex start
    @param b: complex end
    @param d: distance
    @return: path fragment or None if the line is too short to offset
    """
    direction = b - a
    if abs(direction) < EPSILON:
        return None
    delta = direction * 1j / abs(direction) * d
    oa = a + delta
    ob = b + delta
    return [Command.MOVE, oa.real, oa.imag, Command.LINE, ob.real, ob.imag]


def round_corner(origin, last, following, d):
    """
    Arc around the original vertex joining two offset end points.

    @param origin: the vertex before offsetting
    @param last: end of the previous offset curve
    @param following: start of the next offset curve
    @param d: signed offset distance, also the arc radius
    @return: arc path fragment without its leading move
    """
    dir_last = last - origin
    dir_next = following - origin
    if d < 0:
        # A negative radius places points opposite to their angle.
        dir_last = -dir_last
        dir_next = -dir_next

    angle = vector_angle(dir_last, dir_next)
    start = math.atan2(dir_last.imag, dir_last.real)
    turn = dot(dir_last * 1j, dir_next)
    if turn > 0:
        end = start + angle
    elif turn < 0:
        end = start - angle
    else:
        end = start
    return arc((origin.real, origin.imag), d, start, end)[3:]


def _fragment_start(fragment):
    return complex(fragment[1], fragment[2])


def _fragment_end(fragment):
    return complex(fragment[-2], fragment[-1])


def offset(d, path):
    """
    Outline of the path at distance d. Positive values grow closed shapes
    whichever way they wind.

    @param d: distance
    @param path: token stream starting with a move
    @return: token stream
    """
    if (
        not isinstance(path, (list, tuple))
        or not path
        or not is_command(path[0])
        or Command.parse(path[0]) is not Command.MOVE
    ):
        raise InvalidPathError("Invalid path")

    if path_rotation(path) == CLOCKWISE:
        d = -d

    result = []

    #       loff   coff
    # ----------|  /\
    #           | /  \
    # ----------|/    \
    #       lorig\     \
    #             \     \
    lorig = 0j  # original last
    forig = 0j  # original first
    loff = 0j  # last offset
    foff = 0j  # first offset
    continued = False

    for cmd, *points in iterate_segment(path):
        if cmd is Command.MOVE:
            forig = complex(*points)
            lorig = forig
            continued = False
            continue
        if cmd is Command.CLOSE:
            target = forig
            off = offset_segment_line(lorig, target, d)
        elif cmd is Command.LINE:
            target = complex(*points)
            off = offset_segment_line(lorig, target, d)
        else:
            target = complex(*points[-2:])
            off = offset_segment_bezier((lorig.real, lorig.imag, *points), d)

        if off is not None:
            coff = _fragment_start(off)
            if not continued:
                continued = True
                foff = coff
            elif abs(loff - coff) < EPSILON:
                off = off[3:]
            else:
                off = round_corner(lorig, loff, coff, d) + off[3:]
            result.extend(off)
            lorig = target
            loff = _fragment_end(result)
        elif channel:
            channel(f"offset: dropped {cmd} shorter than {EPSILON}")

        if cmd is Command.CLOSE and continued:
            if abs(loff - foff) >= EPSILON:
                result.extend(round_corner(lorig, loff, foff, d))
            result.append(Command.CLOSE)
            continued = False
    return result
