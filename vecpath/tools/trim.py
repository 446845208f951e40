"""
Trimming paths by length and joining paths end to end.
"""
from vecpath.kernel.channel import get_channel
from vecpath.tools.bezier import CubicBezier
from vecpath.tools.measure import curves_with_length, is_degenerate, path_length
from vecpath.tools.segments import (
    EPSILON,
    Command,
    closed_q,
    curve_end,
    curve_start,
    iterate_segment,
)

channel = get_channel("path")


def make_open(path):
    """
    Removes the final close of the path. If the close had a length, an
    explicit line back to the start of the last contour takes its place.

    @param path: token stream
    @return: new token stream
    """
    path = list(path)
    if not closed_q(path):
        return path
    path = path[:-1]
    first = None
    last = None
    for segment in iterate_segment(path):
        if segment[0] is Command.MOVE:
            first = complex(*segment[1:])
        if len(segment) > 1:
            last = complex(*segment[-2:])
    if first is not None and abs(first - last) > EPSILON:
        path.extend((Command.LINE, first.real, first.imag))
    return path


def path_join(first, *rest):
    """
    Joins paths end to end. A path starting where the previous one ended is
    spliced on, any other is bridged to with a line.

    @param first: token stream
    @param rest: token streams
    @return: new token stream
    """
    result = make_open(first)
    last_end = complex(result[-2], result[-1]) if len(result) >= 2 else None

    for path in rest:
        opened = make_open(path)
        if len(opened) < 3:
            continue
        start = complex(opened[1], opened[2])
        if last_end is None:
            pass
        elif abs(last_end - start) < EPSILON:
            opened = opened[3:]
        else:
            opened[0] = Command.LINE
        result.extend(opened)
        last_end = complex(result[-2], result[-1])
    return result


def trim_curve(start, end, curve):
    """
    The part of the curve between local parameters start and end.

    @return: curve
    """
    if start < EPSILON and 1 - EPSILON < end:
        return curve
    cmd = curve[0]
    if cmd is Command.CUBIC:
        bezier = CubicBezier.from_coords(curve[1:]).split(start, end)
        return (cmd, *bezier.coords())
    p0 = curve_start(curve)
    p1 = curve_end(curve)
    np0 = p0 + (p1 - p0) * start
    np1 = p0 + (p1 - p0) * end
    # A partial close no longer ends at the contour start.
    return Command.LINE, np0.real, np0.imag, np1.real, np1.imag


def _curves_to_path(curves):
    path = []
    moved = False
    for i, curve in enumerate(curves):
        cmd = curve[0]
        if i == 0:
            path.extend((Command.MOVE, curve[1], curve[2]))
        if cmd is Command.MOVE:
            moved = True
            path.extend(curve)
        elif cmd is Command.CLOSE and moved:
            path.append(cmd)
        elif cmd is Command.CLOSE:
            # The contour's own move was trimmed away.
            path.extend((Command.LINE, curve[-2], curve[-1]))
        else:
            path.append(cmd)
            path.extend(curve[3:])
    return path


def trim_by_length(start, end, path):
    """
    Trim path by length from each end.

    @param start: length removed from the start
    @param end: length removed from the end
    @param path: token stream
    @return: new token stream
    """
    if start < EPSILON and end < EPSILON:
        return list(path)

    path = make_open(path)
    curves = list(curves_with_length(path))
    length = curves[-1][1] if curves else 0.0

    # Convert end to a distance from the beginning of the path.
    end = length - end

    start = max(0, start)
    end = max(0, end)
    if start > end:
        start, end = end, start

    if end - start < EPSILON:
        if channel:
            channel(f"trim: nothing left of {length} between {start} and {end}")
        return []

    start_index = None
    start_t = 1.0
    end_index = None
    end_t = 1.0
    last_index = None

    from_length = 0.0
    for i, (curve, to_length) in enumerate(curves):
        if is_degenerate(curve, from_length, to_length):
            from_length = to_length
            continue
        last_index = i
        if start_index is None and from_length <= start < to_length:
            start_index = i
            start_t = (start - from_length) / (to_length - from_length)
        if end_index is None and from_length <= end < to_length:
            end_index = i
            end_t = (end - from_length) / (to_length - from_length)
        if start_index is not None and end_index is not None:
            break
        from_length = to_length

    if last_index is None:
        if channel:
            channel("trim: no curve to trim")
        return []
    if start_index is None:
        start_index = last_index
        start_t = 1.0
    if end_index is None:
        end_index = last_index
        end_t = 1.0

    if start_index == end_index:
        trimmed = [trim_curve(start_t, end_t, curves[start_index][0])]
    else:
        trimmed = [trim_curve(start_t, 1, curves[start_index][0])]
        trimmed.extend(curve for curve, _ in curves[start_index + 1 : end_index])
        if end_t > EPSILON:
            trimmed.append(trim_curve(0, end_t, curves[end_index][0]))
    return _curves_to_path(trimmed)


def path_trim(t1, t2, path):
    """
    Trim path to the part between normalized positions t1 and t2.
    """
    length = path_length(path)
    return trim_by_length(t1 * length, (1 - t2) * length, path)
