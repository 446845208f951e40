"""
Paths are flat token streams. Command tags alternate with their numeric
operands, for example:

    M 0 0 L 10 0 C 15 0 20 5 20 10 Z

This is the only form a path takes when crossing into or out of the engine.
Internally the stream is read as a sequence of segments, each one command
with its own operands:

* Move: M x y
* Line: L x y
* Cubic: C c1x c1y c2x c2y x y
* Close: Z

A segment alone cannot be measured, since a line only names its end point.
Curves are segments enriched with the point they start from so that they
can be computed on in isolation:

* Move: M x y
* Line: L prev_x prev_y x y
* Cubic: C prev_x prev_y c1x c1y c2x c2y x y
* Close: Z prev_x prev_y first_x first_y

A close draws the implicit line back to the point of the most recent move,
so a closing curve carries that first point as its end.

Both segments and curves are plain tuples with the Command in front. They
are produced lazily, and since the token stream is never modified, iterating
again simply restarts from the beginning.
"""
from enum import Enum
from numbers import Real

from vecpath.core.exceptions import InvalidCommandError, MalformedPathError

EPSILON = 1e-5


class Command(Enum):
    MOVE = "M"
    LINE = "L"
    CUBIC = "C"
    CLOSE = "Z"

    def __repr__(self):
        return self.value

    __str__ = __repr__

    @property
    def arity(self):
        return _ARITY[self]

    @classmethod
    def parse(cls, token):
        """
        Command for a token given either as a Command or as its letter.

        @param token: Command or "M", "L", "C", "Z"
        @return: Command
        """
        if isinstance(token, Command):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidCommandError(f"Invalid path command: {token}") from None


_ARITY = {
    Command.MOVE: 2,
    Command.LINE: 2,
    Command.CUBIC: 6,
    Command.CLOSE: 0,
}

M = Command.MOVE
L = Command.LINE
C = Command.CUBIC
Z = Command.CLOSE


def is_command(token):
    return isinstance(token, (Command, str))


def _is_number(token):
    return isinstance(token, Real) and not isinstance(token, bool)


def iterate_segment(path):
    """
    Yields each segment of the path as a tuple (Command, *operands).

    @param path: token stream
    @return: generator of segments
    """
    if not isinstance(path, (list, tuple)):
        raise MalformedPathError("Invalid path")
    length = len(path)
    if length == 0:
        return
    if not is_command(path[0]):
        raise MalformedPathError(f"Invalid path: starts with {path[0]!r}")
    start = 0
    for i in range(1, length + 1):
        if i != length and not is_command(path[i]):
            if not _is_number(path[i]):
                raise MalformedPathError(f"Invalid path operand: {path[i]!r}")
            continue
        cmd = Command.parse(path[start])
        operands = path[start + 1 : i]
        if len(operands) != cmd.arity:
            raise MalformedPathError(
                f"Invalid path: {cmd} takes {cmd.arity} values, got {len(operands)}"
            )
        yield (cmd, *(float(v) for v in operands))
        start = i


def iterate_curve(path):
    """
    Yields each segment of the path with its complete points, prefixed by the
    point it starts from.

    @param path: token stream
    @return: generator of curves
    """
    first = ()
    prev = ()
    for cmd, *points in iterate_segment(path):
        if cmd is Command.MOVE:
            yield (cmd, *points)
            first = tuple(points)
            prev = first
        elif not first:
            raise MalformedPathError(f"Invalid path: {cmd} before the first M")
        elif cmd is Command.LINE or cmd is Command.CUBIC:
            yield (cmd, *prev, *points)
            prev = tuple(points[-2:])
        else:
            yield (cmd, *prev, *first)


def split_segments(path):
    return list(iterate_segment(path))


def closed_q(path):
    """
    Whether the path ends by closing its last contour.
    """
    if not isinstance(path, (list, tuple)) or not path:
        return False
    last = path[-1]
    return is_command(last) and Command.parse(last) is Command.CLOSE


def segments_to_path(segments):
    """
    Flattens segments back into a token stream.
    """
    path = []
    for segment in segments:
        path.extend(segment)
    return path


def curve_start(curve):
    return complex(curve[1], curve[2])


def curve_end(curve):
    return complex(curve[-2], curve[-1])


def to_beziers(path):
    """
    Converts every line of the path into an equivalent cubic whose control
    points sit on the line's end points. Moves, cubics and closes are kept.

    @param path: token stream
    @return: new token stream
    """
    result = []
    for curve in iterate_curve(path):
        cmd = curve[0]
        if cmd is Command.LINE:
            sx, sy, x, y = curve[1:]
            result.extend((Command.CUBIC, sx, sy, x, y, x, y))
        elif cmd is Command.CUBIC:
            result.append(cmd)
            result.extend(curve[3:])
        elif cmd is Command.MOVE:
            result.extend(curve)
        else:
            result.append(cmd)
    return result
