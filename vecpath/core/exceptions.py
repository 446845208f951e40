# Define vecpath specific exceptions

# Base vecpath exception
class VecPathError(Exception):
    pass


class MalformedPathError(VecPathError):
    """The value is not a token stream or an operand run is truncated."""


class InvalidCommandError(VecPathError):
    """A command tag that is none of M, L, C or Z."""


class InvalidPathError(VecPathError):
    """The path does not start with a move."""


class EmptyPathError(VecPathError):
    """
    Raised by length and position queries when the path holds no curve that
    can be travelled along, e.g. an empty path or one made only of moves.
    """


class InvalidPointCountError(VecPathError):
    """A cubic bezier was given other than 4 coordinate pairs."""
