"""
This plugin registers the path functions with the host.

The host evaluates expressions and calls into the engine by name. Every
function takes numbers and token streams and returns a new token stream,
a number or an (x, y) tuple.
"""

from vecpath.kernel.channel import get_channel
from vecpath.tools.arc import arc
from vecpath.tools.measure import (
    angle_at,
    angle_at_length,
    normal_at,
    normal_at_length,
    path_length,
    position_at,
    position_at_length,
)
from vecpath.tools.offset import offset
from vecpath.tools.segments import closed_q, split_segments, to_beziers
from vecpath.tools.trim import make_open, path_join, path_trim, trim_by_length
from vecpath.tools.winding import path_rotation

PATH_FUNCTIONS = {
    "arc": arc,
    "path/join": path_join,
    "path/to-beziers": to_beziers,
    "path/offset": offset,
    "path/length": path_length,
    "path/closed?": closed_q,
    "path/position-at-length": position_at_length,
    "path/position-at": position_at,
    "path/normal-at-length": normal_at_length,
    "path/normal-at": normal_at,
    "path/angle-at-length": angle_at_length,
    "path/angle-at": angle_at,
    "path/trim-by-length": trim_by_length,
    "path/trim": path_trim,
    "path/split-segments": split_segments,
    "path/rotation": path_rotation,
    "path/make-open": make_open,
}


def lookup(name):
    """
    The path function registered under name, or None.
    """
    return PATH_FUNCTIONS.get(name)


def plugin(kernel, lifecycle=None):
    if lifecycle == "register":
        channel = get_channel("path")
        for name, function in PATH_FUNCTIONS.items():
            kernel.register(name, function)
        if channel:
            channel(f"registered {len(PATH_FUNCTIONS)} path functions")
