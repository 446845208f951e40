"""
Console access to the path geometry engine.

    vecpath path/length "M 0 0 L 10 0 L 10 10 Z"
    vecpath path/offset 2 "M 0 0 L 10 0 L 10 10 L 0 10 Z"
    vecpath arc 0,0 10 0 3.14159

Numbers are passed as numbers, comma separated pairs as (x, y) and anything
with path commands as a path.
"""

import argparse
import sys

from vecpath.core.exceptions import VecPathError
from vecpath.core.pathfunctions import PATH_FUNCTIONS, lookup
from vecpath.kernel.channel import get_channel
from vecpath.kernel.functions import format_number, format_path, parse_path_text
from vecpath.kernel.settings import Settings
from vecpath.tools.segments import Command

APPLICATION_NAME = "vecpath"
APPLICATION_VERSION = "0.1.0"

SETTINGS_SECTION = "console"
DEFAULT_PRECISION = 6

parser = argparse.ArgumentParser(prog=APPLICATION_NAME)
parser.add_argument("-V", "--version", action="store_true", help="vecpath version")
parser.add_argument(
    "-v", "--verbose", action="store_true", help="display verbose debugging"
)
parser.add_argument(
    "-X",
    "--nuke-settings",
    action="store_true",
    default=False,
    help="Don't load config file at startup",
)
parser.add_argument(
    "-p", "--precision", type=int, default=None, help="digits printed after the point"
)
parser.add_argument("function", nargs="?", help="path function, e.g. path/length")
parser.add_argument("arguments", nargs="*", help="numbers, x,y pairs or path text")


def convert_argument(value):
    """
    Reads a console argument as a number, a vector or a path.
    """
    try:
        return float(value)
    except ValueError:
        pass
    tokens = parse_path_text(value)
    if tokens and isinstance(tokens[0], Command):
        return tokens
    return tuple(tokens)


def format_result(result, digits=DEFAULT_PRECISION):
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, (int, float)):
        return format_number(result, digits)
    if isinstance(result, tuple):
        return " ".join(format_number(v, digits) for v in result)
    if result and isinstance(result[0], tuple):
        return "\n".join(format_path(segment, digits) for segment in result)
    return format_path(result, digits)


def run(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    console = get_channel("console")
    console.watch(print)
    if args.verbose:
        get_channel("path").watch(console)
    try:
        return _exe(args, console)
    finally:
        console.unwatch(print)
        if args.verbose:
            get_channel("path").unwatch(console)


def _exe(args, console):
    if args.version:
        console(f"{APPLICATION_NAME} {APPLICATION_VERSION}")
        return 0

    settings = Settings(
        APPLICATION_NAME, f"{APPLICATION_NAME}.cfg", ignore_settings=args.nuke_settings
    )
    precision = settings.read_persistent(
        int, SETTINGS_SECTION, "precision", DEFAULT_PRECISION
    )
    if args.precision is not None:
        precision = args.precision
        if not args.nuke_settings:
            settings.write_persistent(SETTINGS_SECTION, "precision", precision)
            settings.write_configuration()

    if args.function is None:
        for name in PATH_FUNCTIONS:
            console(name)
        return 0

    function = lookup(args.function)
    if function is None:
        console(f"Unknown path function: {args.function}")
        return 1

    try:
        values = [convert_argument(a) for a in args.arguments]
        result = function(*values)
    except VecPathError as e:
        console(f"Error: {e}")
        return 1
    except TypeError as e:
        console(f"Bad arguments for {args.function}: {e}")
        return 1
    console(format_result(result, precision))
    return 0


if __name__ == "__main__":
    sys.exit(run())
