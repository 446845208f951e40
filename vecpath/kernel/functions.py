import os
import os.path
import platform
import re
from typing import List, Optional, Union

from vecpath.core.exceptions import MalformedPathError
from vecpath.tools.segments import Command

_path_parse = [
    ("CMD", r"([MLCZ])"),
    ("NUM", r"([-+]?(?:[0-9]*\.[0-9]+|[0-9]+\.?)(?:[eE][-+]?[0-9]+)?)"),
    ("SKIP", r"[ ,\t\n\x09\x0A\x0C\x0D]+"),
]
_PATH_RE = re.compile("|".join("(?P<%s>%s)" % pair for pair in _path_parse))


def get_safe_path(
    name: str, create: Optional[bool] = False, system: Optional[str] = None
) -> str:
    """
    Get a path which should have valid user permissions in an OS dependent method.

    @param name: directory name within the safe OS dependent userdirectory
    @param create: Should this directory be created if needed.
    @param system: Override the system value determination
    @return:
    """
    if not system:
        system = platform.system()

    if system == "Darwin":
        directory = os.path.join(
            os.path.expanduser("~"),
            "Library",
            "Application Support",
            name,
        )
    elif system == "Windows":
        directory = os.path.join(os.path.expandvars("%LOCALAPPDATA%"), name)
    else:
        directory = os.path.join(os.path.expanduser("~"), ".config", name)
    if directory is not None and create:
        os.makedirs(directory, exist_ok=True)
    return directory


def parse_path_text(text: str) -> List[Union[Command, float]]:
    """
    Reads path text such as "M 0,0 L 10 0 Z" into a token stream.

    @param text: path text
    @return: token stream
    """
    tokens = []
    pos = 0
    limit = len(text)
    while pos < limit:
        match = _PATH_RE.match(text, pos)
        if match is None:
            raise MalformedPathError(f"Invalid path text at {pos}: {text[pos:pos + 10]!r}")
        kind = match.lastgroup
        value = match.group(kind)
        if kind == "CMD":
            tokens.append(Command.parse(value))
        elif kind == "NUM":
            tokens.append(float(value))
        pos = match.end()
    return tokens


def format_path(path, digits: int = 6) -> str:
    """
    Writes a token stream as path text.
    """
    parts = []
    for token in path:
        if isinstance(token, (Command, str)):
            parts.append(str(token))
        else:
            parts.append(format_number(token, digits))
    return " ".join(parts)


def format_number(value, digits: int = 6) -> str:
    value = round(float(value), digits)
    if value == 0:
        value = 0.0
    if value.is_integer():
        return str(int(value))
    return f"{value:.{digits}f}".rstrip("0")
