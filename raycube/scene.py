"""Reading and validating scene files."""

from __future__ import annotations

import os
from itertools import takewhile
from typing import Iterator, Optional, Union

from raycube.errors import CubError, ErrorKind
from raycube.mapcheck import build_map
from raycube.models import Scene, Wall
from raycube.textutils import is_digit_str, is_space, parse_int, split_fields

_SPACES = "\t\n\v\f\r "
_IDENTIFIER_COUNT = 6
_EXTENSIONS = (".cub", ".xpm")
_PATH_PREFIXES = {
    "NO ": Wall.NORTH,
    "SO ": Wall.SOUTH,
    "WE ": Wall.WEST,
    "EA ": Wall.EAST,
}


def is_good_file(path: Union[str, os.PathLike]) -> bool:
    """True when the path ends in .cub or .xpm."""
    return os.fspath(path)[-4:] in _EXTENSIONS


def parse_path_line(line: str, scene: Scene) -> bool:
    """Store a texture path from an NO/SO/WE/EA line; False if it is not one or is repeated."""
    wall = _PATH_PREFIXES.get(line[:3])
    if wall is None or wall in scene.textures:
        return False
    rest = line[3:]
    start = 0
    while start < len(rest) and is_space(rest[start]):
        start += 1
    path = rest[start:]
    if path.endswith("\n"):
        path = path[:-1]
    scene.textures[wall] = path
    return True


def parse_color_line(line: str, scene: Scene) -> bool:
    """Store a colour from a C or F line; False if it is malformed or repeated."""
    kind = line[:2]
    if kind not in ("C ", "F "):
        return False
    fields = split_fields(line[2:].lstrip(_SPACES), ",")
    if len(fields) != 3:
        return False
    if fields[2].endswith("\n"):
        fields[2] = fields[2][:-1]
    code = []
    for text in fields:
        if not is_digit_str(text):
            return False
        value = parse_int(text)
        if not 0 <= value <= 255:
            return False
        code.append(value)
    color = (code[0], code[1], code[2])
    if kind == "C " and scene.ceiling is None:
        scene.ceiling = color
    elif kind == "F " and scene.floor is None:
        scene.floor = color
    else:
        return False
    return True


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def _next_content(lines: Iterator[str]) -> Optional[str]:
    for line in lines:
        if line != "\n":
            return line
    return None


def _strip_leading(line: str) -> str:
    stripped = line.lstrip(_SPACES)
    return stripped if stripped else line[-1:]


def parse_scene(text: str) -> Scene:
    """Parse the six identifier lines and the map that follows them."""
    scene = Scene()
    lines = iter(_split_lines(text))
    for _ in range(_IDENTIFIER_COUNT):
        raw = _next_content(lines)
        if raw is None:
            raise CubError(ErrorKind.INVALID_INFO)
        line = _strip_leading(raw)
        if not (parse_path_line(line, scene) or parse_color_line(line, scene)):
            raise CubError(ErrorKind.INVALID_INFO)
    first = _next_content(lines)
    map_lines = [] if first is None else [first, *takewhile(lambda l: l != "\n", lines)]
    if not map_lines:
        raise CubError(ErrorKind.INCORRECT_PLAYER)
    scene.grid, _ = build_map(map_lines)
    return scene


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Check, read and parse the scene file at ``path``."""
    if not is_good_file(path):
        raise CubError(ErrorKind.BAD_EXTENSION)
    try:
        handle = open(path, "rb")
    except IsADirectoryError:
        raise CubError(ErrorKind.INVALID_INPUT) from None
    except OSError:
        raise CubError(ErrorKind.OPEN_FAILED) from None
    with handle:
        try:
            data = handle.read()
        except OSError:
            raise CubError(ErrorKind.INVALID_INPUT) from None
    if not data:
        raise CubError(ErrorKind.EMPTY_FILE)
    return parse_scene(data.decode("latin-1"))