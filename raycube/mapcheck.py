"""Map validation: player spawn, line padding and the closed-wall check."""

from __future__ import annotations

from typing import Sequence

from raycube.errors import CubError, ErrorKind
from raycube.models import Player, Vec

_PLAYER_CHARS = "NSEW"
_BORDER_CHARS = " 1\n"
_INNER_CHARS = " 01NSEW\n"

# direction -> (dir.x, dir.y, plane.x, plane.y)
_SPAWN_VECTORS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "W": (-1.0, 0.0, 0.0, -0.66),
    "E": (1.0, 0.0, 0.0, 0.66),
}


def spawn_player(direction: str, row: int, col: int) -> Player:
    """Create a player standing in the middle of cell (row, col) facing ``direction``."""
    try:
        dir_x, dir_y, plane_x, plane_y = _SPAWN_VECTORS[direction]
    except KeyError:
        raise ValueError(f"unknown player direction: {direction!r}") from None
    return Player(
        pos=Vec(col + 0.5, row + 0.5),
        dir=Vec(dir_x, dir_y),
        plane=Vec(plane_x, plane_y),
        direction=direction,
    )


def locate_player(grid: Sequence[str]) -> Player:
    """Spawn the player at the first N, S, E or W found in row order."""
    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch in _PLAYER_CHARS:
                return spawn_player(ch, row, col)
    raise CubError(ErrorKind.INCORRECT_PLAYER)


def pad_line(line: str, size: int) -> str:
    """Return ``line`` cut or padded with spaces to ``size`` characters, ending in a newline."""
    if size <= 0:
        raise ValueError("line size must be positive")
    content = line.split("\n", 1)[0][: size - 1]
    return content.ljust(size - 1) + "\n"


def _at(grid: Sequence[str], row: int, col: int) -> str:
    line = grid[row] if row < len(grid) else ""
    return line[col] if col < len(line) else " "


def _explore(
    grid: Sequence[str], height: int, width: int, row: int, col: int
) -> tuple[set[tuple[int, int]], bool]:
    """Walk the open region around (row, col); report its cells and whether it meets a '0'."""
    seen: set[tuple[int, int]] = set()
    leaks = False
    stack = [(row, col)]
    while stack:
        y, x = stack.pop()
        if not (0 <= y < height and 0 <= x < width) or (y, x) in seen:
            continue
        ch = _at(grid, y, x)
        if ch == "0":
            leaks = True
            continue
        if ch == "1":
            continue
        seen.add((y, x))
        stack.extend(((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)))
    return seen, leaks


def flood_fill(grid: Sequence[str], height: int, width: int, row: int, col: int) -> bool:
    """True when the void reachable from (row, col) never touches a floor cell."""
    _, leaks = _explore(grid, height, width, row, col)
    return not leaks


def check_lines(grid: Sequence[str], height: int, width: int) -> bool:
    """True when every character is allowed and no floor cell borders the void."""
    last = height - 1
    safe: set[tuple[int, int]] = set()
    for row, line in enumerate(grid):
        allowed = _BORDER_CHARS if row in (0, last) else _INNER_CHARS
        for col, ch in enumerate(line):
            if ch not in allowed:
                return False
            if ch == " " and (row, col) not in safe:
                region, leaks = _explore(grid, height, width, row, col)
                if leaks:
                    return False
                safe |= region
    return True


def build_map(lines: Sequence[str]) -> tuple[list[str], Player]:
    """Validate raw map lines and return the padded grid and the spawned player."""
    player = locate_player(lines)
    height = len(lines)
    width = max(len(line) for line in lines)
    padded = [pad_line(line, width) if len(line) < width else line for line in lines]
    if not check_lines(padded, height, width):
        raise CubError(ErrorKind.INVALID_INFO)
    grid = [line[:-1] if line.endswith("\n") else line for line in padded]
    return grid, player