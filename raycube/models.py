"""Core data types shared by the parser, the renderer and the game loop."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Optional, Tuple

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
DEFAULT_SPEED = 0.05
DEFAULT_ROTATION_SPEED = 0.03

Color = Tuple[int, int, int]


class Wall(IntEnum):
    """Wall faces; the value is also the texture slot."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass
class Vec:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    plane: Vec = field(default_factory=Vec)
    direction: str = ""
    speed: float = DEFAULT_SPEED
    rotation_speed: float = DEFAULT_ROTATION_SPEED


@dataclass
class Controls:
    """Which movement keys are currently held."""

    forward: bool = False
    backward: bool = False
    right: bool = False
    left: bool = False
    rotate_left: bool = False
    rotate_right: bool = False

    def reset(self) -> None:
        """Release every key."""
        for f in fields(self):
            setattr(self, f.name, False)


@dataclass
class Scene:
    """Everything read from a scene file: textures, colours and the map."""

    textures: dict = field(default_factory=dict)
    ceiling: Optional[Color] = None
    floor: Optional[Color] = None
    grid: list = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    def cell(self, row: int, col: int) -> str:
        """Return the map character at (row, col); outside the map is void."""
        if row < 0 or col < 0 or row >= len(self.grid):
            return " "
        line = self.grid[row]
        if col >= len(line):
            return " "
        return line[col]

    def is_complete(self) -> bool:
        """True when all four textures and both colours are set."""
        return (
            all(wall in self.textures for wall in Wall)
            and self.ceiling is not None
            and self.floor is not None
        )