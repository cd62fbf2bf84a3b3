"""Player movement, turning and keyboard/mouse control state."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

from raycube.models import WINDOW_WIDTH, Controls, Player

_BLOCKING = "1 "
_MOUSE_RIGHT_EDGE = int(WINDOW_WIDTH / 1.2)
_MOUSE_LEFT_EDGE = WINDOW_WIDTH // 6
_NORTH_SOUTH = "NS"
_EAST_WEST = "EW"


class Key(Enum):
    """Logical keys the game reacts to."""

    FORWARD = auto()
    BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    ESCAPE = auto()


_HELD_FLAGS = {
    Key.FORWARD: "forward",
    Key.BACKWARD: "backward",
    Key.STRAFE_LEFT: "left",
    Key.STRAFE_RIGHT: "right",
    Key.TURN_LEFT: "rotate_left",
    Key.TURN_RIGHT: "rotate_right",
}


def _blocked(grid: Sequence[str], row: int, col: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] in _BLOCKING


def _step(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    pos = player.pos
    if not _blocked(grid, int(pos.y), int(pos.x + dx)):
        pos.x += dx
    if not _blocked(grid, int(pos.y + dy), int(pos.x)):
        pos.y += dy


def move_forward(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    """Move by (dx, dy), each axis only if the target cell is walkable."""
    _step(grid, player, dx, dy)


def move_backward(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    """Move by (-dx, -dy), each axis only if the target cell is walkable."""
    _step(grid, player, -dx, -dy)


def move_right(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    """Strafe along the camera plane by (dx, dy)."""
    _step(grid, player, dx, dy)


def move_left(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    """Strafe against the camera plane by (dx, dy)."""
    _step(grid, player, -dx, -dy)


def rotate(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    d, p = player.dir, player.plane
    d.x, d.y = d.x * cos_a - d.y * sin_a, d.x * sin_a + d.y * cos_a
    p.x, p.y = p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a


def press_key(controls: Controls, key: Key) -> bool:
    """Mark ``key`` as held; return True when the key asks the game to quit."""
    if key is Key.ESCAPE:
        return True
    setattr(controls, _HELD_FLAGS[key], True)
    return False


def release_key(controls: Controls, key: Key) -> None:
    """Mark ``key`` as released."""
    flag = _HELD_FLAGS.get(key)
    if flag is not None:
        setattr(controls, flag, False)


def mouse_turn(player: Player, x: int) -> None:
    """Turn slowly while the mouse sits near the left or right window edge."""
    amount = player.rotation_speed / 3
    if player.direction not in _NORTH_SOUTH:
        amount = -amount
    if x > _MOUSE_RIGHT_EDGE:
        rotate(player, amount)
    elif x < _MOUSE_LEFT_EDGE:
        rotate(player, -amount)


def apply_controls(grid: Sequence[str], player: Player, controls: Controls) -> None:
    """Apply one frame of movement and turning for the keys currently held."""
    speed = player.speed
    if controls.forward:
        move_forward(grid, player, player.dir.x * speed, player.dir.y * speed)
    if controls.backward:
        move_backward(grid, player, player.dir.x * speed, player.dir.y * speed)
    if controls.left:
        move_left(grid, player, player.plane.x * speed, player.plane.y * speed)
    if controls.right:
        move_right(grid, player, player.plane.x * speed, player.plane.y * speed)
    north_south = player.direction in _NORTH_SOUTH
    east_west = player.direction in _EAST_WEST
    if (controls.rotate_left and north_south) or (controls.rotate_right and east_west):
        rotate(player, -player.rotation_speed)
    if (controls.rotate_left and east_west) or (controls.rotate_right and north_south):
        rotate(player, player.rotation_speed)