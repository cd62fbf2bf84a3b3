"""Ray casting and drawing of textured wall columns into a frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from raycube.models import WINDOW_HEIGHT, WINDOW_WIDTH, Color, Player, Scene, Vec, Wall

_BLOCKING = "1 "


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass
class RayHit:
    """Result of casting one screen column's ray."""

    column: int
    ray_dir: Vec
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: Wall
    distance: float
    line_height: int
    draw_start: int
    draw_end: int


@dataclass
class Texture:
    """A wall image stored as row-major packed colours."""

    width: int
    height: int
    pixels: list

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture size must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside texture")
        return self.pixels[y * self.width + x]


@dataclass
class Frame:
    """The off-screen image a frame is drawn into."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pixels: list = field(init=False)

    def __post_init__(self) -> None:
        self.pixels = [0] * (self.width * self.height)

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def get(self, x: int, y: int) -> int:
        """Return one pixel's colour."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside frame")
        return self.pixels[y * self.width + x]

    def fill_background(self, ceiling: Color, floor: Color) -> None:
        """Paint the upper half with the ceiling colour and the rest with the floor."""
        split = (self.height // 2) * self.width
        total = self.width * self.height
        self.pixels[:split] = [create_trgb(0, *ceiling)] * split
        self.pixels[split:] = [create_trgb(0, *floor)] * (total - split)


def _blocking(grid: Sequence[str], row: int, col: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] in _BLOCKING


def cast_ray(grid: Sequence[str], player: Player, column: int) -> RayHit:
    """Cast the ray for screen ``column`` and find the wall it meets."""
    cam_x = 2 * column / WINDOW_WIDTH - 1
    ray = Vec(
        player.dir.x + player.plane.x * cam_x,
        player.dir.y + player.plane.y * cam_x,
    )
    pos = player.pos
    map_x, map_y = int(pos.x), int(pos.y)
    delta_x = abs(1 / ray.x) if ray.x else math.inf
    delta_y = abs(1 / ray.y) if ray.y else math.inf

    if ray.x < 0:
        step_x = -1
        side_x = (pos.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - pos.x) * delta_x
    if ray.y < 0:
        step_y = -1
        side_y = (pos.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - pos.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Wall.EAST if step_x == -1 else Wall.WEST
        else:
            side_y += delta_y
            map_y += step_y
            side = Wall.SOUTH if step_y == -1 else Wall.NORTH
        if _blocking(grid, map_y, map_x):
            break

    if side in (Wall.EAST, Wall.WEST):
        distance = (map_x - pos.x + (1 - step_x) // 2) / ray.x
    else:
        distance = (map_y - pos.y + (1 - step_y) // 2) / ray.y
    line_height = int(WINDOW_HEIGHT / distance) if distance > 0 else WINDOW_HEIGHT
    draw_start = max(-(line_height // 2) + WINDOW_HEIGHT // 2, 0)
    draw_end = min(line_height // 2 + WINDOW_HEIGHT // 2, WINDOW_HEIGHT - 1)
    return RayHit(
        column=column,
        ray_dir=ray,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        side=side,
        distance=distance,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
    )


def draw_column(
    frame: Frame, hit: RayHit, player: Player, textures: Mapping[Wall, Texture]
) -> None:
    """Draw the textured wall slice described by ``hit`` into ``frame``."""
    if hit.draw_start >= hit.draw_end:
        return
    if hit.side in (Wall.EAST, Wall.WEST):
        wall_x = player.pos.y + hit.distance * hit.ray_dir.y
    else:
        wall_x = player.pos.x + hit.distance * hit.ray_dir.x
    wall_x -= math.floor(wall_x)

    tex = textures[hit.side]
    tex_x = int(wall_x * tex.width)
    if hit.side in (Wall.WEST, Wall.EAST) and hit.ray_dir.x > 0:
        tex_x = tex.width - tex_x - 1
    elif hit.side in (Wall.NORTH, Wall.SOUTH) and hit.ray_dir.y < 0:
        tex_x = tex.width - tex_x - 1

    scale = textures[Wall.NORTH].height / hit.line_height
    offset = hit.line_height // 2 - frame.height // 2
    mask = tex.height - 1
    for y in range(hit.draw_start, hit.draw_end):
        tex_y = int((y + offset) * scale) & mask
        frame.put(hit.column, y, tex.pixel(tex_x, tex_y))


def render_frame(
    scene: Scene, player: Player, textures: Mapping[Wall, Texture], frame: Frame
) -> Frame:
    """Draw the background and every wall column; return ``frame``."""
    frame.fill_background(scene.ceiling, scene.floor)
    for column in range(WINDOW_WIDTH):
        draw_column(frame, cast_ray(scene.grid, player, column), player, textures)
    return frame