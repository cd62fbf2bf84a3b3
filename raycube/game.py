"""Game window, event handling and the program entry point."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Mapping, Optional, Sequence, Union

import pygame

from raycube.errors import CubError, ErrorKind
from raycube.mapcheck import locate_player
from raycube.models import Controls, Scene, Wall
from raycube.movement import Key, apply_controls, mouse_turn, press_key, release_key
from raycube.raycaster import Frame, Texture, create_trgb, render_frame
from raycube.scene import load_scene

WINDOW_TITLE = "Wolfromain3D"

_KEYMAP = {
    pygame.K_w: Key.FORWARD,
    pygame.K_s: Key.BACKWARD,
    pygame.K_a: Key.STRAFE_LEFT,
    pygame.K_d: Key.STRAFE_RIGHT,
    pygame.K_LEFT: Key.TURN_LEFT,
    pygame.K_RIGHT: Key.TURN_RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_CANVAS_MASKS = (0xFF0000, 0x00FF00, 0x0000FF, 0)


def load_texture(path: Union[str, os.PathLike]) -> Texture:
    """Load an image file as a wall texture."""
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise CubError(ErrorKind.TEXTURE) from exc
    width, height = surface.get_size()
    if width <= 0 or height <= 0:
        raise CubError(ErrorKind.TEXTURE)
    pixels = []
    for y in range(height):
        for x in range(width):
            color = surface.get_at((x, y))
            pixels.append(create_trgb(0, color.r, color.g, color.b))
    return Texture(width, height, pixels)


def key_from_pygame(code: int) -> Optional[Key]:
    """Translate a pygame key code into a game key, or None if unused."""
    return _KEYMAP.get(code)


class Game:
    """One running game: scene, player, held keys and the frame being drawn."""

    def __init__(self, scene: Scene, textures: Mapping[Wall, Texture]) -> None:
        missing = [wall.name for wall in Wall if wall not in textures]
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.scene = scene
        self.textures = dict(textures)
        self.player = locate_player(scene.grid)
        self.controls = Controls()
        self.frame = Frame()
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one window event; return whether the game keeps running."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            key = key_from_pygame(event.key)
            if key is not None and press_key(self.controls, key):
                self.running = False
        elif event.type == pygame.KEYUP:
            key = key_from_pygame(event.key)
            if key is not None:
                release_key(self.controls, key)
        elif event.type == pygame.MOUSEMOTION:
            mouse_turn(self.player, event.pos[0])
        return self.running

    def tick(self) -> Frame:
        """Draw one frame, then apply the held keys; return the frame."""
        render_frame(self.scene, self.player, self.textures, self.frame)
        apply_controls(self.scene.grid, self.player, self.controls)
        return self.frame

    def run(self) -> None:
        """Open the window and loop until the player quits."""
        pygame.init()
        try:
            size = (self.frame.width, self.frame.height)
            try:
                screen = pygame.display.set_mode(size)
            except pygame.error as exc:
                raise CubError(ErrorKind.GRAPHICS) from exc
            pygame.display.set_caption(WINDOW_TITLE)
            canvas = pygame.Surface(size, 0, 32, _CANVAS_MASKS)
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.tick()
                buffer = canvas.get_buffer()
                buffer.write(array("I", self.frame.pixels).tobytes())
                del buffer
                screen.blit(canvas, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise CubError(ErrorKind.PROBLEM_ARGUMENTS)
        scene = load_scene(args[0])
        textures = {wall: load_texture(scene.textures[wall]) for wall in Wall}
        Game(scene, textures).run()
    except CubError as exc:
        sys.stderr.write(exc.report)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())