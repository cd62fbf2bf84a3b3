# raycube

raycube is a small first-person raycaster. It reads a `.cub` scene file that
gives the wall textures, the floor and ceiling colours and a grid map. It then
opens a 1280×720 window, titled "Wolfromain3D", where you can walk around the
map.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
raycube path/to/scene.cub
```

Give exactly one argument. The file name must end in `.cub` or `.xpm`.
In these cases the command writes `Error` and a reason on the next line to
standard error, then exits with status 1:

- the wrong number of arguments
- a bad extension
- a file that cannot be opened
- an empty file
- an invalid scene
- a texture that cannot be loaded
- a window that cannot be opened

## Controls

| Input              | Action                  |
|--------------------|-------------------------|
| `W` / `S`          | move forward / backward |
| `A` / `D`          | strafe left / right     |
| `←` / `→`          | turn                    |
| mouse near an edge | turn slowly             |
| `Esc` / close      | quit                    |

You cannot walk into a wall (`1`) or into the void (a space).

## The `.cub` format

The file starts with six identifier lines, in any order. Blank lines may
appear between them, and leading whitespace on an identifier line is ignored.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the image used for each wall face. Images are
  loaded with pygame.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value is
  made of digits only and lies between 0 and 255.
- The scene is rejected if any identifier appears twice.

The map comes after these lines and may be preceded by blank lines. It ends at
the first blank line after it. Its cell characters are:

- `1` for a wall
- `0` for open floor
- a space for the void
- `N`, `S`, `E` or `W` for the player's start and facing direction

The map needs a player start. If there is more than one, the first one in
reading order is used. The first and last rows may hold only walls and
spaces. The scene is rejected if a `0` cell can be reached from a space by
moving through other spaces. Shorter rows are padded with spaces to the
width of the longest row.

```
111111
100101
1010N1
111111
```

## Using it as a library

The parsing, movement and rendering pieces work without opening a window:

```python
from raycube.scene import load_scene
from raycube.errors import CubError

try:
    scene = load_scene("maps/demo.cub")
except CubError as exc:
    print(exc.kind, exc.report, end="")
else:
    print(scene.cell(2, 4), scene.ceiling, scene.floor)
```

- `raycube.scene.parse_scene(text)` parses the text of a scene and returns a
  `raycube.models.Scene`. `load_scene(path)` also checks the file first.
- `raycube.errors.CubError` carries an `ErrorKind` as `kind`, and the
  message printed by the command as `report`.
- `raycube.mapcheck.build_map(lines)` validates map lines. It returns the
  padded grid and the spawned `Player`.
- `raycube.movement` holds the movement, rotation and key-state rules:
  `apply_controls`, `press_key`, `release_key` and `mouse_turn`.
- `raycube.raycaster.cast_ray` finds the wall seen by one screen column.
  `render_frame` draws the whole view into a `Frame` of packed colours, using
  a `Texture` for each wall face.
- `raycube.game.Game` ties these together. `Game.tick()` draws one frame and
  then applies the held keys. `Game.run()` opens the window.
  `raycube.game.main(argv)` is the command's entry point.