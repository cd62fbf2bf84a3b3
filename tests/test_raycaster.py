import pytest

from raycube.mapcheck import spawn_player
from raycube.models import WINDOW_HEIGHT, WINDOW_WIDTH, Scene, Wall
from raycube.raycaster import (
    Frame,
    Texture,
    cast_ray,
    create_trgb,
    draw_column,
    render_frame,
)

GRID = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]

CENTER = WINDOW_WIDTH // 2


def solid(color, size=4):
    return Texture(size, size, [color] * (size * size))


def wall_textures():
    return {
        Wall.NORTH: solid(11),
        Wall.SOUTH: solid(22),
        Wall.WEST: solid(33),
        Wall.EAST: solid(44),
    }


def test_create_trgb_packs_channels():
    assert create_trgb(0, 255, 0, 0) == 0xFF0000
    assert create_trgb(0, 1, 2, 3) == 0x010203


def test_texture_pixel_row_major():
    tex = Texture(2, 2, [1, 2, 3, 4])
    assert tex.pixel(1, 0) == 2
    assert tex.pixel(0, 1) == 3


def test_texture_pixel_out_of_range():
    tex = Texture(2, 2, [1, 2, 3, 4])
    with pytest.raises(IndexError):
        tex.pixel(2, 0)


def test_texture_size_mismatch():
    with pytest.raises(ValueError):
        Texture(2, 2, [1, 2, 3])


def test_frame_put_get():
    frame = Frame(4, 2)
    frame.put(3, 1, 77)
    assert frame.get(3, 1) == 77
    assert frame.pixels[-1] == 77


def test_frame_put_outside_ignored():
    frame = Frame(4, 2)
    frame.put(-1, 0, 5)
    frame.put(4, 0, 5)
    frame.put(0, 2, 5)
    assert frame.pixels == [0] * 8


def test_frame_get_outside_raises():
    with pytest.raises(IndexError):
        Frame(4, 2).get(0, 2)


def test_fill_background_halves():
    frame = Frame(3, 4)
    frame.fill_background((1, 2, 3), (4, 5, 6))
    assert frame.get(2, 1) == create_trgb(0, 1, 2, 3)
    assert frame.get(0, 2) == create_trgb(0, 4, 5, 6)
    assert frame.pixels.count(create_trgb(0, 1, 2, 3)) == 6


def test_center_ray_north_hits_top_wall():
    player = spawn_player("N", 2, 2)
    hit = cast_ray(GRID, player, CENTER)
    assert (hit.map_x, hit.map_y) == (2, 0)
    assert hit.side is Wall.SOUTH
    assert hit.distance == pytest.approx(1.5)
    assert hit.draw_start + hit.draw_end == WINDOW_HEIGHT


def test_center_ray_east_hits_right_wall():
    player = spawn_player("E", 2, 2)
    hit = cast_ray(GRID, player, CENTER)
    assert (hit.map_x, hit.map_y) == (4, 2)
    assert hit.side is Wall.WEST


@pytest.mark.parametrize("column", [0, 100, CENTER, WINDOW_WIDTH - 1])
def test_ray_stops_on_wall_and_stays_on_screen(column):
    player = spawn_player("S", 2, 2)
    hit = cast_ray(GRID, player, column)
    assert GRID[hit.map_y][hit.map_x] == "1"
    assert 0 <= hit.draw_start <= hit.draw_end <= WINDOW_HEIGHT - 1


def test_nearer_wall_is_taller():
    far = cast_ray(GRID, spawn_player("N", 3, 2), CENTER)
    near = cast_ray(GRID, spawn_player("N", 1, 2), CENTER)
    assert near.line_height > far.line_height


def test_void_stops_ray():
    grid = ["   ", " N ", "   "]
    hit = cast_ray(grid, spawn_player("N", 1, 1), CENTER)
    assert (hit.map_x, hit.map_y) == (1, 0)
    assert grid[hit.map_y][hit.map_x] == " "


def test_draw_column_paints_only_wall_span():
    player = spawn_player("N", 2, 2)
    hit = cast_ray(GRID, player, CENTER)
    frame = Frame()
    draw_column(frame, hit, player, wall_textures())
    column = [frame.get(CENTER, y) for y in range(WINDOW_HEIGHT)]
    assert set(column[hit.draw_start:hit.draw_end]) == {22}
    assert set(column[: hit.draw_start]) == {0}
    assert set(column[hit.draw_end:]) == {0}
    assert frame.get(CENTER - 1, WINDOW_HEIGHT // 2) == 0


def test_draw_column_uses_texture_colours_only():
    player = spawn_player("W", 2, 2)
    hit = cast_ray(GRID, player, 300)
    textures = {wall: Texture(2, 2, [5, 6, 7, 8]) for wall in Wall}
    frame = Frame()
    draw_column(frame, hit, player, textures)
    painted = {frame.get(300, y) for y in range(hit.draw_start, hit.draw_end)}
    assert painted and painted <= {5, 6, 7, 8}


def test_render_frame_background_and_walls():
    scene = Scene(ceiling=(10, 20, 30), floor=(40, 50, 60), grid=list(GRID))
    player = spawn_player("N", 2, 2)
    frame = Frame()
    result = render_frame(scene, player, wall_textures(), frame)
    assert result is frame
    assert frame.get(0, 0) == create_trgb(0, 10, 20, 30)
    assert frame.get(0, WINDOW_HEIGHT - 1) == create_trgb(0, 40, 50, 60)
    assert frame.get(CENTER, WINDOW_HEIGHT // 2) == 22