import numpy as np
import pytest

from cubraycaster.app import Game, main
from cubraycaster.events import toggle_door
from cubraycaster.framebuffer import Texture, apply_shadow
from cubraycaster.minimap import PLAYER_COLOR
from cubraycaster.model import Config, Vector
from cubraycaster.player import MOVE_SPEED
from cubraycaster.raycast import Face

WIDTH = 320
HEIGHT = 240
CEIL = 0x336699
FLOOR = 0x996633
WALL = 0x808080
DOOR_CLOSED = 0x404040
DOOR_OPEN = 0x202020
ITEM = 0x00FF00

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def solid(color):
    return Texture(np.full((8, 8), color))


def make_config(grid, x=2.5, y=2.5, facing="N"):
    config = Config(
        grid=list(grid),
        height=len(grid),
        width=max(len(row) for row in grid),
        floor_color=FLOOR,
        ceil_color=CEIL,
    )
    config.player.pos = Vector(x, y)
    config.player.face(facing)
    return config


def make_game(config):
    walls = {face: solid(WALL) for face in Face}
    return Game(
        config,
        walls,
        [solid(DOOR_CLOSED), solid(DOOR_OPEN)],
        [solid(ITEM), solid(ITEM)],
        width=WIDTH,
        height=HEIGHT,
    )


def test_render_draws_ceiling_floor_and_wall():
    game = make_game(make_config(ROOM))
    screen = game.render()
    assert screen.pixel(0, 0) == CEIL
    assert screen.pixel(WIDTH - 1, HEIGHT - 1) == FLOOR
    assert game.z_buffer[WIDTH // 2] == pytest.approx(1.5)
    expected = apply_shadow(WALL, game.z_buffer[WIDTH // 2], 1)
    assert screen.pixel(WIDTH // 2, HEIGHT // 2) == expected


def test_render_draws_minimap_player_marker():
    game = make_game(make_config(ROOM))
    screen = game.render()
    assert screen.pixel(100, HEIGHT - 100) == PLAYER_COLOR


def test_tick_moves_player_with_held_key():
    game = make_game(make_config(ROOM))
    game.input.keys.w = True
    game.tick(0.016)
    assert game.config.player.pos.y == pytest.approx(2.5 - MOVE_SPEED)
    assert game.config.player.pos.x == pytest.approx(2.5)


def test_tick_slides_opened_door():
    grid = ["11111", "11411", "10N01", "11111"]
    config = make_config(grid)
    config.add_door(2, 1)
    game = make_game(config)
    door = toggle_door(game.config)
    assert door is not None and door.is_open
    game.tick(0.5)
    assert door.offset == pytest.approx(0.5)


def test_render_shows_closed_door():
    grid = ["11111", "11411", "10N01", "11111"]
    config = make_config(grid)
    config.add_door(2, 1)
    game = make_game(config)
    screen = game.render()
    expected = apply_shadow(DOOR_CLOSED, game.z_buffer[WIDTH // 2], 1)
    assert screen.pixel(WIDTH // 2, HEIGHT // 2) == expected


def test_tick_animates_and_orders_sprites():
    grid = ["11111", "10301", "10001", "10N31", "11111"]
    config = make_config(grid, 2.5, 3.5)
    config.add_sprite(2, 1)
    config.add_sprite(3, 3)
    game = make_game(config)
    game.tick(0.2)
    sprites = game.config.sprites
    assert all(s.anim_index == 1 for s in sprites)
    assert sprites[0].distance >= sprites[1].distance


def test_game_requires_item_frames():
    with pytest.raises(ValueError):
        Game(make_config(ROOM), {f: solid(WALL) for f in Face},
             [solid(DOOR_CLOSED), solid(DOOR_OPEN)], [])


def test_main_without_map_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_wrong_extension(capsys):
    assert main(["scene.txt"]) == 1
    assert ".cub extension" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert "Error opening file" in capsys.readouterr().err