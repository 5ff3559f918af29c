"""The game window, the frame loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional, Sequence

import numpy as np

from .animation import (
    compute_sprite_distances,
    sort_sprites_by_distance,
    update_doors,
    update_sprite_animations,
)
from .events import InputState, Key, toggle_door
from .framebuffer import Screen, Texture
from .loader import parse_cub_file
from .minimap import draw_minimap
from .model import Config, CubError
from .player import ROT_SPEED, rotate, update_player
from .raycast import Face, raycast
from .sprites import render_sprites
from .textures import load_door_textures, load_item_frames, load_wall_textures

WIDTH = 1024
HEIGHT = 768
TITLE = "cub3D"
_FPS = 60
_USAGE = "Usage: cub3D <map>.cub"


def _rgb_array(screen: Screen) -> np.ndarray:
    pixels = screen.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return np.ascontiguousarray(rgb.swapaxes(0, 1))


class Game:
    """A loaded scene with its textures, input state and frame buffer."""

    def __init__(
        self,
        config: Config,
        wall_textures: Mapping[Face, Texture],
        door_textures: Sequence[Texture],
        item_frames: Sequence[Texture],
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        if not item_frames:
            raise ValueError("at least one item frame is required")
        if len(door_textures) < 2:
            raise ValueError("closed and open door textures are required")
        self.config = config
        self.wall_textures = dict(wall_textures)
        self.door_textures = list(door_textures)
        self.item_frames = list(item_frames)
        self.screen = Screen(width, height)
        self.z_buffer = [0.0] * width
        self.input = InputState()
        self.running = True

    def _draw_world(self) -> None:
        self.screen.draw_background(self.config.ceil_color, self.config.floor_color)
        raycast(
            self.screen, self.config, self.wall_textures, self.door_textures, self.z_buffer
        )

    def _order_sprites(self) -> None:
        compute_sprite_distances(self.config)
        sort_sprites_by_distance(self.config.sprites)

    def _draw_overlays(self) -> None:
        render_sprites(self.screen, self.config, self.item_frames, self.z_buffer)
        draw_minimap(self.screen, self.config)

    def tick(self, dt: float) -> Screen:
        """Advance the game by ``dt`` seconds and draw the resulting frame."""
        update_player(self.config, self.input.keys)
        self._draw_world()
        self._order_sprites()
        update_sprite_animations(self.config, dt, len(self.item_frames))
        update_doors(self.config, dt)
        self._draw_overlays()
        return self.screen

    def render(self) -> Screen:
        """Draw the current state without advancing time."""
        self._draw_world()
        self._order_sprites()
        self._draw_overlays()
        return self.screen

    def _key_down(self, code: int) -> None:
        action = self.input.key_press(code)
        if action is Key.ENTER:
            toggle_door(self.config)
        elif action is Key.ESCAPE:
            self.running = False

    def _mouse_move(self, x: int) -> int:
        step = self.input.mouse_move(x, self.screen.width // 2)
        if step:
            rotate(self.config.player, step * ROT_SPEED)
        return step

    def run(self) -> None:
        """Open a window and play until it is closed or Escape is pressed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        keymap = {
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_RETURN: Key.ENTER,
            pygame.K_KP_ENTER: Key.ENTER,
            pygame.K_ESCAPE: Key.ESCAPE,
        }
        pygame.init()
        try:
            try:
                surface = pygame.display.set_mode((self.screen.width, self.screen.height))
            except pygame.error as exc:
                raise CubError("mlx error: Failed to create a new window") from exc
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            center = (self.screen.width // 2, self.screen.height // 2)
            while self.running:
                dt = clock.tick(_FPS) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        code = keymap.get(event.key)
                        if code is not None:
                            self._key_down(code)
                    elif event.type == pygame.KEYUP:
                        code = keymap.get(event.key)
                        if code is not None:
                            self.input.key_release(code)
                    elif event.type == pygame.MOUSEMOTION:
                        if self._mouse_move(event.pos[0]):
                            pygame.mouse.set_pos(center)
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        locked = self.input.mouse_click(event.button, event.pos[1])
                        pygame.mouse.set_visible(not locked)
                if not self.running:
                    break
                self.tick(dt)
                pygame.surfarray.blit_array(surface, _rgb_array(self.screen))
                pygame.display.flip()
        finally:
            pygame.quit()
        print("Window closed: exiting...")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(_USAGE + "\n")
        return 1
    try:
        config = parse_cub_file(args[0])
        game = Game(
            config,
            load_wall_textures(config),
            load_door_textures(),
            load_item_frames(),
        )
        game.run()
    except CubError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0