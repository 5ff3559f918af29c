"""Pixel buffers: textures read by the renderer and the screen it draws on."""

from __future__ import annotations

from typing import Any

import numpy as np

from .model import CubError

SQUARE_SIZE = 9
CIRCLE_COLOR = 0x528697
_MASK = 0xFFFFFFFF
_SHADOW_FALLOFF = 0.1
_MIN_SHADOW = 0.2
_SIDE_SHADOW = 0.7


def _as_pixels(data: Any) -> np.ndarray:
    arr = np.array(data, dtype=np.int64) & _MASK
    return arr.astype(np.uint32)


class Texture:
    """A read-only image addressed as ``pixels[y, x]`` with 0xRRGGBB values."""

    def __init__(self, pixels: Any) -> None:
        arr = _as_pixels(pixels)
        if arr.ndim != 2 or arr.size == 0:
            raise ValueError("a texture needs a non-empty 2-D pixel array")
        self.pixels = arr

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texture pixel out of range: ({x}, {y})")
        return int(self.pixels[y, x])


class Screen:
    """The frame being drawn, ``width`` by ``height`` pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; raise ``CubError`` if it lies off the screen."""
        if not self._inside(x, y):
            raise CubError("mlx error: Failed to put pixel")
        self.pixels[y, x] = color & _MASK

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"screen pixel out of range: ({x}, {y})")
        return int(self.pixels[y, x])

    def draw_background(self, ceil_color: int, floor_color: int) -> None:
        """Paint the upper half with the ceiling colour and the rest with the floor."""
        half = self.height // 2
        self.pixels[:half, :] = ceil_color & _MASK
        self.pixels[half:, :] = floor_color & _MASK

    def draw_square(self, x: int, y: int, color: int) -> None:
        """Fill a 9-by-9 square whose top-left corner is (x, y)."""
        last = SQUARE_SIZE - 1
        if not (self._inside(x, y) and self._inside(x + last, y + last)):
            raise CubError("mlx error: Failed to put pixel")
        self.pixels[y:y + SQUARE_SIZE, x:x + SQUARE_SIZE] = color & _MASK

    def draw_filled_circle(
        self, cx: int, cy: int, r: int, color: int = CIRCLE_COLOR
    ) -> None:
        """Fill the disc of radius ``r`` centred on (cx, cy)."""
        if r < 0:
            return
        offsets = np.arange(-r, r + 1)
        mask = offsets[None, :] ** 2 + offsets[:, None] ** 2 <= r * r
        rows, cols = np.nonzero(mask)
        ys = cy - r + rows
        xs = cx - r + cols
        if (xs < 0).any() or (ys < 0).any() or (xs >= self.width).any() or (
            ys >= self.height
        ).any():
            raise CubError("mlx error: Failed to put pixel")
        self.pixels[ys, xs] = color & _MASK

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line from (x0, y0) to (x1, y1), both ends included."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        err = dx + dy
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        while True:
            self.put_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy


def apply_shadow(color: int, distance: float, side: int) -> int:
    """Darken ``color`` with distance, and further for north/south faces."""
    factor = 1.0 / (1.0 + distance * _SHADOW_FALLOFF)
    factor = max(factor, _MIN_SHADOW)
    if side == 1:
        factor *= _SIDE_SHADOW
    red = int(((color >> 16) & 0xFF) * factor)
    green = int(((color >> 8) & 0xFF) * factor)
    blue = int((color & 0xFF) * factor)
    return (red << 16) | (green << 8) | blue