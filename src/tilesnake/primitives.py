from __future__ import annotations

import numpy as np
import pygame

from . import config

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        # Fonts from before a pygame.quit() are dead.
        _fonts.clear()
        pygame.font.init()
    font = _fonts.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _fonts[size] = font
    return font


def render_text(text: str, color, background=None, size: int = config.FONT_SIZE) -> tuple[pygame.Surface, int]:
    """Rasterise text; returns the surface and its ascent above the baseline."""
    font = _font(size)
    return font.render(text, False, color, background), font.get_ascent()


class SoftPrimitives:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h))

    def text(self, text: str, x: int, baseline_y: int, color: tuple[int, int, int]) -> None:
        surf, ascent = render_text(text, color)
        self.surface.blit(surf, (x, baseline_y - ascent))


class ArrayPrimitives:
    """Headless framebuffer; pixels are (h, w, rgb) uint8."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def clear(self, color: tuple[int, int, int]) -> None:
        self.color[:, :] = color

    def rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self.width, x + w), min(self.height, y + h)
        if x0 >= x1 or y0 >= y1:
            return
        self.color[y0:y1, x0:x1] = color

    def text(self, text: str, x: int, baseline_y: int, color: tuple[int, int, int]) -> None:
        surf, ascent = render_text(text, color, config.BLACK)
        # Glyph pixels are the non-black ones.
        # pygame surfarray is (w, h, c), the buffer is (h, w, c).
        pixels = np.transpose(pygame.surfarray.array3d(surf), (1, 0, 2))
        mask = pixels.any(axis=2)
        top = baseline_y - ascent
        th, tw = mask.shape
        x0, y0 = max(0, x), max(0, top)
        x1, y1 = min(self.width, x + tw), min(self.height, top + th)
        if x0 >= x1 or y0 >= y1:
            return
        sub = mask[y0 - top : y1 - top, x0 - x : x1 - x]
        region = self.color[y0:y1, x0:x1]
        region[sub] = pixels[y0 - top : y1 - top, x0 - x : x1 - x][sub]

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.color[y, x]
        return (int(r), int(g), int(b))
