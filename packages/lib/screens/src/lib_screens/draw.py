"""Small pygame drawing helpers shared by the scenes."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional, Tuple

import pygame

from .config import Color


@lru_cache(maxsize=None)
def get_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    # None selects pygame's bundled default font
    return pygame.font.Font(None, size)


def draw_text(
    surface: pygame.Surface,
    text: str,
    size: int,
    color: Color,
    center: Optional[Tuple[int, int]] = None,
    topleft: Optional[Tuple[int, int]] = None,
) -> pygame.Rect:
    """Render `text` onto `surface`, anchored by `center` or `topleft`."""

    rendered = get_font(size).render(text, True, color)
    rect = rendered.get_rect()
    if topleft is not None:
        rect.topleft = topleft
    else:
        rect.center = center if center is not None else surface.get_rect().center
    surface.blit(rendered, rect)
    return rect


def draw_lines(
    surface: pygame.Surface,
    lines: Iterable[str],
    size: int,
    color: Color,
    center_x: int,
    top: int,
    spacing: int = 8,
) -> int:
    """Draw centred lines top to bottom. Returns the y below the last line."""

    y = top
    for line in lines:
        rendered = get_font(size).render(line, True, color)
        rect = rendered.get_rect(midtop=(center_x, y))
        surface.blit(rendered, rect)
        y = rect.bottom + spacing
    return y
