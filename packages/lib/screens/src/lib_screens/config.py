"""Window and rendering settings for the pygame front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class DisplayConfig:
    window_size: Tuple[int, int] = (1024, 576)
    window_position: Tuple[int, int] = (500, 500)
    caption: str = "Math Master"
    fps: int = 60

    title_size: int = 72
    heading_size: int = 56
    body_size: int = 40
    small_size: int = 28

    background: Color = (24, 26, 38)
    foreground: Color = (236, 236, 240)
    muted: Color = (140, 144, 160)
    accent: Color = (255, 196, 0)
    success: Color = (0, 200, 120)
    danger: Color = (230, 70, 70)


DEFAULT_DISPLAY = DisplayConfig()
