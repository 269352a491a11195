from __future__ import annotations

import logging

import pygame
from lib_quiz import LEVEL_RANGES, LEVELS, SelectLevel

from ..draw import draw_lines, draw_text
from ..keys import digit_from_event, is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)


def describe_level(level: int) -> str:
    operand_range = LEVEL_RANGES[level]
    lo, hi = operand_range.first_bounds()
    lo2, hi2 = operand_range.second_bounds()
    if (lo, hi) == (lo2, hi2):
        return f"Level {level}  ({lo}-{hi})"
    return f"Level {level}  ({lo}-{hi} and {lo2}-{hi2})"


class LevelScene(SceneInterface):
    def enter(self):
        logger.debug("LevelScene: enter")

    def exit(self):
        logger.debug("LevelScene: exit")

    def handle_event(self, event) -> None:
        if not is_keydown(event):
            return
        if event.key == pygame.K_ESCAPE:
            if self.manager is not None:
                self.manager.request_quit()
            return

        digit = digit_from_event(event)
        if digit is not None and int(digit) in LEVELS:
            self.dispatch(SelectLevel(int(digit)))

    def render(self, surface) -> None:
        if surface is None or self.manager is None:
            return

        display = self.manager.global_state.display
        try:
            surface.fill(display.background)
            width, _ = surface.get_size()
            cx = width // 2
            draw_text(surface, "Choose a level", display.heading_size, display.accent, center=(cx, 80))
            session = self.session
            if session is not None and session.game_type is not None:
                draw_text(
                    surface, session.game_type.label, display.small_size, display.muted, center=(cx, 130)
                )
            lines = [describe_level(level) for level in LEVELS]
            draw_lines(surface, lines, display.body_size, display.foreground, cx, 175, spacing=18)
        except Exception as e:
            logger.warning("LevelScene: render failed: %s", e)
