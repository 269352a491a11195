from __future__ import annotations

import logging

import pygame
from lib_quiz import GameType, SelectGameType

from ..draw import draw_lines, draw_text
from ..keys import is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)

GAME_TYPE_KEYS = {
    pygame.K_1: GameType.MULTIPLICATION,
    pygame.K_KP1: GameType.MULTIPLICATION,
    pygame.K_m: GameType.MULTIPLICATION,
    pygame.K_2: GameType.ADDITION,
    pygame.K_KP2: GameType.ADDITION,
    pygame.K_a: GameType.ADDITION,
    pygame.K_3: GameType.SUBTRACTION,
    pygame.K_KP3: GameType.SUBTRACTION,
    pygame.K_s: GameType.SUBTRACTION,
}

MENU = (GameType.MULTIPLICATION, GameType.ADDITION, GameType.SUBTRACTION)


class GameTypeScene(SceneInterface):
    def enter(self):
        logger.debug("GameTypeScene: enter")

    def exit(self):
        logger.debug("GameTypeScene: exit")

    def handle_event(self, event) -> None:
        if not is_keydown(event):
            return
        if event.key == pygame.K_ESCAPE:
            if self.manager is not None:
                self.manager.request_quit()
            return

        game_type = GAME_TYPE_KEYS.get(event.key)
        if game_type is not None:
            self.dispatch(SelectGameType(game_type))

    def render(self, surface) -> None:
        if surface is None or self.manager is None:
            return

        display = self.manager.global_state.display
        try:
            surface.fill(display.background)
            width, _ = surface.get_size()
            cx = width // 2
            draw_text(surface, "Choose a game", display.heading_size, display.accent, center=(cx, 90))
            lines = [f"{i + 1}. {t.label}  ({t.symbol})" for i, t in enumerate(MENU)]
            draw_lines(surface, lines, display.body_size, display.foreground, cx, 180, spacing=24)
        except Exception as e:
            logger.warning("GameTypeScene: render failed: %s", e)
