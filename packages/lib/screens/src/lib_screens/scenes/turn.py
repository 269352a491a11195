from __future__ import annotations

import logging

import pygame
from lib_quiz import StartTurn

from ..draw import draw_text
from ..keys import SUBMIT_KEYS, is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)


class TurnAnnounceScene(SceneInterface):
    """Names the next player and waits for them to start."""

    def enter(self):
        logger.debug("TurnAnnounceScene: enter")

    def exit(self):
        logger.debug("TurnAnnounceScene: exit")

    def handle_event(self, event) -> None:
        if not is_keydown(event):
            return
        if event.key == pygame.K_ESCAPE:
            if self.manager is not None:
                self.manager.request_quit()
        elif event.key == pygame.K_SPACE or event.key in SUBMIT_KEYS:
            self.dispatch(StartTurn())

    def render(self, surface) -> None:
        session = self.session
        if surface is None or session is None or session.current_player is None:
            return

        display = self.manager.global_state.display
        try:
            surface.fill(display.background)
            width, height = surface.get_size()
            cx = width // 2
            draw_text(surface, "Next turn", display.heading_size, display.foreground, center=(cx, height // 2 - 90))
            draw_text(
                surface, session.current_player.name, display.title_size, display.accent, center=(cx, height // 2)
            )
            draw_text(
                surface, "Press SPACE to start", display.small_size, display.muted, center=(cx, height // 2 + 90)
            )
        except Exception as e:
            logger.warning("TurnAnnounceScene: render failed: %s", e)
