from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import pygame
from lib_quiz import PlayAgain, Player, Reset

from ..draw import draw_text
from ..keys import is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)


def ranking_lines(leaderboard: Sequence[Player]) -> List[Tuple[str, str]]:
    """Pair "<rank>. <name>" with "<score> pts" for each player."""

    return [
        (f"{rank}. {player.name}", f"{player.score} pts")
        for rank, player in enumerate(leaderboard, start=1)
    ]


class ResultsScene(SceneInterface):
    def enter(self):
        logger.debug("ResultsScene: enter")
        session = self.session
        if session is not None:
            for name, points in ranking_lines(session.leaderboard()):
                logger.info("ResultsScene: %s %s", name, points)

    def exit(self):
        logger.debug("ResultsScene: exit")

    def handle_event(self, event) -> None:
        if not is_keydown(event):
            return

        if event.key == pygame.K_r:
            self.dispatch(PlayAgain())
        elif event.key == pygame.K_n:
            self.dispatch(Reset())
        elif event.key in (pygame.K_q, pygame.K_ESCAPE):
            self._request_quit()

    def _request_quit(self) -> None:
        if self.manager is not None:
            self.manager.request_quit()

    def render(self, surface) -> None:
        session = self.session
        if surface is None or session is None:
            return

        display = self.manager.global_state.display
        try:
            surface.fill(display.background)
            width, height = surface.get_size()
            cx = width // 2
            draw_text(surface, "Final results", display.heading_size, display.accent, center=(cx, 60))

            y = 120
            for i, (name, points) in enumerate(ranking_lines(session.leaderboard())):
                color = display.accent if i == 0 else display.foreground
                draw_text(surface, name, display.body_size, color, topleft=(cx - 240, y))
                rect = draw_text(surface, points, display.body_size, color, topleft=(cx + 120, y))
                y = rect.bottom + 16

            draw_text(
                surface,
                "R: play again   N: new players   Q: quit",
                display.small_size,
                display.muted,
                center=(cx, height - 40),
            )
        except Exception as e:
            logger.warning("ResultsScene: render failed: %s", e)
