from __future__ import annotations

import logging
from typing import Optional

import pygame
from lib_quiz import EndTurn, Turn

from ..draw import draw_text
from ..keys import SUBMIT_KEYS, digit_from_event, is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)


class PlayingScene(SceneInterface):
    """Timed answer entry for the current player.

    A fresh `Turn` is built on enter and cancelled on exit, so a countdown
    never outlives the scene that owns it.
    """

    def __init__(self, manager=None):
        super().__init__(manager)
        self.turn: Optional[Turn] = None
        self._reported = False

    def enter(self):
        logger.debug("PlayingScene: enter")
        if self.manager is None:
            raise RuntimeError("PlayingScene: no manager assigned")

        session = self.manager.store.state
        player = session.current_player
        if player is None or session.game_type is None or session.level is None:
            raise RuntimeError("PlayingScene: session is not ready for a turn")

        state = self.manager.global_state
        self._reported = False
        self.turn = Turn(
            player,
            session.game_type,
            session.level,
            state.generator,
            config=state.config,
            on_end=self._on_turn_end,
        )

    def exit(self):
        logger.debug("PlayingScene: exit")
        if self.turn is not None:
            self.turn.cancel()
        self.turn = None

    def update(self, dt: float) -> None:
        if self.turn is None:
            logger.debug("PlayingScene: update called before enter")
            return
        self.turn.update(dt)

    def handle_event(self, event) -> None:
        if not is_keydown(event) or self.turn is None:
            return

        digit = digit_from_event(event)
        if digit is not None:
            self.turn.press_digit(digit)
        elif event.key == pygame.K_BACKSPACE:
            self.turn.delete()
        elif event.key in SUBMIT_KEYS:
            self.turn.submit()

    def _on_turn_end(self, score: int) -> None:
        if self._reported:
            return
        self._reported = True
        self.dispatch(EndTurn(score))

    def render(self, surface) -> None:
        if surface is None or self.manager is None or self.turn is None:
            return

        display = self.manager.global_state.display
        turn = self.turn
        try:
            surface.fill(display.background)
            width, height = surface.get_size()
            cx = width // 2

            draw_text(surface, turn.player.name, display.body_size, display.foreground, topleft=(30, 24))
            draw_text(
                surface,
                f"Score: {turn.display_score}",
                display.small_size,
                display.muted,
                topleft=(30, 70),
            )
            timer_color = display.danger if turn.remaining <= 10 else display.accent
            if not turn.countdown.active and not turn.closed:
                timer_color = display.muted
            draw_text(surface, str(turn.remaining), display.title_size, timer_color, center=(width - 80, 60))

            draw_text(
                surface, f"{turn.question.text} = ?", display.title_size, display.foreground, center=(cx, height // 2 - 40)
            )
            answer = turn.answer_text or "..."
            answer_color = display.success if turn.answer_text else display.muted
            draw_text(surface, answer, display.heading_size, answer_color, center=(cx, height // 2 + 50))
            draw_text(
                surface,
                "0-9: type   BACKSPACE: delete   ENTER: answer",
                display.small_size,
                display.muted,
                center=(cx, height - 40),
            )
        except Exception as e:
            logger.warning("PlayingScene: render failed: %s", e)
