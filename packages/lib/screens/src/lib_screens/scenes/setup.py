from __future__ import annotations

import logging
from typing import Optional

import pygame
from lib_quiz import RosterBuilder, StartGame

from ..draw import draw_lines, draw_text
from ..keys import SUBMIT_KEYS, is_keydown
from ..sequence import SceneInterface

logger = logging.getLogger(__name__)


class SetupScene(SceneInterface):
    """Player entry. Type a name and press Enter to add it.

    Enter on an empty name starts the game once at least one player is in.
    """

    def __init__(self, manager=None):
        super().__init__(manager)
        self.roster: Optional[RosterBuilder] = None

    def enter(self):
        logger.debug("SetupScene: enter")
        if self.manager is not None:
            self.roster = RosterBuilder(self.manager.global_state.config)
        else:
            self.roster = RosterBuilder()

    def exit(self):
        logger.debug("SetupScene: exit")
        self.roster = None

    def handle_event(self, event) -> None:
        if not is_keydown(event) or self.roster is None:
            return

        if event.key == pygame.K_ESCAPE:
            if self.manager is not None:
                self.manager.request_quit()
        elif event.key in SUBMIT_KEYS:
            self._submit()
        elif event.key == pygame.K_BACKSPACE:
            self.roster.backspace()
        else:
            self.roster.type_text(getattr(event, "unicode", ""))

    def _submit(self) -> None:
        roster = self.roster
        if roster.buffer.strip() and not roster.is_full:
            roster.add_player()
            return
        if roster.is_full and roster.buffer:
            # a full roster starts the game; leftover text is dropped
            logger.info("SetupScene: roster full, %r not added", roster.buffer.strip())
            roster.buffer = ""
        if roster.can_start:
            self.dispatch(StartGame(roster.players()))

    def render(self, surface) -> None:
        if surface is None or self.manager is None or self.roster is None:
            return

        display = self.manager.global_state.display
        config = self.manager.global_state.config
        try:
            surface.fill(display.background)
            width, _ = surface.get_size()
            cx = width // 2
            draw_text(surface, "Math Master", display.title_size, display.accent, center=(cx, 60))
            draw_text(
                surface,
                f"Enter player names (1-{config.max_players} players)",
                display.small_size,
                display.muted,
                center=(cx, 115),
            )
            name = self.roster.buffer or "Player name"
            name_color = display.foreground if self.roster.buffer else display.muted
            draw_text(surface, f"> {name}", display.body_size, name_color, center=(cx, 170))

            lines = [f"{i + 1}. {n}" for i, n in enumerate(self.roster.names)]
            y = draw_lines(surface, lines, display.body_size, display.foreground, cx, 215)

            if self.roster.is_full:
                hint = "Roster full / ENTER: start game"
            elif self.roster.can_start:
                hint = "ENTER: add player / ENTER on empty name: start game"
            else:
                hint = "ENTER: add player"
            draw_text(surface, hint, display.small_size, display.muted, center=(cx, max(y + 30, 520)))
        except Exception as e:
            logger.warning("SetupScene: render failed: %s", e)
