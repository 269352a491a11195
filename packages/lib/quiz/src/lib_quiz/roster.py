"""Roster entry for the setup screen.

Invalid entries are declined (the call returns False) instead of raising,
so the session only ever sees rosters that pass `validate_roster`.
"""

from __future__ import annotations

from typing import List, Optional

from .config import DEFAULT_CONFIG, QuizConfig
from .models import Player


class RosterBuilder:
    def __init__(self, config: QuizConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.buffer = ""
        self._names: List[str] = []

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def is_full(self) -> bool:
        return len(self._names) >= self.config.max_players

    @property
    def can_start(self) -> bool:
        return bool(self._names)

    @property
    def can_add(self) -> bool:
        return bool(self.buffer.strip()) and not self.is_full

    def type_text(self, text: str) -> None:
        """Append printable characters, stopping at the name length cap."""
        for char in text:
            if len(self.buffer) >= self.config.max_name_length:
                break
            if char.isprintable():
                self.buffer += char

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def add_player(self, name: Optional[str] = None) -> bool:
        """Add `name` (or the pending buffer) to the roster.

        Returns False when the name is blank, too long or the roster is full.
        The buffer is cleared only when a buffered name was accepted.
        """
        from_buffer = name is None
        candidate = (self.buffer if from_buffer else name).strip()
        if not candidate or self.is_full:
            return False
        if len(candidate) > self.config.max_name_length:
            return False

        self._names.append(candidate)
        if from_buffer:
            self.buffer = ""
        return True

    def players(self) -> List[Player]:
        return [Player(name=name) for name in self._names]

    def clear(self) -> None:
        self.buffer = ""
        self._names.clear()
