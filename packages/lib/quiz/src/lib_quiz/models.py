"""Data definitions for the quiz: players, game types, levels and views."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Player:
    """A participant in the round.

    attributes:
        name: display name, already trimmed (1-15 chars).
        score: points banked across finished turns; never decreases.
    """

    name: str
    score: int = 0

    def add_points(self, points: int) -> "Player":
        return replace(self, score=self.score + points)


class GameType(enum.Enum):
    MULTIPLICATION = "Multiplication"
    ADDITION = "Addition"
    SUBTRACTION = "Subtraction"

    @property
    def label(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, value: object) -> "GameType":
        """Resolve a GameType from an instance, a label or a member name.

        Anything unrecognized resolves to MULTIPLICATION.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() in (member.value.lower(), member.name.lower()):
                    return member
        return cls.MULTIPLICATION


_SYMBOLS: Dict[GameType, str] = {
    GameType.MULTIPLICATION: "×",
    GameType.ADDITION: "+",
    GameType.SUBTRACTION: "-",
}


@dataclass(frozen=True)
class OperandRange:
    """Inclusive operand bounds for a difficulty level.

    The second operand uses `min2`/`max2` when given and falls back to
    `min`/`max` otherwise.
    """

    min: int
    max: int
    min2: Optional[int] = None
    max2: Optional[int] = None

    def __post_init__(self) -> None:
        lo2, hi2 = self.second_bounds()
        if self.min > self.max or lo2 > hi2:
            raise ValueError(f"empty operand range: {self}")

    def first_bounds(self) -> Tuple[int, int]:
        return self.min, self.max

    def second_bounds(self) -> Tuple[int, int]:
        lo = self.min if self.min2 is None else self.min2
        hi = self.max if self.max2 is None else self.max2
        return lo, hi


# level 4 narrows the second operand so products stay tractable
LEVEL_RANGES: Dict[int, OperandRange] = {
    1: OperandRange(1, 10),
    2: OperandRange(1, 20),
    3: OperandRange(1, 50),
    4: OperandRange(10, 100, min2=1, max2=10),
    5: OperandRange(1, 100),
}

LEVELS: Tuple[int, ...] = tuple(sorted(LEVEL_RANGES))


@dataclass(frozen=True)
class Question:
    operand1: int
    operand2: int
    game_type: GameType
    text: str
    answer: int

    def is_correct(self, value: Optional[int]) -> bool:
        return value is not None and value == self.answer


class View(enum.Enum):
    """Screen currently shown. Values double as scene names."""

    SETUP = "setup"
    CHOOSE_GAME_TYPE = "game_type"
    CHOOSE_LEVEL = "level"
    TURN_ANNOUNCE = "turn"
    PLAYING = "playing"
    RESULTS = "results"


@dataclass(frozen=True)
class Session:
    """Whole-game state. Replaced, never mutated, by `transition`."""

    players: Tuple[Player, ...] = field(default_factory=tuple)
    game_type: Optional[GameType] = None
    level: Optional[int] = None
    current_player_index: int = 0
    view: View = View.SETUP

    @property
    def current_player(self) -> Optional[Player]:
        if 0 <= self.current_player_index < len(self.players):
            return self.players[self.current_player_index]
        return None

    @property
    def is_last_player(self) -> bool:
        return self.current_player_index >= len(self.players) - 1

    def leaderboard(self) -> Tuple[Player, ...]:
        """Players by descending score; ties keep roster order."""
        return tuple(sorted(self.players, key=lambda p: p.score, reverse=True))
