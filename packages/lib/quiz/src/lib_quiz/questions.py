"""Arithmetic question generation."""

from __future__ import annotations

from typing import Mapping

import numpy as np

from .errors import UnknownLevelError
from .models import LEVEL_RANGES, GameType, OperandRange, Question

__all__ = [
    "QuestionGenerator",
    "build_question",
    "ensure_generator",
    "generate_question",
]


def ensure_generator(source: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(source, np.random.Generator):
        return source
    return np.random.default_rng(source)


class QuestionGenerator:
    """Draws one question per call for a game type and difficulty level.

    Operands are drawn independently and uniformly from the level's
    inclusive bounds. The generator keeps no history, so repeats happen.
    """

    def __init__(
        self,
        rng: np.random.Generator | int | None = None,
        ranges: Mapping[int, OperandRange] = LEVEL_RANGES,
    ) -> None:
        self._rng = ensure_generator(rng)
        self._ranges = dict(ranges)

    def operand_range(self, level: int) -> OperandRange:
        try:
            return self._ranges[level]
        except KeyError:
            raise UnknownLevelError(level) from None

    def generate(self, game_type: GameType | str, level: int) -> Question:
        operand_range = self.operand_range(level)
        a = self._draw(*operand_range.first_bounds())
        b = self._draw(*operand_range.second_bounds())
        return build_question(GameType.parse(game_type), a, b)

    def _draw(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


def build_question(game_type: GameType, a: int, b: int) -> Question:
    """Format operands into a question, swapping for subtraction if needed."""

    if game_type is GameType.ADDITION:
        answer = a + b
    elif game_type is GameType.SUBTRACTION:
        # keep the result non-negative
        if a < b:
            a, b = b, a
        answer = a - b
    else:
        answer = a * b

    return Question(
        operand1=a,
        operand2=b,
        game_type=game_type,
        text=f"{a} {game_type.symbol} {b}",
        answer=answer,
    )


def generate_question(
    game_type: GameType | str,
    level: int,
    rng: np.random.Generator | int | None = None,
) -> Question:
    """One-off generation without keeping a generator around."""

    return QuestionGenerator(rng).generate(game_type, level)
