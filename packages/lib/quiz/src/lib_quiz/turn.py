"""One player's timed turn: question, answer entry, scoring, countdown."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULT_CONFIG, QuizConfig
from .countdown import Countdown
from .models import GameType, Player, Question
from .questions import QuestionGenerator

logger = logging.getLogger(__name__)


class AnswerBuffer:
    """Digit-only answer entry with a length cap."""

    def __init__(self, max_length: int = 6) -> None:
        self.max_length = max_length
        self.text = ""

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def value(self) -> Optional[int]:
        return int(self.text) if self.text else None

    def push(self, char: str) -> bool:
        if len(char) != 1 or char not in "0123456789":
            return False
        if len(self.text) >= self.max_length:
            return False
        self.text += char
        return True

    def delete(self) -> None:
        self.text = self.text[:-1]

    def clear(self) -> None:
        self.text = ""


@dataclass(frozen=True)
class SubmitResult:
    correct: bool
    answer: Optional[int]
    expected: int
    points: int


class Turn:
    """Turn-scoped question loop.

    The countdown starts on the first submission, not when the turn opens.
    When it runs out, `on_end(score)` is called once with the points earned
    during this turn.
    """

    def __init__(
        self,
        player: Player,
        game_type: GameType,
        level: int,
        generator: QuestionGenerator,
        config: QuizConfig = DEFAULT_CONFIG,
        on_end: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.player = player
        self.game_type = game_type
        self.level = level
        self.config = config
        self.on_end = on_end
        self._generator = generator
        self.buffer = AnswerBuffer(config.max_answer_digits)
        self.score = 0
        self.correct_count = 0
        self.attempts = 0
        self.finished = False
        self.countdown = Countdown(
            config.turn_duration,
            interval=config.tick_interval,
            on_expire=self._finish,
        )
        self.question: Question = self._next_question()

    @property
    def remaining(self) -> int:
        return self.countdown.remaining

    @property
    def answer_text(self) -> str:
        return self.buffer.text

    @property
    def display_score(self) -> int:
        return self.player.score + self.score

    @property
    def closed(self) -> bool:
        return self.finished or self.countdown.cancelled

    def press_digit(self, char: str) -> bool:
        if self.closed:
            return False
        return self.buffer.push(char)

    def delete(self) -> None:
        if not self.closed:
            self.buffer.delete()

    def submit(self) -> Optional[SubmitResult]:
        """Score the buffered answer and move to the next question.

        Returns None without side effects when the buffer is empty or the
        turn is already over.
        """
        if self.closed or self.buffer.is_empty:
            return None

        self.countdown.start()

        value = self.buffer.value
        expected = self.question.answer
        correct = self.question.is_correct(value)
        points = self.config.points_per_correct if correct else 0
        self.score += points
        self.attempts += 1
        if correct:
            self.correct_count += 1
        logger.debug(
            "Turn: %s answered %s for %r (%s)",
            self.player.name,
            value,
            self.question.text,
            "correct" if correct else f"expected {expected}",
        )

        self.question = self._next_question()
        self.buffer.clear()
        return SubmitResult(correct=correct, answer=value, expected=expected, points=points)

    def update(self, dt: float) -> None:
        if not self.closed:
            self.countdown.update(dt)

    def cancel(self) -> None:
        """Tear down without reporting a score."""
        self.countdown.cancel()

    def _next_question(self) -> Question:
        return self._generator.generate(self.game_type, self.level)

    def _finish(self) -> None:
        if self.finished:
            return
        self.finished = True
        logger.info(
            "Turn: %s finished with %d points (%d/%d correct)",
            self.player.name,
            self.score,
            self.correct_count,
            self.attempts,
        )
        if self.on_end is not None:
            self.on_end(self.score)
