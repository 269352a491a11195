"""Game constants shared by the session, roster and turn logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuizConfig:
    """Tunable rules of a quiz round.

    attributes:
        turn_duration: countdown length of one turn, in ticks.
        tick_interval: seconds per countdown tick.
        points_per_correct: points earned for each correct answer.
        max_players: roster cap.
        max_name_length: player name cap after trimming.
        max_answer_digits: answer input cap.
    """

    turn_duration: int = 60
    tick_interval: float = 1.0
    points_per_correct: int = 10
    max_players: int = 5
    max_name_length: int = 15
    max_answer_digits: int = 6

    def __post_init__(self) -> None:
        if self.turn_duration <= 0:
            raise ValueError("turn_duration must be positive")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.max_players <= 0:
            raise ValueError("max_players must be positive")


DEFAULT_CONFIG = QuizConfig()
