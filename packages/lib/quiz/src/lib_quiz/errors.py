"""Exceptions raised by the quiz domain.

These only signal broken caller contracts (an intent raised from the wrong
screen, a roster that skipped validation). Wrong answers and declined
roster entries are normal outcomes and never raise.
"""


class QuizError(Exception):
    """Base class for all quiz domain errors."""


class InvalidTransitionError(QuizError):
    """An intent was raised that the current view does not accept."""


class InvalidRosterError(QuizError, ValueError):
    """StartGame was raised with an empty, oversized or malformed roster."""


class InvalidLevelError(QuizError, ValueError):
    """SelectLevel was raised with a level outside the level table."""


class UnknownLevelError(QuizError, KeyError):
    """The question generator was asked for a level it has no range for."""
