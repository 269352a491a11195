from .config import DEFAULT_CONFIG, QuizConfig
from .countdown import Countdown
from .errors import (
    InvalidLevelError,
    InvalidRosterError,
    InvalidTransitionError,
    QuizError,
    UnknownLevelError,
)
from .models import (
    LEVEL_RANGES,
    LEVELS,
    GameType,
    OperandRange,
    Player,
    Question,
    Session,
    View,
)
from .questions import QuestionGenerator, build_question, ensure_generator, generate_question
from .roster import RosterBuilder
from .session import (
    EndTurn,
    PlayAgain,
    Reset,
    SelectGameType,
    SelectLevel,
    SessionStore,
    StartGame,
    StartTurn,
    initial_session,
    transition,
    validate_roster,
)
from .turn import AnswerBuffer, SubmitResult, Turn

__all__ = [
    "DEFAULT_CONFIG",
    "QuizConfig",
    "Countdown",
    "QuizError",
    "InvalidLevelError",
    "InvalidRosterError",
    "InvalidTransitionError",
    "UnknownLevelError",
    "LEVEL_RANGES",
    "LEVELS",
    "GameType",
    "OperandRange",
    "Player",
    "Question",
    "Session",
    "View",
    "QuestionGenerator",
    "build_question",
    "ensure_generator",
    "generate_question",
    "RosterBuilder",
    "StartGame",
    "SelectGameType",
    "SelectLevel",
    "StartTurn",
    "EndTurn",
    "PlayAgain",
    "Reset",
    "SessionStore",
    "initial_session",
    "transition",
    "validate_roster",
    "AnswerBuffer",
    "SubmitResult",
    "Turn",
]
