"""lib_screens package exports for the quiz's pygame front end.

One scene per session view; the sequence manager switches between them as
intents move the session along.
"""

from .config import DEFAULT_DISPLAY, DisplayConfig
from .factory import create_manager
from .scenes.game_type import GameTypeScene
from .scenes.level import LevelScene
from .scenes.playing import PlayingScene
from .scenes.results import ResultsScene
from .scenes.setup import SetupScene
from .scenes.turn import TurnAnnounceScene
from .sequence import GlobalState, SceneInterface, SequenceManager

__all__ = [
    "DEFAULT_DISPLAY",
    "DisplayConfig",
    "create_manager",
    "SequenceManager",
    "SceneInterface",
    "GlobalState",
    "SetupScene",
    "GameTypeScene",
    "LevelScene",
    "TurnAnnounceScene",
    "PlayingScene",
    "ResultsScene",
]
