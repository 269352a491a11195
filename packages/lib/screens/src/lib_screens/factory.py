"""Wire every scene to its view."""

from __future__ import annotations

import numpy as np
from lib_quiz import DEFAULT_CONFIG, QuizConfig, View

from .config import DEFAULT_DISPLAY, DisplayConfig
from .scenes.game_type import GameTypeScene
from .scenes.level import LevelScene
from .scenes.playing import PlayingScene
from .scenes.results import ResultsScene
from .scenes.setup import SetupScene
from .scenes.turn import TurnAnnounceScene
from .sequence import SequenceManager


def create_manager(
    config: QuizConfig = DEFAULT_CONFIG,
    display: DisplayConfig = DEFAULT_DISPLAY,
    rng: np.random.Generator | int | None = None,
) -> SequenceManager:
    """Build a manager with one scene per view, showing the setup screen."""

    manager = SequenceManager(config, display, rng)
    manager.register_scene(View.SETUP.value, SetupScene())
    manager.register_scene(View.CHOOSE_GAME_TYPE.value, GameTypeScene())
    manager.register_scene(View.CHOOSE_LEVEL.value, LevelScene())
    manager.register_scene(View.TURN_ANNOUNCE.value, TurnAnnounceScene())
    manager.register_scene(View.PLAYING.value, PlayingScene())
    manager.register_scene(View.RESULTS.value, ResultsScene())
    manager.start(manager.store.view.value)
    return manager
