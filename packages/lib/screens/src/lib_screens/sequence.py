"""Sequence manager and Scene interface for lib_screens.

The manager owns the live `SessionStore`. Scenes raise intents through
`manager.dispatch`; whenever the resulting view differs from the current
one the manager switches to the scene registered under that view's name.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Dict, Optional

import numpy as np
import pygame
from lib_quiz import DEFAULT_CONFIG, QuestionGenerator, QuizConfig, Session, SessionStore
from lib_quiz.session import Intent

from .config import DEFAULT_DISPLAY, DisplayConfig

logger = logging.getLogger(__name__)


class SceneInterface(abc.ABC):
    """Abstract interface for a scene.

    Concrete scenes override the lifecycle methods they need; the defaults
    are no-ops.
    """

    def __init__(self, manager: Optional["SequenceManager"] = None) -> None:
        self.manager = manager

    def enter(self) -> None:
        """Called when the scene becomes active."""
        return None

    def exit(self) -> None:
        """Called when the scene is no longer active."""
        return None

    def update(self, dt: float) -> None:
        """Update scene logic. dt is seconds since last update."""
        return None

    def render(self, surface: Optional[pygame.Surface]) -> None:
        """Render the scene to the given drawing surface (pygame.Surface).

        surface may be None in non-graphical tests.
        """
        return None

    def handle_event(self, event: Optional[pygame.event.Event]) -> None:
        """Handle an input/event object (pygame.Event or similar)."""
        return None

    @property
    def session(self) -> Optional[Session]:
        if self.manager is None:
            return None
        return self.manager.store.state

    def dispatch(self, intent: Intent) -> None:
        if self.manager is None:
            logger.warning("%s: dispatch without manager", type(self).__name__)
            return
        self.manager.dispatch(intent)


class GlobalState:
    """Objects shared by every scene for the lifetime of the process."""

    def __init__(
        self,
        config: QuizConfig = DEFAULT_CONFIG,
        display: DisplayConfig = DEFAULT_DISPLAY,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        self.config = config
        self.display = display
        self.generator = QuestionGenerator(rng)


class SequenceManager:
    """Simple manager for scenes/sequences.

    Responsibilities:
    - register scenes
    - switch active scene
    - forward update/render/event calls
    - apply intents to the session and follow its view
    """

    def __init__(
        self,
        config: QuizConfig = DEFAULT_CONFIG,
        display: DisplayConfig = DEFAULT_DISPLAY,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        self._scenes: Dict[str, SceneInterface] = {}
        self._current: Optional[SceneInterface] = None
        self._current_name: Optional[str] = None
        self.running: bool = False
        self.global_state = GlobalState(config, display, rng)
        self.store = SessionStore(config)
        self.store.subscribe(self._on_view_change)

    @property
    def current_name(self) -> Optional[str]:
        return self._current_name

    @property
    def current_scene(self) -> Optional[SceneInterface]:
        return self._current

    def initialize(self) -> None:
        """Initialize manager resources. Call before starting the loop."""
        self.running = True

    def register_scene(self, name: str, scene: SceneInterface) -> None:
        """Register a scene instance under a name."""
        scene.manager = self
        self._scenes[name] = scene

    def start(self, name: str) -> None:
        """Switch to the named scene, calling lifecycle hooks."""
        if self._current is not None:
            self._current.exit()

        self._current = self._scenes.get(name)
        self._current_name = name if self._current is not None else None
        if self._current is None:
            logger.warning("SequenceManager: no scene registered for %r", name)
            return
        self._current.enter()

    def dispatch(self, intent: Intent) -> Session:
        """Apply an intent to the session; the scene follows the view."""
        return self.store.dispatch(intent)

    def request_quit(self) -> None:
        self.running = False

    def update(self, dt: float) -> None:
        """Forward update to current scene."""
        if self._current is not None:
            self._current.update(dt)

    def render(self, surface: Any) -> None:
        """Forward render to current scene."""
        if self._current is not None:
            self._current.render(surface)

    def handle_event(self, event: Any) -> None:
        """Forward event to current scene."""
        if self._current is not None:
            self._current.handle_event(event)

    def shutdown(self) -> None:
        """Shutdown manager and active scene."""
        if self._current is not None:
            self._current.exit()
        self._current = None
        self._current_name = None
        self.running = False

    def _on_view_change(self, old: Session, new: Session) -> None:
        self.start(new.view.value)
