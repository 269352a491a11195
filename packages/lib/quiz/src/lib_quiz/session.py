"""Session state machine.

`transition` is a pure reducer over immutable `Session` records. The
`SessionStore` wraps it for the presentation layer: it holds the single
live session for the process and notifies listeners when the view changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Sequence, Tuple, Type

from .config import DEFAULT_CONFIG, QuizConfig
from .errors import InvalidLevelError, InvalidRosterError, InvalidTransitionError
from .models import LEVELS, GameType, Player, Session, View

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartGame:
    players: Tuple[Player, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))


@dataclass(frozen=True)
class SelectGameType:
    game_type: GameType


@dataclass(frozen=True)
class SelectLevel:
    level: int


@dataclass(frozen=True)
class StartTurn:
    pass


@dataclass(frozen=True)
class EndTurn:
    points: int


@dataclass(frozen=True)
class PlayAgain:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Intent = StartGame | SelectGameType | SelectLevel | StartTurn | EndTurn | PlayAgain | Reset


def initial_session() -> Session:
    return Session()


def validate_roster(
    players: Sequence[Player], config: QuizConfig = DEFAULT_CONFIG
) -> Tuple[Player, ...]:
    """Return the roster with trimmed names and zeroed scores.

    Raises InvalidRosterError if the roster would not have passed the
    setup screen's checks.
    """
    if not players:
        raise InvalidRosterError("at least one player is required")
    if len(players) > config.max_players:
        raise InvalidRosterError(
            f"at most {config.max_players} players allowed, got {len(players)}"
        )

    roster: List[Player] = []
    for player in players:
        name = player.name.strip()
        if not name:
            raise InvalidRosterError("player names must not be blank")
        if len(name) > config.max_name_length:
            raise InvalidRosterError(
                f"player name {name!r} exceeds {config.max_name_length} characters"
            )
        roster.append(Player(name=name, score=0))
    return tuple(roster)


def _start_game(session: Session, intent: StartGame, config: QuizConfig) -> Session:
    players = validate_roster(intent.players, config)
    return replace(session, players=players, view=View.CHOOSE_GAME_TYPE)


def _select_game_type(
    session: Session, intent: SelectGameType, config: QuizConfig
) -> Session:
    return replace(
        session, game_type=GameType.parse(intent.game_type), view=View.CHOOSE_LEVEL
    )


def _select_level(session: Session, intent: SelectLevel, config: QuizConfig) -> Session:
    if intent.level not in LEVELS:
        raise InvalidLevelError(f"level must be one of {LEVELS}, got {intent.level!r}")
    return replace(
        session,
        level=intent.level,
        current_player_index=0,
        view=View.TURN_ANNOUNCE,
    )


def _start_turn(session: Session, intent: StartTurn, config: QuizConfig) -> Session:
    return replace(session, view=View.PLAYING)


def _end_turn(session: Session, intent: EndTurn, config: QuizConfig) -> Session:
    if intent.points < 0:
        raise InvalidTransitionError(f"turn points must be >= 0, got {intent.points}")

    index = session.current_player_index
    players = list(session.players)
    players[index] = players[index].add_points(intent.points)
    updated = replace(session, players=tuple(players))

    if not session.is_last_player:
        return replace(
            updated, current_player_index=index + 1, view=View.TURN_ANNOUNCE
        )
    return replace(updated, view=View.RESULTS)


def _play_again(session: Session, intent: PlayAgain, config: QuizConfig) -> Session:
    # roster and accumulated scores carry over into the next round
    return replace(
        session,
        game_type=None,
        level=None,
        current_player_index=0,
        view=View.CHOOSE_GAME_TYPE,
    )


def _reset(session: Session, intent: Reset, config: QuizConfig) -> Session:
    return initial_session()


_Handler = Callable[[Session, object, QuizConfig], Session]

_TRANSITIONS: Dict[Type[object], Tuple[View, _Handler]] = {
    StartGame: (View.SETUP, _start_game),
    SelectGameType: (View.CHOOSE_GAME_TYPE, _select_game_type),
    SelectLevel: (View.CHOOSE_LEVEL, _select_level),
    StartTurn: (View.TURN_ANNOUNCE, _start_turn),
    EndTurn: (View.PLAYING, _end_turn),
    PlayAgain: (View.RESULTS, _play_again),
    Reset: (View.RESULTS, _reset),
}


def transition(
    session: Session, intent: Intent, config: QuizConfig = DEFAULT_CONFIG
) -> Session:
    """Apply `intent` to `session` and return the resulting session."""

    entry = _TRANSITIONS.get(type(intent))
    if entry is None:
        raise InvalidTransitionError(f"unknown intent {intent!r}")

    expected_view, handler = entry
    if session.view is not expected_view:
        raise InvalidTransitionError(
            f"{type(intent).__name__} is not accepted in view {session.view.value!r}"
        )
    return handler(session, intent, config)


Listener = Callable[[Session, Session], None]


class SessionStore:
    """Holds the live session and applies intents to it."""

    def __init__(
        self,
        config: QuizConfig = DEFAULT_CONFIG,
        session: Session | None = None,
    ) -> None:
        self.config = config
        self._state = session if session is not None else initial_session()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> Session:
        return self._state

    @property
    def view(self) -> View:
        return self._state.view

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(old, new)` whenever the view changes.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, intent: Intent) -> Session:
        old = self._state
        new = transition(old, intent, self.config)
        self._state = new
        logger.info(
            "%s: %s -> %s", type(intent).__name__, old.view.value, new.view.value
        )
        if new.view is not old.view:
            for listener in list(self._listeners):
                listener(old, new)
        return new
