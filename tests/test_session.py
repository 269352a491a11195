import pytest
from lib_quiz import (
    EndTurn,
    GameType,
    InvalidLevelError,
    InvalidRosterError,
    InvalidTransitionError,
    PlayAgain,
    Player,
    Reset,
    SelectGameType,
    SelectLevel,
    Session,
    SessionStore,
    StartGame,
    StartTurn,
    View,
    initial_session,
    transition,
)


def run(session, *intents):
    for intent in intents:
        session = transition(session, intent)
    return session


def at_turn_announce(*names, game_type=GameType.ADDITION, level=1):
    return run(
        initial_session(),
        StartGame([Player(n) for n in names]),
        SelectGameType(game_type),
        SelectLevel(level),
    )


def test_initial_session_is_empty_setup():
    session = initial_session()
    assert session.view is View.SETUP
    assert session.players == ()
    assert session.game_type is None
    assert session.level is None
    assert session.current_player_index == 0


def test_start_game_resets_scores_and_trims_names():
    session = transition(initial_session(), StartGame([Player("  Ann ", 40), Player("Bo", 5)]))
    assert session.view is View.CHOOSE_GAME_TYPE
    assert session.players == (Player("Ann", 0), Player("Bo", 0))


@pytest.mark.parametrize(
    "players",
    [
        [],
        [Player("   ")],
        [Player("x" * 16)],
        [Player(f"P{i}") for i in range(6)],
    ],
)
def test_start_game_rejects_invalid_roster(players):
    with pytest.raises(InvalidRosterError):
        transition(initial_session(), StartGame(players))


def test_select_type_then_level():
    session = run(initial_session(), StartGame([Player("A")]), SelectGameType(GameType.SUBTRACTION))
    assert session.view is View.CHOOSE_LEVEL
    assert session.game_type is GameType.SUBTRACTION

    session = transition(session, SelectLevel(4))
    assert session.view is View.TURN_ANNOUNCE
    assert session.level == 4
    assert session.current_player_index == 0


@pytest.mark.parametrize("level", [0, 6, -1])
def test_select_level_outside_table(level):
    session = run(initial_session(), StartGame([Player("A")]), SelectGameType(GameType.ADDITION))
    with pytest.raises(InvalidLevelError):
        transition(session, SelectLevel(level))


def test_two_player_round():
    session = at_turn_announce("A", "B")

    session = run(session, StartTurn())
    assert session.view is View.PLAYING
    assert session.game_type is GameType.ADDITION and session.level == 1

    session = transition(session, EndTurn(30))
    assert session.players == (Player("A", 30), Player("B", 0))
    assert session.view is View.TURN_ANNOUNCE
    assert session.current_player_index == 1

    session = run(session, StartTurn(), EndTurn(10))
    assert session.players == (Player("A", 30), Player("B", 10))
    assert session.view is View.RESULTS
    assert [p.name for p in session.leaderboard()] == ["A", "B"]


def test_single_player_goes_straight_to_results():
    session = run(at_turn_announce("Solo"), StartTurn(), EndTurn(0))
    assert session.view is View.RESULTS
    assert session.players == (Player("Solo", 0),)


def test_leaderboard_sorts_descending_and_keeps_ties_in_roster_order():
    session = Session(players=(Player("A", 10), Player("B", 50), Player("C", 10)))
    assert [p.name for p in session.leaderboard()] == ["B", "A", "C"]
    # roster order itself is untouched
    assert [p.name for p in session.players] == ["A", "B", "C"]


def test_play_again_keeps_roster_and_scores():
    session = run(at_turn_announce("A", "B"), StartTurn(), EndTurn(20), StartTurn(), EndTurn(40))
    session = transition(session, PlayAgain())
    assert session.view is View.CHOOSE_GAME_TYPE
    assert session.players == (Player("A", 20), Player("B", 40))
    assert session.game_type is None
    assert session.level is None
    assert session.current_player_index == 0

    # scores keep accumulating across rounds
    session = run(
        session,
        SelectGameType(GameType.MULTIPLICATION),
        SelectLevel(2),
        StartTurn(),
        EndTurn(10),
        StartTurn(),
        EndTurn(0),
    )
    assert session.players == (Player("A", 30), Player("B", 40))
    assert [p.name for p in session.leaderboard()] == ["B", "A"]


def test_reset_clears_everything():
    session = run(at_turn_announce("A", "B"), StartTurn(), EndTurn(20), StartTurn(), EndTurn(40))
    session = transition(session, Reset())
    assert session == initial_session()


@pytest.mark.parametrize(
    "intent",
    [StartTurn(), EndTurn(10), PlayAgain(), Reset(), SelectLevel(1), SelectGameType(GameType.ADDITION)],
)
def test_intents_outside_their_view_are_contract_errors(intent):
    with pytest.raises(InvalidTransitionError):
        transition(initial_session(), intent)


def test_negative_turn_points_rejected():
    session = run(at_turn_announce("A"), StartTurn())
    with pytest.raises(InvalidTransitionError):
        transition(session, EndTurn(-10))


def test_transition_does_not_mutate_input():
    before = at_turn_announce("A", "B")
    playing = transition(before, StartTurn())
    transition(playing, EndTurn(10))
    assert before.view is View.TURN_ANNOUNCE
    assert playing.players[0].score == 0


def test_store_notifies_on_view_change():
    store = SessionStore()
    seen = []
    unsubscribe = store.subscribe(lambda old, new: seen.append((old.view, new.view)))

    store.dispatch(StartGame([Player("A")]))
    store.dispatch(SelectGameType(GameType.ADDITION))
    assert seen == [(View.SETUP, View.CHOOSE_GAME_TYPE), (View.CHOOSE_GAME_TYPE, View.CHOOSE_LEVEL)]
    assert store.view is View.CHOOSE_LEVEL

    unsubscribe()
    store.dispatch(SelectLevel(1))
    assert len(seen) == 2


def test_store_keeps_state_when_intent_is_rejected():
    store = SessionStore()
    with pytest.raises(InvalidRosterError):
        store.dispatch(StartGame([]))
    assert store.state == initial_session()
