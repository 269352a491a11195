from lib_quiz import Player, QuizConfig, RosterBuilder


def test_add_from_buffer_trims_and_clears():
    roster = RosterBuilder()
    roster.type_text("  Ann  ")
    assert roster.add_player()
    assert roster.names == ["Ann"]
    assert roster.buffer == ""


def test_blank_name_is_declined():
    roster = RosterBuilder()
    roster.type_text("   ")
    assert not roster.can_add
    assert not roster.add_player()
    assert roster.names == []
    assert not roster.can_start


def test_sixth_player_is_declined():
    roster = RosterBuilder()
    for i in range(5):
        assert roster.add_player(f"P{i}")
    roster.type_text("Extra")
    assert roster.is_full
    assert not roster.add_player()
    assert len(roster.names) == 5
    # the declined name stays in the buffer
    assert roster.buffer == "Extra"


def test_buffer_is_capped_at_name_length():
    roster = RosterBuilder()
    roster.type_text("abcdefghijklmnopqrstuvwxyz")
    assert roster.buffer == "abcdefghijklmno"
    assert len(roster.buffer) == 15


def test_direct_names_over_the_cap_are_declined():
    roster = RosterBuilder(QuizConfig(max_name_length=4))
    assert not roster.add_player("Alexander")
    assert roster.add_player("Alex")


def test_non_printable_input_is_ignored():
    roster = RosterBuilder()
    roster.type_text("A\tb\r")
    assert roster.buffer == "Ab"


def test_backspace_and_clear():
    roster = RosterBuilder()
    roster.type_text("Bob")
    roster.backspace()
    assert roster.buffer == "Bo"
    roster.add_player()
    roster.clear()
    assert roster.names == [] and roster.buffer == ""


def test_players_start_at_zero():
    roster = RosterBuilder()
    roster.add_player("A")
    roster.add_player("B")
    assert roster.players() == [Player("A", 0), Player("B", 0)]
