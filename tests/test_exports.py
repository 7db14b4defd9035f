import pytest

from minishell.environment import Environment, ShellState
from minishell.exports import (
    BAD_NAME_MESSAGE,
    env_listing,
    export,
    is_bad_name,
    sorted_listing,
    strip_name_quotes,
    unset,
)


def make_state(*entries):
    return ShellState(env=Environment(entries))


def test_export_appends_new_variable():
    state = make_state(("HOME", "/home/user"))
    state.status = 1
    out = export(state, "FOO=bar")
    assert out == ""
    assert state.env.get("FOO") == "bar"
    assert state.env.names()[-1] == "FOO"
    assert state.status == 0


def test_export_strips_quotes_around_value():
    state = make_state(("HOME", "/home/user"))
    export(state, 'FOO="hello"')
    assert state.env.get("FOO") == "hello"


def test_export_updates_existing_variable_in_place():
    state = make_state(("FOO", "old"), ("BAR", "x"))
    export(state, "FOO=new")
    assert state.env.get("FOO") == "new"
    assert state.env.names() == ["FOO", "BAR"]


def test_export_name_only_keeps_value():
    state = make_state(("FOO", "old"))
    state.status = 7
    export(state, "FOO")
    assert state.env.get("FOO") == "old"
    assert state.status == 0


def test_export_several_words():
    state = make_state(("HOME", "/home/user"))
    export(state, "A=1 B=2")
    assert state.env.names() == ["HOME", "A", "B"]
    assert state.env.get("B") == "2"


def test_export_bad_name_reports_and_sets_status():
    state = make_state(("HOME", "/home/user"))
    out = export(state, "1abc=x")
    assert out == BAD_NAME_MESSAGE
    assert state.status == 2
    assert "1abc" not in state.env


def test_export_quoted_name_is_unquoted():
    state = make_state(("HOME", "/home/user"))
    export(state, '"AB"=1')
    assert state.env.get("AB") == "1"


def test_export_moves_waiting_variable():
    state = make_state(("HOME", "/home/user"))
    state.waiting = Environment([("X", "1")])
    export(state, "X")
    assert state.env.get("X") == "1"
    assert "X" not in state.waiting


def test_export_assignment_to_waiting_variable_moves_new_value():
    state = make_state(("HOME", "/home/user"))
    state.waiting = Environment([("X", "1")])
    export(state, "X=2")
    assert state.env.get("X") == "2"
    assert len(state.waiting) == 0


def test_export_without_arguments_lists_sorted():
    state = make_state(("B", "2"), ("A", "1"), ("C", "3"))
    assert export(state, "") == sorted_listing(state)


@pytest.mark.parametrize(
    "word, bad",
    [
        ("FOO=1", False),
        ("ab_c=1", False),
        ("a1=1", True),
        ("1a=1", True),
        ("_=1", True),
        ('"AB"=1', False),
    ],
)
def test_is_bad_name(word, bad):
    assert is_bad_name(word) is bad


def test_strip_name_quotes_removes_double_pair():
    assert strip_name_quotes('"AB"=1') == ("AB=1", True)


def test_strip_name_quotes_single_character_untouched():
    word, stripped = strip_name_quotes("_=1")
    assert word == "_=1"
    assert stripped is False


def test_env_listing_matches_entries():
    state = make_state(("A", "1"), ("B", "2"))
    state.status = 5
    out = env_listing(state)
    assert out.splitlines() == [f"{n}={v}" for n, v in state.env]
    assert out.endswith("\n")
    assert state.status == 0


def test_sorted_listing_is_sorted_permutation():
    state = make_state(("B", "2"), ("A", "1"), ("C", "3"))
    lines = sorted_listing(state).splitlines()
    assert lines == sorted(lines)
    assert set(lines) == set(env_listing(state).splitlines())


def test_unset_removes_variable():
    state = make_state(("A", "1"), ("B", "2"))
    state.status = 3
    unset(state, "A")
    assert state.env.names() == ["B"]
    assert state.status == 0


def test_unset_several_names():
    state = make_state(("A", "1"), ("B", "2"), ("C", "3"))
    unset(state, "A C")
    assert state.env.names() == ["B"]


def test_unset_missing_name_changes_nothing():
    state = make_state(("A", "1"))
    unset(state, "ZZZ")
    assert list(state.env) == [("A", "1")]


def test_unset_empty_keeps_status():
    state = make_state(("A", "1"))
    state.status = 4
    unset(state, "")
    assert state.status == 4
    assert state.env.names() == ["A"]