"""The env, export and unset builtins."""

from __future__ import annotations

from .environment import Environment, ShellState
from .quoting import (
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    delete_quote_pair,
    split_shell,
    split_words,
)

BAD_NAME_MESSAGE = "export: bad variable name\n"


def _isalpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def strip_name_quotes(word: str) -> tuple[str, bool]:
    """Drop quote pairs from an export word, judged on the part before ``=``.

    Returns the word and whether it counted as quoted. Every character
    that is not a quote counts towards the single-quote check, so any name
    of two or more ordinary characters counts.
    """
    name = word.split("=", 1)[0]
    doubles = name.count(DOUBLE_QUOTE)
    others = sum(1 for ch in name if ch not in (DOUBLE_QUOTE, SINGLE_QUOTE))
    if doubles >= 2:
        word = delete_quote_pair(word, 0, DOUBLE_QUOTE)
    if others >= 2:
        word = delete_quote_pair(word, 0, SINGLE_QUOTE)
    return word, doubles >= 2 or others >= 2


def _check_name(word: str) -> tuple[bool, str]:
    index = 0
    while index < len(word) and word[index] != "=":
        if not _isalpha(word[index]):
            word, stripped = strip_name_quotes(word)
            if not stripped:
                return True, word
            current = word[index] if index < len(word) else ""
            if current == "_":
                return False, word
            if not _isalpha(current):
                return True, word
        index += 1
    return False, word


def is_bad_name(word: str) -> bool:
    """Tell whether ``export`` rejects the variable name in ``word``."""
    return _check_name(word)[0]


def env_listing(state: ShellState) -> str:
    """Text of the ``env`` builtin: one ``name=value`` line per variable."""
    state.status = 0
    return state.env.render()


def sorted_listing(state: ShellState) -> str:
    """Text of ``export`` without arguments: the variables sorted by name."""
    ordered = Environment((name, "") for name in sorted(state.env.names()))
    state.status = 0
    return ordered.render(state.env)


def _promote(state: ShellState, word: str) -> None:
    entry = state.waiting.take(word)
    if entry is None:
        return
    name, value = entry
    if name in state.env:
        state.env = Environment([*state.env, entry])
    else:
        state.env.set(name, value)


def export(state: ShellState, args: str) -> str:
    """Run the ``export`` builtin and return what it writes to standard output."""
    if not args:
        return sorted_listing(state)
    output: list[str] = []
    for word in split_shell(args, " "):
        bad, word = _check_name(word)
        assign = "=" in word
        if bad:
            state.status = 2
            output.append(BAD_NAME_MESSAGE)
        elif state.env.update_existing(word, assign):
            state.status = 0
        elif state.waiting.update_existing(word, assign):
            _promote(state, word)
        elif assign:
            state.env.append(word)
            state.status = 0
    return "".join(output)


def unset(state: ShellState, args: str) -> None:
    """Run the ``unset`` builtin on the space-separated names in ``args``."""
    for name in split_words(args, " "):
        state.env.remove(name)
        state.status = 0