"""Backslash escapes and ``$`` variable expansion on command lines."""

from __future__ import annotations

from enum import Enum

from .environment import Environment, ShellState
from .quoting import DOUBLE_MARKER, SINGLE_MARKER, trim

_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "r": "\r",
    "e": "\x1b",
    "\\": "\\",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    '"': DOUBLE_MARKER,
    "'": SINGLE_MARKER,
}


class EscapeMode(Enum):
    """Which backslash sequences are interpreted."""

    ECHO = 2
    EXEC = 9

    @property
    def reactive(self) -> frozenset[str]:
        if self is EscapeMode.ECHO:
            return frozenset("nvftbre\\")
        return frozenset("\\\"'")


def escape_code(char: str) -> str:
    """Character that a backslash followed by ``char`` stands for."""
    return _ESCAPES.get(char, char)


def unescape(text: str, mode: EscapeMode) -> str:
    """Replace the backslash sequences that ``mode`` reacts to."""
    reactive = mode.reactive
    out: list[str] = []
    index = 0
    while index < len(text):
        ch = text[index]
        if ch == "\\" and index + 1 < len(text) and text[index + 1] in reactive:
            out.append(escape_code(text[index + 1]))
            index += 2
        else:
            out.append(ch)
            index += 1
    return "".join(out)


def _isalpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def expand_status(state: ShellState, line: str) -> str:
    """Put the last status in place of the first ``$`` and the character after it.

    Reading the status this way resets it to zero.
    """
    pos = line.find("$")
    if pos < 0:
        return line
    digits = ""
    if state.status >= 0:
        digits = str(state.status)
        state.status = 0
    return line[:pos] + digits + line[pos + 2 :]


def _token_length(line: str, start: int) -> int:
    end = start
    while end < len(line) and line[end] not in " $":
        end += 1
    return end - start


def _replace_missing(state: ShellState, line: str) -> str:
    if "$?" in line:
        return expand_status(state, line)
    pos = line.find("$")
    after = line[pos + 1 : pos + 2]
    if after in ("", " "):
        return line
    length = _token_length(line, pos + 1)
    keep = 0
    if (
        length > 0
        and pos > 0
        and line[pos - 1] == '"'
        and line[pos + length] == '"'
    ):
        keep = 1
    return line[:pos] + line[pos + 1 + length - keep :]


def _replace_found(line: str, name: str, value: str) -> str:
    pos = 0
    while pos < len(line) and line[pos] != "$" and not line[pos + 1 :].startswith(name):
        pos += 1
    return line[:pos] + value + line[pos + 1 + len(name) :]


def _match(env: Environment, rest: str) -> tuple[str, str] | None:
    for name, value in env:
        if rest.startswith(name):
            return name, value
    return None


def _substitute(state: ShellState, line: str, dollar: int) -> str:
    entry = _match(state.env, line[dollar + 1 :])
    if entry is not None:
        name, value = entry
        end = dollar + 1 + len(name)
        if end >= len(line) or not _isalpha(line[end]):
            return _replace_found(line, name, value)
    return _replace_missing(state, line)


def expand_variables(state: ShellState, line: str) -> str:
    """Expand ``$NAME`` and ``$?`` references in ``line``.

    Unknown names are removed; a reference that cannot be resolved any
    further is left as it is.
    """
    result = line
    start = 0
    while True:
        dollar = result.find("$", start)
        if dollar < 0:
            return result
        following = result[dollar + 1 : dollar + 2]
        if following and (_isalpha(following) or following in "?_"):
            updated = _substitute(state, result, dollar)
            if updated != result:
                result = updated
                start = 0
                continue
        start = dollar + 1


def prepare(state: ShellState, text: str) -> str:
    """Unescape, expand variables and trim spaces from one command."""
    text = unescape(text, EscapeMode.EXEC)
    if "$" in text:
        text = expand_variables(state, text)
    return trim(text, " ")