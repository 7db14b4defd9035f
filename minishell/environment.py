"""Ordered shell variable lists and the state the shell carries between lines."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


def _split_assignment(text: str) -> tuple[str, str]:
    name, _, value = text.partition("=")
    return name, value


class Environment:
    """An ordered list of ``name=value`` variables.

    Names may repeat; lookups always use the first match.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] = ()) -> None:
        self._entries: list[tuple[str, str]] = [(str(n), str(v)) for n, v in entries]

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | Iterable[str]) -> Environment:
        """Build from a mapping or from ``NAME=value`` strings, keeping order."""
        if isinstance(environ, Mapping):
            return cls(environ.items())
        return cls(_split_assignment(item) for item in environ)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(entry_name == name for entry_name, _ in self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"

    def _index(self, name: str) -> int | None:
        for index, (entry_name, _) in enumerate(self._entries):
            if entry_name == name:
                return index
        return None

    def get(self, name: str) -> str | None:
        """Value of the first variable called ``name``, or None."""
        index = self._index(name)
        return None if index is None else self._entries[index][1]

    def set(self, name: str, value: str) -> None:
        """Give ``name`` a new value, appending the variable if it is missing."""
        index = self._index(name)
        if index is None:
            self._entries.append((name, value))
        else:
            self._entries[index] = (name, value)

    def names(self) -> list[str]:
        """Variable names in list order."""
        return [name for name, _ in self._entries]

    def update_existing(self, text: str, assign: bool) -> bool:
        """Look up the name before ``=`` in ``text``.

        With ``assign`` the first match takes everything after ``=`` as its
        value, quotes included. Returns whether a variable was found; without
        ``assign`` a variable with an empty name never counts.
        """
        name = text.split("=", 1)[0]
        index = self._index(name)
        if index is None:
            return False
        if assign:
            _, _, value = text.partition("=")
            self._entries[index] = (name, value)
            return True
        return len(name) > 0

    def append(self, text: str) -> tuple[str, str]:
        """Append ``NAME=value`` as a new variable and return it.

        A value that ends in a quote loses its first and last character.
        """
        name, value = _split_assignment(text)
        if text.endswith((DOUBLE_QUOTE, SINGLE_QUOTE)) and "=" in text:
            value = value[1:-1]
        entry = (name, value)
        self._entries.append(entry)
        return entry

    def remove(self, name: str) -> bool:
        """Remove the first variable called ``name``; tell whether one was."""
        index = self._index(name)
        if index is None:
            return False
        del self._entries[index]
        return True

    def take(self, text: str) -> tuple[str, str] | None:
        """Detach and return the first variable whose name starts with the
        part of ``text`` before ``=``, or None when nothing matches."""
        key = text.split("=", 1)[0]
        for index, (name, value) in enumerate(self._entries):
            if name.startswith(key):
                del self._entries[index]
                return name, value
        return None

    def render(self, lookup: Environment | None = None) -> str:
        """One ``name=value`` line per variable, values looked up in ``lookup``."""
        source = self if lookup is None else lookup
        lines = []
        for name, _ in self._entries:
            value = source.get(name)
            lines.append(f"{name}={value if value is not None else ''}\n")
        return "".join(lines)


def _current_directory() -> str:
    try:
        return os.getcwd()[:999]
    except OSError:
        return ""


@dataclass
class ShellState:
    """Everything the shell keeps from one command line to the next."""

    env: Environment = field(default_factory=Environment)
    waiting: Environment = field(default_factory=Environment)
    status: int = 0
    exiting: bool = False
    step: int = 0
    path: str = field(default_factory=_current_directory)
    history: list[str] = field(default_factory=list)