"""Syntax checks on command lines and the shell's error messages."""

from __future__ import annotations

from .quoting import find_unquoted, inside_quotes

PREFIX = "minishell: "


class ShellSyntaxError(Exception):
    """A command line the shell refuses to run.

    ``char`` is the unexpected character, or None when a newline was
    expected instead.
    """

    def __init__(self, char: str | None = None) -> None:
        self.char = char
        if char is None:
            detail = "newline expected"
        else:
            detail = f"'{char}' unexpected"
        super().__init__(f"Synthax error: {detail}")

    def format(self, step: int) -> str:
        """The message as the shell prints it for command number ``step``."""
        return f"{PREFIX}{step}: {self}\n"


def _check_token(line: str, index: int) -> None:
    if index >= len(line):
        return
    ch = line[index]
    if ch in "|;" and not inside_quotes(line, index):
        raise ShellSyntaxError(ch)
    if ch in "<>" and not inside_quotes(line, index):
        raise ShellSyntaxError()


def _check_after_separator(line: str, index: int) -> None:
    _check_token(line, index)
    while index < len(line) and line[index] == " ":
        index += 1
    _check_token(line, index)


def check_unexpected(line: str) -> None:
    """Raise ShellSyntaxError for misplaced ``|``, ``;``, ``<`` or ``>``."""
    if line and line[0] in "|;<":
        raise ShellSyntaxError(line[0])
    length = len(line)
    index = 0
    while index < length:
        if line[index] in "|;" and index + 1 < length:
            index += 1
            _check_after_separator(line, index)
        if line[index] in "<>" and index + 1 < length:
            index += 1
            if line[index] in "|;" and not inside_quotes(line, index):
                raise ShellSyntaxError(line[index])
        index += 1


def _repeated(line: str, char: str, extra: int) -> bool:
    pos = find_unquoted(line, char)
    if pos is None:
        return False
    tail = line[pos:]
    if tail[1 : 1 + extra] == char * extra:
        return True
    if tail[1:2] == " ":
        return tail[1:].lstrip(" ")[:1] == char
    return False


def check_double_output(line: str) -> bool:
    """Tell whether the first output redirection is ``>>>`` or ``> >``."""
    return _repeated(line, ">", 2)


def check_double_input(line: str) -> bool:
    """Tell whether the first input redirection is ``<<`` or ``< <``."""
    return _repeated(line, "<", 1)


def check_redirections(line: str) -> None:
    """Raise ShellSyntaxError for doubled or dangling redirections."""
    if check_double_output(line):
        raise ShellSyntaxError(">")
    if check_double_input(line):
        raise ShellSyntaxError("<")
    if line.endswith(("<", ">")):
        raise ShellSyntaxError()


def strip_cd_input(text: str) -> str:
    """Drop every ``<`` from a ``cd`` command whose argument starts with one."""
    index = 2
    while index < len(text) and text[index] == " ":
        index += 1
    if index >= len(text) or text[index] != "<":
        return text
    return text.replace("<", "")


def format_cd_error(step: int, path: str) -> str:
    """Message for a directory ``cd`` could not enter."""
    return f"{PREFIX}{step}: cd: can't cd to {path}\n"


def format_not_found(step: int, name: str, arg: str | None) -> str:
    """Message for a command that could not be found."""
    suffix = f" {arg}" if arg else ""
    return f"{PREFIX}{step}: {name}{suffix}: not found\n"


def format_file_not_found(step: int) -> str:
    """Message for an input file that could not be opened."""
    return f"{PREFIX}{step}: file not found\n"


def format_illegal_exit(step: int, arg: str) -> str:
    """Message for an ``exit`` argument that is not a number."""
    return f"{PREFIX}{step}: exit : Illegal number: {arg}\n"