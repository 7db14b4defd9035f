"""The echo, pwd, cd and exit builtins."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .environment import ShellState
from .errors import format_cd_error, format_illegal_exit
from .expansion import EscapeMode, unescape
from .quoting import atoi, delete_quote, restore_quotes, split_shell


def echo(state: ShellState, arg: str) -> str:
    """Run ``echo`` and return what it writes."""
    if not arg:
        return "\n"
    index = 0
    newline = True
    while arg[index : index + 2] == "-n":
        newline = False
        following = arg[index + 2 : index + 3]
        if following == " ":
            index += 3
        elif following == "":
            return ""
        else:
            newline = True
            break
    text = restore_quotes(unescape(arg[index:], EscapeMode.ECHO))
    state.status = 0
    return text + ("\n" if newline else "")


def _find_path(state: ShellState) -> None:
    try:
        state.path = os.getcwd()[:999]
    except OSError:
        state.path = ""


def pwd(state: ShellState) -> str:
    """Run ``pwd`` and return what it writes."""
    _find_path(state)
    state.status = 0
    return state.path + "\n"


def classify_cd_path(text: str | None) -> int:
    """Kind of ``cd`` target: 1 parent, 2 current, 3 other, 4 empty, -1 none."""
    if text is None:
        return -1
    if text[:2] == ".." and text[2:3] in ("", "/"):
        return 1
    if text[:1] == "." and text[1:2] in ("", " "):
        return 2
    if text:
        return 3
    return 4


def _chdir(path: str | None) -> bool:
    if path is None:
        return False
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def _update(state: ShellState, name: str, value: str | None) -> None:
    if name in state.env:
        state.env.set(name, value or "")


def _copy_old_pwd(state: ShellState) -> None:
    if "OLDPWD" in state.env:
        state.env.set("OLDPWD", state.env.get("PWD") or "")
    else:
        state.status = 0


def _go_up(state: ShellState) -> None:
    _find_path(state)
    slash = state.path.rfind("/")
    state.path = state.path[:slash] if slash > 0 else "/"
    _chdir(state.path)
    state.status = 0


def _enter_relative(state: ShellState, target: str) -> bool:
    if target == ".":
        state.status = 0
        return True
    path = f"{state.path}/{target}"
    if _chdir(path):
        _copy_old_pwd(state)
        _update(state, "PWD", path)
        _find_path(state)
        state.status = 0
        return True
    _chdir(state.env.get("PWD"))
    state.status = 2
    return False


def _go_there(state: ShellState, target: str) -> bool:
    if target.startswith('"'):
        return True
    if target.startswith("/"):
        if not _chdir(target):
            state.status = 2
            return False
        _update(state, "PWD", target)
    elif target[:1] in ("~", ""):
        _chdir(state.env.get("PWD"))
        state.status = 2
        return True
    elif not _enter_relative(state, target):
        return False
    state.status = 0
    return True


def cd(state: ShellState, arg: str, stderr: TextIO | None = None) -> None:
    """Run ``cd``; errors go to ``stderr``."""
    out = stderr if stderr is not None else sys.stderr
    if not arg:
        out.write(format_cd_error(state.step, arg))
        state.status = 2
        return
    saved = state.env.get("OLDPWD")
    words = split_shell(arg, " ")
    target = delete_quote(words[0]) if words else ""
    hops = 0
    went_up = False
    while classify_cd_path(target[3 * hops :]) == 1:
        went_up = True
        _go_up(state)
        hops += 1
    if went_up:
        _copy_old_pwd(state)
        _update(state, "PWD", state.path)
    rest = target[3 * hops :]
    if target[2 * hops : 2 * hops + 1] == "." or classify_cd_path(rest) == 3:
        if not _go_there(state, rest) and target != "..":
            out.write(format_cd_error(state.step, target))
            state.status = 2
            if went_up:
                _update(state, "PWD", state.env.get("OLDPWD"))
                _update(state, "OLDPWD", saved)
                _chdir(state.env.get("PWD"))
                _find_path(state)


def _c_remainder(value: int, divisor: int) -> int:
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def exit_builtin(
    state: ShellState, arg: str | None, step: int, stderr: TextIO | None = None
) -> bool:
    """Run ``exit``; return whether the shell is to stop.

    A non-numeric argument is reported and leaves the shell running.
    """
    out = stderr if stderr is not None else sys.stderr
    code = state.status
    if arg:
        code = _c_remainder(atoi(arg), 256)
        if not all("0" <= ch <= "9" for ch in arg):
            code = -100
    if code < 0:
        out.write(format_illegal_exit(step, arg or ""))
        state.status = 2
        return False
    state.status = code % 256
    state.exiting = True
    return True