"""Quote-aware splitting, trimming and quote removal for command lines."""

from __future__ import annotations

BACKSLASH = "\\"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

# Placeholders left where a quote of the other kind stood inside a removed pair.
DOUBLE_MARKER = "\x01"
SINGLE_MARKER = "\x02"

_ATOI_SPACES = "\t\n\v\f\r "
_MASK32 = 0xFFFFFFFF


def inside_quotes(text: str, index: int) -> bool:
    """Tell whether the character at ``index`` sits inside an open quote."""
    if index >= len(text) or index == len(text) - 1:
        return False
    tail = text[index:]
    if text[: index + 1].count(DOUBLE_QUOTE) % 2 == 1 and DOUBLE_QUOTE in tail:
        return True
    return tail.count(SINGLE_QUOTE) % 2 == 1


def _is_separator(text: str, sep: str, index: int, doubled: bool, before: str = "") -> bool:
    if index > 0 and text[index - 1] == BACKSLASH:
        return False
    if index >= len(text) or text[index] != sep or inside_quotes(text, index):
        return False
    if doubled:
        previous = text[index - 1] if index > 0 else before
        if previous == sep:
            return False
    return True


def _split(text: str, sep: str, doubled: bool) -> list[str]:
    length = len(text)
    parts: list[str] = []
    pos = 0
    while pos < length and _is_separator(text, sep, pos, doubled):
        pos += 1
    while pos < length:
        # Each piece is cut by re-scanning the remainder on its own, so quote
        # parity is counted from the start of the piece.
        rest = text[pos:]
        before = text[pos - 1] if pos > 0 else ""
        end = 0
        while end < len(rest) and not _is_separator(rest, sep, end, doubled, before):
            end += 1
        parts.append(rest[:end])
        while pos < length and not _is_separator(text, sep, pos, doubled):
            pos += 1
        while pos < length and _is_separator(text, sep, pos, doubled):
            pos += 1
    return parts


def split_shell(text: str, sep: str) -> list[str]:
    """Split on ``sep`` outside quotes and not after a backslash; drop empty pieces."""
    return _split(text, sep, doubled=False)


def split_sh(text: str, sep: str) -> list[str]:
    """Like :func:`split_shell`, but a doubled separator keeps its second character."""
    return _split(text, sep, doubled=True)


def find_unquoted(text: str, char: str) -> int | None:
    """Index of the first ``char`` outside quotes and not escaped, or None."""
    for index in range(len(text)):
        if _is_separator(text, char, index, doubled=False):
            return index
    return None


def split_words(text: str | None, sep: str) -> list[str]:
    """Plain split on ``sep`` dropping empty pieces; None gives an empty list."""
    if text is None:
        return []
    return [word for word in text.split(sep) if word]


def trim(text: str | None, chars: str | None) -> str:
    """Strip any of ``chars`` from both ends; a missing argument gives ''."""
    if text is None or chars is None:
        return ""
    return text.strip(chars)


def _remove_first_pair(text: str, quote: str) -> str:
    other = SINGLE_QUOTE if quote == DOUBLE_QUOTE else DOUBLE_QUOTE
    marker = SINGLE_MARKER if other == SINGLE_QUOTE else DOUBLE_MARKER
    out: list[str] = []
    removed = 0
    for ch in text:
        if removed >= 2 or (ch != quote and ch != other):
            out.append(ch)
        elif ch == other:
            out.append(marker)
        else:
            removed += 1
    return "".join(out)


def delete_quote_pair(text: str, start: int, quote: str) -> str:
    """Remove the first two ``quote`` characters if a pair follows ``start``.

    Quotes of the other kind met before the pair is gone become markers.
    """
    first = text.find(quote, start) if start < len(text) else -1
    if first < 0 or first + 1 >= len(text):
        return text
    if text.find(quote, first + 1) < 0:
        return text
    return _remove_first_pair(text, quote)


def delete_quote(arg: str) -> str:
    """Strip the quoting from an argument the way the shell parser does."""
    first = next((ch for ch in arg if ch in (DOUBLE_QUOTE, SINGLE_QUOTE)), None)
    strip_double = first == DOUBLE_QUOTE
    text = arg
    index = 0
    while index < len(text):
        if strip_double:
            text = delete_quote_pair(text, index, DOUBLE_QUOTE)
        text = delete_quote_pair(text, index, SINGLE_QUOTE)
        index += 1
    return text


def restore_quotes(text: str) -> str:
    """Turn quote markers back into the quote characters they stand for."""
    return text.replace(DOUBLE_MARKER, DOUBLE_QUOTE).replace(SINGLE_MARKER, SINGLE_QUOTE)


def extract_arg(text: str) -> str:
    """Return what follows the command word, up to the first output redirection."""
    parts = split_shell(text, ">")
    head = parts[0] if parts else ""
    _, _, rest = head.lstrip(" ").partition(" ")
    return rest.strip(" ")


def atoi(text: str) -> int:
    """Parse a leading integer with C ``atoi`` rules and 32-bit wrap-around."""
    stripped = text.lstrip(_ATOI_SPACES)
    negative = stripped.startswith("-")
    if stripped[:1] in ("+", "-"):
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        value = (value * 10 + ord(ch) - ord("0")) & _MASK32
    if negative:
        value = (-value) & _MASK32
    return value - (1 << 32) if value & 0x80000000 else value