"""Small text helpers used when reading scene and dialog files."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

_WHITESPACE = frozenset(" " + "".join(chr(code) for code in range(9, 15)))
_DIGITS = frozenset("0123456789")
_BUFFER_SIZE = 42
_UINT32 = 1 << 32


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading integer the way the scene format expects.

    Leading whitespace is skipped, more than one sign character yields 0,
    parsing stops at the first non-digit and the result wraps to 32 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    signs = 0
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            negative = True
        signs += 1
        pos += 1
    if signs > 1:
        return 0
    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = (value * 10 + ord(text[pos]) - ord("0")) % _UINT32
        pos += 1
    if negative:
        value = -value
    return _to_int32(value)


def split(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def has_cub_extension(path: str) -> bool:
    """Tell whether a path names a ``.cub`` scene file."""
    return len(path) >= 4 and path.endswith(".cub")


def is_number(text: str) -> bool:
    """Tell whether every character is an ASCII digit (true for an empty string)."""
    return all(char in _DIGITS for char in text)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream without their newline characters.

    A trailing newline does not produce a final empty line.
    """
    pending = ""
    while True:
        chunk = stream.read(_BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    if pending:
        yield pending