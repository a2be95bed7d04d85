"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int is taken as a byte-sized character code."""
    _target(stream).write(_as_char(c))


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` as it is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    number = int(n)
    out = _target(stream)
    if number < 0:
        out.write("-")
    out.write(str(abs(number)))