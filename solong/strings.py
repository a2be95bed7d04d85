"""String helpers: length, bounded copy and concatenation, search, slicing,
trimming, splitting and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strlen(text: str | None) -> int:
    """Length of ``text``; a missing string counts as empty."""
    return 0 if text is None else len(text)


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the new buffer contents and the length of ``src``, which is the
    length that was attempted. With ``size`` 0 the buffer is left unchanged.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new buffer contents and the length that was attempted. When
    ``dest`` already fills the buffer nothing is appended and the attempted
    length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_len = len(dest)
    if dest_len >= size:
        return dest, len(src) + size
    room = size - dest_len - 1
    return dest + src[:room], len(src) + dest_len


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns the difference of the first differing character codes, a string
    that ends early comparing as a zero code, or 0 when they match.
    """
    if length <= 0:
        return 0
    left = (ord(ch) for ch in first[:length])
    right = (ord(ch) for ch in second[:length])
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
    return 0


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``; the terminator is found at the end."""
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``; the terminator is found at the end."""
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return f"{first}{second}"


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return strdup(text)
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character in place.

    A non-None return value replaces the character at that index.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars