"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_WHITESPACE = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def _wrap_int(value: int) -> int:
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading integer the way the C library routine does.

    Leading whitespace is skipped, then any run of sign characters. More than
    one sign yields 0. Digits are read until the first non-digit and the
    result is wrapped to a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _WHITESPACE:
        pos += 1
    signs = 0
    negative = False
    while pos < length and text[pos] in "+-":
        signs += 1
        negative = negative or text[pos] == "-"
        pos += 1
    if signs >= 2:
        return 0
    start = pos
    while pos < length and is_digit(text[pos]):
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    number = int(n)
    sign = "-" if number < 0 else ""
    return sign + str(abs(number))