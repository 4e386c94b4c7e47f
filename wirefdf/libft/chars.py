"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = "\n\t\r\f \v"
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Wrap a value into the range of a 32-bit signed integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    An optional single sign is accepted; parsing stops at the first
    non-digit. Text without digits yields 0. The result wraps like a
    32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        result = _wrap_int(result * 10 + (ord(ch) - ord("0")))
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))