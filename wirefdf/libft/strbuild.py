"""Building, copying, slicing and splitting strings.

Inputs are read as NUL-terminated strings: anything from the first NUL
character onwards is ignored, so a NUL-filled string from :func:`strnew`
behaves as an empty string.
"""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"
_BLANKS = " \t\n"


def _cstr(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    return s.partition(_NUL)[0]


def _char(c: int | str) -> str:
    """Return c as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c))


def _check_length(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"negative {what} {value}")


def strnew(size: int) -> str:
    """Return a NUL-filled string of the given length, read as empty."""
    _check_length(size, "size")
    return _NUL * size


def strcat(dest: str, src: str) -> str:
    """Return src appended to dest."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most the first n characters of src appended to dest."""
    _check_length(n, "length")
    return _cstr(dest) + _cstr(src)[:n]


def strncpy(src: str, n: int) -> str:
    """Return exactly n characters: src cut to n, padded with NULs."""
    _check_length(n, "length")
    return _cstr(src)[:n].ljust(n, _NUL)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, NUL included.

    Returns the new dest and the length the full result would have had:
    the length of dest, capped at size, plus the length of src. When dest
    already fills the buffer it is returned unchanged.
    """
    _check_length(size, "size")
    head = _cstr(dest)
    tail = _cstr(src)
    used = min(len(head), size)
    if len(head) < size:
        head += tail[:max(size - 1 - len(head), 0)]
    return head, used + len(tail)


def strsub(s: str | None, start: int, length: int) -> str | None:
    """Return the length characters of s that begin at index start."""
    if s is None:
        return None
    _check_length(start, "start")
    _check_length(length, "length")
    if start + length > len(s):
        raise IndexError(
            f"substring {start}:{start + length} exceeds string of length {len(s)}"
        )
    return s[start:start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Return the two strings joined, or None when either is missing."""
    if first is None or second is None:
        return None
    return _cstr(first) + _cstr(second)


def strtrim(s: str | None) -> str | None:
    """Return s without leading and trailing spaces, tabs and newlines."""
    if s is None:
        return None
    return _cstr(s).strip(_BLANKS)


def strsplit(s: str | None, c: int | str) -> list[str] | None:
    """Split s on the separator c, dropping empty words."""
    if s is None:
        return None
    separator = _char(c)
    text = _cstr(s)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmap(s: str | None, func: Callable[[str], str]) -> str | None:
    """Return a new string made of func applied to each character of s."""
    if s is None:
        return None
    return "".join(func(ch) for ch in _cstr(s))


def strmapi(s: str | None, func: Callable[[int, str], str]) -> str | None:
    """Like strmap, but func also receives each character's index."""
    if s is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))


def striter(s: str | None, func: Callable[[str], str | None] | None) -> str | None:
    """Call func on each character of s.

    A string returned by func replaces the character; None leaves it as it
    was. Returns the resulting string.
    """
    if s is None or func is None:
        return s
    pieces = []
    for ch in _cstr(s):
        result = func(ch)
        pieces.append(ch if result is None else result)
    return "".join(pieces)


def striteri(
    s: str | None, func: Callable[[int, str], str | None] | None
) -> str | None:
    """Like striter, but func also receives each character's index."""
    if s is None or func is None:
        return s
    pieces = []
    for index, ch in enumerate(_cstr(s)):
        result = func(index, ch)
        pieces.append(ch if result is None else result)
    return "".join(pieces)