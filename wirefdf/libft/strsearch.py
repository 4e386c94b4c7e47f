"""String length, search and comparison helpers."""

from __future__ import annotations

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c))


def _code_at(s: str, index: int) -> int:
    """Code point at index, or 0 past the end of the string."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of needle in haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like strstr, but the match must lie within the first length characters.

    An empty needle is found at index 0 whatever the length.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"negative length {length}")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strcmp(first: str, second: str) -> int:
    """Compare two strings.

    Returns the difference of the code points at the first position where
    they differ, the end of a string counting as 0; 0 when they are equal.
    """
    if first is second:
        return 0
    for index in range(max(len(first), len(second)) + 1):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most the first n characters of two strings, as strcmp does."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    if first is second or n == 0:
        return 0
    return strcmp(first[:n], second[:n])


def strequ(first: str | None, second: str | None) -> bool:
    """True when both strings are equal; two missing strings are equal."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return strcmp(first, second) == 0


def strnequ(first: str | None, second: str | None, n: int) -> bool:
    """True when the first n characters of both strings are equal.

    A length of 0, or two missing strings, always compare equal.
    """
    if n == 0 or (first is None and second is None):
        return True
    if first is None or second is None:
        return False
    return strncmp(first, second, n) == 0