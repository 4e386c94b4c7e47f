"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

_NUL = "\0"


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _cstr(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    return s.partition(_NUL)[0]


def putchar(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character to stream (standard output by default)."""
    ch = c if isinstance(c, str) else chr(int(c))
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(ch)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string to stream; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(_cstr(s))


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(_cstr(s) + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    _target(stream).write(str(int(n)))