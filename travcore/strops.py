"""In-place style string operations returned as new strings: trim, range, map and friends."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

_Text = Union[str, bytes]

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def _check_text(value: object, name: str) -> None:
    if not isinstance(value, (str, bytes)):
        raise TypeError(f"{name} must be str or bytes, got {type(value).__name__}")


def _same_kind(a: _Text, b: _Text) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix str and bytes")


def trim(s: _Text, cset: _Text) -> _Text:
    """Remove characters found in ``cset`` from both ends of ``s``.

    NUL characters count as members of every set.
    """
    _check_text(s, "s")
    _check_text(cset, "cset")
    _same_kind(s, cset)
    nul = "\0" if isinstance(s, str) else b"\0"
    return s.strip(cset + nul)


def str_range(s: _Text, start: int, end: int) -> _Text:
    """The inclusive substring from ``start`` to ``end``.

    Negative indexes count from the end (-1 is the last character). Out of
    range indexes are clamped; an empty range gives an empty string.
    """
    _check_text(s, "s")
    length = len(s)
    if length == 0:
        return s
    if start < 0:
        start = max(length + start, 0)
    if end < 0:
        end = max(length + end, 0)
    newlen = 0 if start > end else end - start + 1
    if newlen != 0:
        if start >= length:
            newlen = 0
        elif end >= length:
            end = length - 1
            newlen = 0 if start > end else end - start + 1
    else:
        start = 0
    return s[start:start + newlen]


def compare(s1: _Text, s2: _Text) -> int:
    """Compare binary-safely: negative, zero or positive as ``s1`` sorts before, equal or after ``s2``.

    When one is a prefix of the other the longer one is greater.
    """
    _check_text(s1, "s1")
    _check_text(s2, "s2")
    _same_kind(s1, s2)
    for a, b in zip(s1, s2):
        if a != b:
            if isinstance(a, str):
                return ord(a) - ord(b)
            return a - b
    return len(s1) - len(s2)


def map_chars(s: _Text, from_chars: _Text, to_chars: _Text) -> _Text:
    """Replace each character of ``s`` found in ``from_chars`` by the one at the same place in ``to_chars``.

    If a character appears several times in ``from_chars`` the first wins.
    """
    _check_text(s, "s")
    _check_text(from_chars, "from_chars")
    _check_text(to_chars, "to_chars")
    _same_kind(s, from_chars)
    _same_kind(s, to_chars)
    if len(from_chars) != len(to_chars):
        raise ValueError("from_chars and to_chars must have the same length")
    mapping: dict = {}
    for src, dst in zip(from_chars, to_chars):
        mapping.setdefault(src, dst)
    if isinstance(s, str):
        return "".join(mapping.get(ch, ch) for ch in s)
    return bytes(mapping.get(byte, byte) for byte in s)


def join(parts: Iterable[_Text], sep: _Text) -> _Text:
    """Join ``parts`` with ``sep`` between each pair."""
    _check_text(sep, "sep")
    return sep.join(parts)


def grow_zero(s: _Text, length: int) -> _Text:
    """Pad ``s`` with NULs up to ``length``; unchanged if it is already that long."""
    _check_text(s, "s")
    if length <= len(s):
        return s
    pad = "\0" if isinstance(s, str) else b"\0"
    return s + pad * (length - len(s))


def to_lower(s: _Text) -> _Text:
    """Lower-case ASCII letters; other characters are left alone."""
    _check_text(s, "s")
    if isinstance(s, str):
        return s.translate(_TO_LOWER)
    return s.lower()


def to_upper(s: _Text) -> _Text:
    """Upper-case ASCII letters; other characters are left alone."""
    _check_text(s, "s")
    if isinstance(s, str):
        return s.translate(_TO_UPPER)
    return s.upper()