"""Key helpers for hash tables, file reading and small string utilities."""

from __future__ import annotations

import os
from typing import Optional, Union

from travcore.hashing import gen_case_hash, gen_hash

_Text = Union[str, bytes, bytearray]


def _c_bytes(data: _Text) -> bytes:
    """Bytes of ``data`` up to (not including) the first NUL."""
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    return raw.split(b"\0", 1)[0]


def string_hash(key: _Text) -> int:
    """MurmurHash2 of a NUL-terminated key."""
    return gen_hash(_c_bytes(key))


def string_case_hash(key: _Text) -> int:
    """Case-insensitive hash of a NUL-terminated key."""
    return gen_case_hash(_c_bytes(key))


def equal_ignore_case(key1: _Text, key2: _Text) -> bool:
    """True if the keys are equal ignoring ASCII case."""
    return _c_bytes(key1).lower() == _c_bytes(key2).lower()


def file_get_content(path: Union[str, os.PathLike]) -> Optional[str]:
    """Return a file's text up to its first NUL.

    Returns None when the file cannot be opened or is empty.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError:
        return None
    if not raw:
        return None
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def utf8_str_width(data: _Text) -> int:
    """Screen width of UTF-8 text: ASCII bytes count 1, each 3 non-ASCII bytes count 2."""
    width = 0
    pending = 0
    for byte in _c_bytes(data):
        if byte >= 0x80:
            pending += 1
            if pending >= 3:
                width += 2
                pending = 0
        else:
            width += 1
    return width


def escape_quote_content(content: str) -> Optional[tuple[str, str]]:
    """Read a single- or double-quoted string from the start of ``content``.

    A backslash takes the next character literally. Returns the unquoted
    text and the remainder after the closing quote, or None if ``content``
    does not start with a quote. An unterminated quote reads to the end.
    """
    if not content or content[0] not in "'\"":
        return None
    quote = content[0]
    out: list[str] = []
    pos = 1
    end = len(content)
    while pos < end:
        ch = content[pos]
        if ch == "\0":
            break
        if ch == "\\":
            pos += 1
            if pos >= end or content[pos] == "\0":
                break
            out.append(content[pos])
            pos += 1
            continue
        if ch == quote:
            pos += 1
            break
        out.append(ch)
        pos += 1
    return "".join(out), content[pos:]