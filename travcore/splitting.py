"""Splitting strings on a separator and into shell-like quoted arguments."""

from __future__ import annotations

from typing import Union

_HEX_DIGITS = "0123456789abcdefABCDEF"
_C_SPACE = " \t\n\v\f\r"
_TOKEN_END = " \n\r\t"
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "a": "\a"}

_Text = Union[str, bytes]


def split(s: _Text, sep: _Text) -> list:
    """Split ``s`` on the (possibly multi-character) separator ``sep``.

    An empty ``s`` gives an empty list; an empty separator is a ValueError.
    """
    if len(sep) < 1:
        raise ValueError("separator must not be empty")
    if len(s) == 0:
        return []
    return s.split(sep)


def is_hex_digit(c: str) -> bool:
    """True if ``c`` is a single hexadecimal digit."""
    return len(c) == 1 and c in _HEX_DIGITS


def hex_digit_to_int(c: str) -> int:
    """Value 0-15 of a hex digit; 0 for anything else."""
    return int(c, 16) if is_hex_digit(c) else 0


def _split_args(line: str) -> list[str]:
    line = line.split("\0", 1)[0]
    n = len(line)

    def at(i: int) -> str:
        return line[i] if i < n else ""

    args: list[str] = []
    p = 0
    while True:
        while p < n and line[p] in _C_SPACE:
            p += 1
        if p >= n:
            return args
        current: list[str] = []
        in_double = in_single = done = False
        while not done:
            ch = at(p)
            if in_double:
                if (
                    ch == "\\"
                    and at(p + 1) == "x"
                    and is_hex_digit(at(p + 2))
                    and is_hex_digit(at(p + 3))
                ):
                    current.append(
                        chr(hex_digit_to_int(at(p + 2)) * 16 + hex_digit_to_int(at(p + 3)))
                    )
                    p += 3
                elif ch == "\\" and at(p + 1):
                    p += 1
                    current.append(_ESCAPES.get(line[p], line[p]))
                elif ch == '"':
                    following = at(p + 1)
                    if following and following not in _C_SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif not ch:
                    raise ValueError("unterminated quotes")
                else:
                    current.append(ch)
            elif in_single:
                if ch == "\\" and at(p + 1) == "'":
                    p += 1
                    current.append("'")
                elif ch == "'":
                    following = at(p + 1)
                    if following and following not in _C_SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif not ch:
                    raise ValueError("unterminated quotes")
                else:
                    current.append(ch)
            else:
                if not ch or ch in _TOKEN_END:
                    done = True
                elif ch == '"':
                    in_double = True
                elif ch == "'":
                    in_single = True
                else:
                    current.append(ch)
            if p < n:
                p += 1
        args.append("".join(current))


def split_args(line: _Text) -> list:
    """Split a command line into arguments, honouring quotes and escapes.

    Double quotes accept ``\\n \\r \\t \\b \\a``, ``\\xHH`` and a backslash
    before any other character; single quotes accept ``\\'``. A closing quote
    must be followed by whitespace or the end. Unbalanced quotes raise
    ValueError. Bytes in give bytes out.
    """
    if isinstance(line, (bytes, bytearray)):
        return [arg.encode("latin-1") for arg in _split_args(bytes(line).decode("latin-1"))]
    if isinstance(line, str):
        return _split_args(line)
    raise TypeError(f"expected str or bytes, got {type(line).__name__}")