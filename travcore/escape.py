"""A quoted, escaped representation of binary data."""

from __future__ import annotations

from typing import Union

_NAMED = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\a"): "\\a",
    ord("\b"): "\\b",
}


def repr_bytes(data: Union[bytes, bytearray, memoryview, str]) -> str:
    """Double-quoted text of ``data`` with non-printable bytes escaped.

    Backslash and quote are escaped, ``\\n \\r \\t \\a \\b`` use their short
    forms, and any other byte outside printable ASCII becomes ``\\xHH``.
    Text is encoded as UTF-8 first.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected bytes or str, got {type(data).__name__}")
    out = ['"']
    for byte in raw:
        named = _NAMED.get(byte)
        if named is not None:
            out.append(named)
        elif 0x20 <= byte <= 0x7E:
            out.append(chr(byte))
        else:
            out.append("\\x%02x" % byte)
    out.append('"')
    return "".join(out)