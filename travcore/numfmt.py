"""Integer-to-text conversion and a small printf-like formatter."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1
_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1
_ULLONG_MAX = 2**64 - 1


def _checked(value: object, low: int, high: int, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} value must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {kind}")
    return value


def ll2str(value: int) -> str:
    """Decimal text of a signed 64 bit integer."""
    return str(_checked(value, _LLONG_MIN, _LLONG_MAX, "signed 64 bit"))


def ull2str(value: int) -> str:
    """Decimal text of an unsigned 64 bit integer."""
    return str(_checked(value, 0, _ULLONG_MAX, "unsigned 64 bit"))


def itoa(value: int) -> str:
    """Decimal text of a non-negative 32 bit int."""
    _checked(value, _INT_MIN, _INT_MAX, "int")
    if value < 0:
        raise ValueError("itoa only handles non-negative values")
    return str(value)


def catfmt(fmt: str, *args: object) -> str:
    """Format with a restricted printf subset.

    Supported: %s and %S (strings), %i (int), %I (64 bit signed),
    %u (unsigned int), %U (64 bit unsigned) and %% for a literal '%'.
    Any other character after '%' is emitted verbatim.
    """
    out: list[str] = []
    arg_iter = iter(args)

    def next_arg() -> object:
        try:
            return next(arg_iter)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in "sS":
            text = next_arg()
            if not isinstance(text, str):
                raise TypeError(f"%{spec} expects a str, got {type(text).__name__}")
            out.append(text)
        elif spec == "i":
            out.append(str(_checked(next_arg(), _INT_MIN, _INT_MAX, "int")))
        elif spec == "I":
            out.append(ll2str(next_arg()))
        elif spec == "u":
            out.append(str(_checked(next_arg(), 0, _UINT_MAX, "unsigned int")))
        elif spec == "U":
            out.append(ull2str(next_arg()))
        else:
            out.append(spec)
    return "".join(out)