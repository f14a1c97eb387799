"""A small printf-style formatter supporting ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
DECIMAL = "0123456789"

_DIRECTIVE = re.compile(r"%(.)?", re.DOTALL)
_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF
_INT_MAX = 0x7FFFFFFF


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be formatted."""


def to_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` with the given digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if number >= base:
        return to_base(number // base, digits) + digits[number % base]
    return digits[number]


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value > _INT_MAX else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c needs a single character")
        value = ord(value)
    code = _as_int(value, "c") & 0xFF
    # A NUL byte ends the produced text piece, so it contributes nothing.
    return chr(code) if code else ""


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"%s needs a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") & _ULONG
    return "0x" + to_base(address, LOWER_HEX)


def _format_signed(value: Any) -> str:
    return str(_signed32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    number = _as_int(value, "u") & _UINT32
    if number <= _INT_MAX:
        return str(number)
    # Large values are written as two decimal pieces, the low three digits
    # without zero padding.
    return str(number // 1000) + str(number % 1000)


def _format_lower_hex(value: Any) -> str:
    return to_base(_as_int(value, "x") & _UINT32, LOWER_HEX)


def _format_upper_hex(value: Any) -> str:
    return to_base(_as_int(value, "X") & _UINT32, UPPER_HEX)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_lower_hex,
    "X": _format_upper_hex,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each directive replaced by the next argument.

    Unknown conversions and a lone trailing ``%`` raise :class:`FormatError`,
    as does running out of arguments. Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    if "%" not in fmt:
        return fmt

    for match in _DIRECTIVE.finditer(fmt):
        spec = match.group(1)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec != "%" and spec not in _CONVERTERS:
            raise FormatError(f"unknown conversion '%{spec}'")

    remaining: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'") from None
        return _CONVERTERS[spec](value)

    return _DIRECTIVE.sub(replace, fmt)