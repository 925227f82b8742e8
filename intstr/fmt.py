"""Formatting of integers as text in any radix from 2 to 36."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import IO, Iterator, Optional

from intstr.case import Case
from intstr.plus import Plus
from intstr.radix import RADIX_AUTO, check_radix, radix_prefix

__all__ = [
    "DEFAULT_FORMAT_OPTIONS",
    "FormatOptions",
    "format_int",
    "format_uint",
    "iter_int",
    "iter_uint",
    "write_int",
    "write_uint",
]

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1
UINT_MAX = (1 << 64) - 1

_BYTE_MAX = 255
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class FormatOptions:
    """Options that control how an integer is written.

    ``group_sep`` is written between groups of ``group_size`` digits counted
    from the right; a ``group_size`` of 0 turns grouping off. ``min_digits``
    pads with leading zeros. An ``RADIX_AUTO`` radix means decimal.
    """

    group_sep: Optional[str] = None
    group_size: int = 0
    min_digits: int = 0
    digit_case: Case = Case.UPPER
    plus: Plus = Plus.NONE
    radix: int = 10
    radix_prefix_case: Case = Case.LOWER
    show_radix_prefix: bool = True

    def __post_init__(self) -> None:
        if self.group_sep is not None and not isinstance(self.group_sep, str):
            raise TypeError("group_sep must be a string or None")
        for name in ("group_size", "min_digits"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"{name} must be between 0 and {_BYTE_MAX}, got {value}")
        for name in ("digit_case", "radix_prefix_case"):
            if not isinstance(getattr(self, name), Case):
                raise TypeError(f"{name} must be a Case")
        if not isinstance(self.plus, Plus):
            raise TypeError("plus must be a Plus")
        check_radix(self.radix)


DEFAULT_FORMAT_OPTIONS = FormatOptions()
"""The options used when none are given."""


def _resolve(options: Optional[FormatOptions]) -> FormatOptions:
    if options is None:
        return DEFAULT_FORMAT_OPTIONS
    if not isinstance(options, FormatOptions):
        raise TypeError(f"options must be FormatOptions, not {type(options).__name__}")
    return options


def _check_int(value: object, low: int, high: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an integer, not {type(value).__name__}")
    if not low <= value <= high:
        raise OverflowError(f"value {value} is out of range [{low}, {high}]")
    return value


def _digits(magnitude: int, radix: int, upper: bool) -> str:
    out = []
    while True:
        magnitude, rem = divmod(magnitude, radix)
        out.append(_DIGITS[rem])
        if not magnitude:
            break
    text = "".join(reversed(out))
    return text if upper else text.lower()


def _iter(magnitude: int, negative: bool, options: FormatOptions) -> Iterator[str]:
    yield from "-" if negative else options.plus.symbol()

    radix = 10 if options.radix == RADIX_AUTO else options.radix
    if options.show_radix_prefix:
        yield from radix_prefix(radix, options.radix_prefix_case)

    digits = _digits(magnitude, radix, options.digit_case.allows_upper())
    digits = digits.rjust(options.min_digits, "0")

    sep = options.group_sep or ""
    size = options.group_size
    count = len(digits)
    for position, digit in enumerate(digits, 1):
        yield digit
        if position < count and size and (count - position) % size == 0:
            yield from sep


def iter_int(value: int, options: Optional[FormatOptions] = None) -> Iterator[str]:
    """Yield the characters of a signed 64-bit ``value`` one at a time."""
    value = _check_int(value, INT_MIN, INT_MAX)
    return _iter(abs(value), value < 0, _resolve(options))


def iter_uint(value: int, options: Optional[FormatOptions] = None) -> Iterator[str]:
    """Yield the characters of an unsigned 64-bit ``value`` one at a time."""
    value = _check_int(value, 0, UINT_MAX)
    return _iter(value, False, _resolve(options))


def _take(chars: Iterator[str], limit: Optional[int]) -> str:
    if limit is None:
        return "".join(chars)
    if limit < 0:
        raise ValueError("limit must not be negative")
    return "".join(itertools.islice(chars, limit))


def format_int(
    value: int, options: Optional[FormatOptions] = None, limit: Optional[int] = None
) -> str:
    """Format a signed value; at most ``limit`` characters are kept."""
    return _take(iter_int(value, options), limit)


def format_uint(
    value: int, options: Optional[FormatOptions] = None, limit: Optional[int] = None
) -> str:
    """Format an unsigned value; at most ``limit`` characters are kept."""
    return _take(iter_uint(value, options), limit)


def _write(chars: Iterator[str], file: Optional[IO[str]]) -> int:
    text = "".join(chars)
    if file is None:
        return len(text)
    written = file.write(text)
    return len(text) if written is None else written


def write_int(value: int, file: Optional[IO[str]], options: Optional[FormatOptions] = None) -> int:
    """Write a signed value to a text file and return the characters written.

    With ``file`` None nothing is written and the length is returned.
    """
    return _write(iter_int(value, options), file)


def write_uint(value: int, file: Optional[IO[str]], options: Optional[FormatOptions] = None) -> int:
    """Write an unsigned value to a text file and return the characters written.

    With ``file`` None nothing is written and the length is returned.
    """
    return _write(iter_uint(value, options), file)