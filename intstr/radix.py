"""Radix constants, validation and radix prefixes."""

from __future__ import annotations

from intstr.case import Case

RADIX_AUTO = 0
"""The radix is determined automatically."""

RADIX_MIN = 2
"""Smallest exact radix."""

RADIX_MAX = 36
"""Largest exact radix."""

_PREFIX_LETTERS = {2: "b", 8: "o", 16: "x"}


def is_valid_radix(radix: object) -> bool:
    """Tell whether ``radix`` is ``RADIX_AUTO`` or an exact radix from 2 to 36."""
    if not isinstance(radix, int) or isinstance(radix, bool):
        return False
    return radix == RADIX_AUTO or RADIX_MIN <= radix <= RADIX_MAX


def check_radix(radix: int) -> int:
    """Return ``radix`` unchanged, raising ValueError if it is not valid."""
    if not is_valid_radix(radix):
        raise ValueError(f"invalid radix: {radix!r}")
    return radix


def radix_prefix(radix: int, case: Case = Case.LOWER) -> str:
    """Return the prefix for ``radix`` in ``case``.

    Radix 2 gives "0b", 8 gives "0o" and 16 gives "0x", upper-cased when
    ``case`` is ``Case.UPPER``; every other radix gives an empty string.
    """
    check_radix(radix)
    if not isinstance(case, Case):
        raise TypeError(f"case must be a Case, not {type(case).__name__}")
    letter = _PREFIX_LETTERS.get(radix)
    if letter is None:
        return ""
    prefix = "0" + letter
    return prefix if case.allows_lower() else prefix.upper()