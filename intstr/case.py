"""Letter case selection used by formatting and parsing."""

from __future__ import annotations

import enum


def _is_ascii_upper(ch: str) -> bool:
    return len(ch) == 1 and "A" <= ch <= "Z"


def _is_ascii_lower(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


class Case(enum.Enum):
    """Character case: upper, lower, or either of them."""

    UPPER = 0
    LOWER = 1
    ANY = 2

    def short_name(self) -> str:
        """Return the short name: "upper", "lower" or "any"."""
        return self.name.lower()

    def match(self, ch: str) -> bool:
        """Tell whether the character ``ch`` is of this case."""
        if self is Case.LOWER:
            return _is_ascii_lower(ch)
        if self is Case.UPPER:
            return _is_ascii_upper(ch)
        return True

    def compatible(self, other: Case) -> bool:
        """Tell whether two cases agree; ``ANY`` agrees with every case."""
        return Case.ANY in (self, other) or self is other

    def allows_upper(self) -> bool:
        """Tell whether this case is upper or any."""
        return self is not Case.LOWER

    def allows_lower(self) -> bool:
        """Tell whether this case is lower or any."""
        return self is not Case.UPPER