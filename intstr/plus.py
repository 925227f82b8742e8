"""How a non-negative number shows its sign when formatted."""

from __future__ import annotations

import enum


class Plus(enum.Enum):
    """Plus modes: hidden, shown as a space, or shown as ``+``."""

    NONE = 0
    SPACE = 1
    SIGN = 2

    def short_name(self) -> str:
        """Return the short name: "none", "space" or "sign"."""
        return self.name.lower()

    def symbol(self) -> str:
        """Return the text written before a non-negative number."""
        if self is Plus.SIGN:
            return "+"
        if self is Plus.SPACE:
            return " "
        return ""