"""Presence modes for optional parts of a number's text."""

from __future__ import annotations

import enum


class Presence(enum.Enum):
    """Whether a part is forbidden, optional or required."""

    NO = 0
    OPTIONAL = 1
    REQUIRED = 2

    def short_name(self) -> str:
        """Return the short name: "no", "optional" or "required"."""
        return self.name.lower()