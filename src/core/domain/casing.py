"""Case modes for text normalization.

Makes the "absent flag behaves as upper" rule explicit: instead of a nullable
boolean, callers choose between three named modes.
"""

from __future__ import annotations

from enum import Enum


class CaseMode(str, Enum):
    """Explicit tri-state choice for `format_string`."""

    UPPER = "upper"
    LOWER = "lower"
    DEFAULT = "default"

    @classmethod
    def from_flag(cls, to_upper: bool | None) -> "CaseMode":
        """Derive a mode from an optional boolean flag."""

        if to_upper is None:
            return cls.DEFAULT
        return cls.UPPER if to_upper else cls.LOWER

    @classmethod
    def coerce(cls, value: "CaseMode | str | bool | None") -> "CaseMode":
        """Accept a mode, its string value (`"lower"`) or an optional flag."""

        if isinstance(value, CaseMode):
            return value
        if isinstance(value, str):
            return cls(value.strip().lower())
        if value is None or isinstance(value, bool):
            return cls.from_flag(value)
        raise TypeError(f"Expected CaseMode, str, bool or None, got {type(value).__name__}")
