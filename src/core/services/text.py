"""Text case normalization."""

from __future__ import annotations

from core.domain.casing import CaseMode


def format_string(text: str, mode: CaseMode | str | bool | None = CaseMode.DEFAULT) -> str:
    """Upper-case `text` unless the mode is explicitly `LOWER`.

    `mode` also accepts the legacy optional flag: `True`/`None` upper-case,
    `False` lower-cases.
    """

    if CaseMode.coerce(mode) is CaseMode.LOWER:
        return text.lower()
    return text.upper()
