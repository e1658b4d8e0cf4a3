"""Parameter type defaults and legacy BASIC type sigils."""

from __future__ import annotations

DEFAULT_PARAM_TYPE = "Int"

SIGIL_TYPES: dict[str, str] = {
    "%": "Int",
    "#": "Float",
    "!": "Double",
    "$": "String",
}

def type_for_sigil(char: str) -> str | None:
    """Return the type implied by the sigil *char*.

    Returns ``None`` when *char* is not one of :data:`SIGIL_TYPES`.
    """
    return SIGIL_TYPES.get(char)

def is_sigil(char: str) -> bool:
    """Return ``True`` if *char* is a type sigil."""
    return char in SIGIL_TYPES
