"""
Absence policy for enum members declared without a label.

The integer values are the selector stored by the generation directive, so
``AbsencePolicy(2)`` reads a directive argument directly.
"""

from __future__ import annotations

from enum import IntEnum

from ..errors import PolicyError


class AbsencePolicy(IntEnum):
    """How a member without a (non-empty) label is resolved."""

    IGNORE = 1  # Forward lookup returns None, member is unreachable in reverse
    THROW_AT_RUNTIME = 2  # Lookups touching the member raise
    USE_MEMBER_NAME = 3  # Member name stands in for the label

    @classmethod
    def parse(cls, value: object) -> AbsencePolicy:
        """
        Interpret a policy selector.

        Accepts an ``AbsencePolicy``, its integer value, or its name in any
        case with ``-`` or ``_`` separators (``"use-member-name"``). A few
        aliases from the attribute-based naming are also accepted.

        Raises:
            PolicyError: If the selector is missing or not recognised
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass, never a valid selector
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise PolicyError(f"Unknown absence policy value: {value}") from None
        if isinstance(value, str):
            key = value.strip().replace("-", "_").upper()
            if key.isdigit():
                return cls.parse(int(key))
            key = _ALIASES.get(key, key)
            try:
                return cls[key]
            except KeyError:
                valid = ", ".join(p.name.lower() for p in cls)
                raise PolicyError(
                    f"Unknown absence policy '{value}'. Expected one of: {valid}"
                ) from None
        raise PolicyError(f"Invalid absence policy selector: {value!r}")


_ALIASES = {
    "THROW": "THROW_AT_RUNTIME",
    "USE_NAME": "USE_MEMBER_NAME",
    "USE_ITSELF": "USE_MEMBER_NAME",
    "IGNORE_ENUM_WITHOUT_DESCRIPTION": "IGNORE",
    "THROW_FOR_ENUM_WITHOUT_DESCRIPTION": "THROW_AT_RUNTIME",
    "USE_ITSELF_WHEN_NO_DESCRIPTION": "USE_MEMBER_NAME",
}
