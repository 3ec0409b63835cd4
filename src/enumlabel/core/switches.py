"""
Mapping table builder (the "switches" accumulator).

Collects associations for one lookup direction, one per member, in member
declaration order:

- the first wildcard association becomes the table default; later ones are
  dropped
- keys are compared case-insensitively; a second association under an
  equivalent key collapses the entry into an ambiguous-label failure
- once collapsed, further equivalent keys change nothing

``build()`` returns the entries in first-insertion order followed by the
default, if one was recorded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import BuilderStateError
from .ir import WILDCARD, Association, Failure, MappingTable, ResolvedValue, fold_key

logger = logging.getLogger(__name__)


class SlotState(str, Enum):
    """State of one key in the accumulator."""

    RESOLVED = "resolved"
    COLLIDED = "collided"


@dataclass
class _Slot:
    key: str
    value: ResolvedValue
    state: SlotState = SlotState.RESOLVED


class MappingTableBuilder:
    """
    Accumulates associations for one direction of the mapping.

    Example:
        builder = MappingTableBuilder()
        builder.add("pix", MemberRef(member="Pix"))
        builder.add("Pix", MemberRef(member="PixAgain"))
        builder.add(WILDCARD, NoLabel())
        table = builder.build()
        # table.entries -> ("pix" -> Failure(ambiguous)), table.default -> NoLabel

    Args:
        case_sensitive: Compare keys exactly instead of case-insensitively.
            Used for the forward direction, whose keys are member names.
    """

    def __init__(self, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        self._slots: dict[str, _Slot] = {}
        self._default: Association | None = None
        self._built = False

    def _identity(self, key: str) -> str:
        return key if self.case_sensitive else fold_key(key)

    def add(self, key: str | None, value: ResolvedValue) -> None:
        """Record ``key -> value``; ``key`` may be WILDCARD."""
        if self._built:
            raise BuilderStateError("Cannot add to a mapping table that was already built")

        if key is WILDCARD:
            if self._default is None:
                self._default = Association(key=WILDCARD, value=value)
            return

        identity = self._identity(key)
        slot = self._slots.get(identity)
        if slot is None:
            self._slots[identity] = _Slot(key=key, value=value)
        elif slot.state is SlotState.RESOLVED:
            logger.debug("Label collision on key '%s'", slot.key)
            slot.value = Failure.ambiguous(slot.key)
            slot.state = SlotState.COLLIDED

    def add_association(self, association: Association) -> None:
        self.add(association.key, association.value)

    def build(self) -> MappingTable:
        """Finalize the table. A builder can only be built once."""
        if self._built:
            raise BuilderStateError("Mapping table was already built")
        self._built = True

        entries = tuple(
            Association(
                key=slot.key,
                value=slot.value,
                is_collision=slot.state is SlotState.COLLIDED,
            )
            for slot in self._slots.values()
        )
        return MappingTable(
            entries=entries,
            default=self._default,
            case_sensitive=self.case_sensitive,
        )

    @property
    def has_default(self) -> bool:
        return self._default is not None

    def __len__(self) -> int:
        return len(self._slots) + (1 if self._default is not None else 0)


SwitchesBuilder = MappingTableBuilder
