"""
Mapping table types for enumlabel IR.

A MappingTable is one direction of the label mapping (member -> label or
label -> member). Non-default entries come first; the optional default
(wildcard) association is always last.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .policy import AbsencePolicy
from .values import ResolvedValue

# The wildcard key. None can never collide with a real member name or label,
# including a label that is literally "_".
WILDCARD = None


def fold_key(key: str) -> str:
    """Case-insensitive identity of a table key."""
    return key.lower()


class Association(BaseModel):
    """
    One (key, value) pair of a mapping table.

    Attributes:
        key: Member name (forward), lowercased label (reverse), or WILDCARD
        value: Resolved value
        is_collision: True when the entry collapsed from duplicate keys
    """

    key: str | None
    value: ResolvedValue
    is_collision: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def is_default(self) -> bool:
        return self.key is WILDCARD


class MappingTable(BaseModel):
    """
    A finalized table for one lookup direction.

    Attributes:
        entries: Non-default associations, unique by folded key
        default: Catch-all association, if any
    """

    entries: tuple[Association, ...] = ()
    default: Association | None = None
    case_sensitive: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def associations(self) -> tuple[Association, ...]:
        """All associations, default last."""
        if self.default is None:
            return self.entries
        return (*self.entries, self.default)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def get(self, key: str) -> Association | None:
        """Find the non-default entry for ``key``; no fallback to the default."""
        wanted = key if self.case_sensitive else fold_key(key)
        for entry in self.entries:
            if entry.key is None:
                continue
            candidate = entry.key if self.case_sensitive else fold_key(entry.key)
            if candidate == wanted:
                return entry
        return None

    def lookup(self, key: str) -> Association | None:
        """Find the entry for ``key``, falling back to the default."""
        return self.get(key) or self.default

    def pairs(self) -> set[tuple[str | None, str]]:
        """(key, value) pairs as a comparable set, ignoring order."""
        return {(a.key, a.value.model_dump_json()) for a in self.associations}


class CompiledEnum(BaseModel):
    """
    All artifacts produced for one enum.

    Attributes:
        name: Enum identifier
        namespace: Passthrough qualifier from the declaration
        policy: Absence policy used
        members: Member names in declaration order
        available_labels: Distinct non-empty labels in declaration order
        forward: member -> label table
        reverse: label -> member table
    """

    name: str
    namespace: str | None = None
    policy: AbsencePolicy
    members: tuple[str, ...] = ()
    available_labels: tuple[str, ...] = ()
    forward: MappingTable = Field(default_factory=MappingTable)
    reverse: MappingTable = Field(default_factory=MappingTable)

    model_config = ConfigDict(frozen=True)

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

