"""
Enum declaration types for enumlabel IR.

These are the raw facts handed to the compiler by an extraction front-end:
the enum identity, its absence policy, and each member's declared label
state in declaration order.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .policy import AbsencePolicy


class LabelState(str, Enum):
    """Declared label state of a single member."""

    ABSENT = "absent"  # No label annotation at all
    PRESENT_EMPTY = "present_empty"  # Annotation without a usable value
    PRESENT = "present"


class DeclaredLabel(BaseModel):
    """
    Raw label declaration of one member.

    Examples:
        - no annotation: DeclaredLabel.absent()
        - annotation without argument: DeclaredLabel.empty()
        - annotation "Card": DeclaredLabel.of("Card")

    A PRESENT label with an empty value is normalised to PRESENT_EMPTY.
    """

    state: LabelState = LabelState.ABSENT
    value: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def normalise(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        state = LabelState(data.get("state", LabelState.ABSENT))
        value = data.get("value")
        if state is LabelState.PRESENT and not value:
            state = LabelState.PRESENT_EMPTY
        if state is not LabelState.PRESENT:
            value = None
        return {**data, "state": state, "value": value}

    @classmethod
    def absent(cls) -> DeclaredLabel:
        return cls(state=LabelState.ABSENT)

    @classmethod
    def empty(cls) -> DeclaredLabel:
        return cls(state=LabelState.PRESENT_EMPTY)

    @classmethod
    def of(cls, value: str | None) -> DeclaredLabel:
        """Label from an annotation argument; None or "" means present-empty."""
        return cls(state=LabelState.PRESENT, value=value)

    @property
    def text(self) -> str | None:
        """The usable label text, or None when absent or empty."""
        return self.value if self.state is LabelState.PRESENT else None


class EnumMember(BaseModel):
    """
    A single enum member as seen by the compiler.

    Attributes:
        name: Member identifier, unique within its enum
        label: Declared label state
    """

    name: str
    label: DeclaredLabel = Field(default_factory=DeclaredLabel.absent)

    model_config = ConfigDict(frozen=True)


class EnumSpec(BaseModel):
    """
    An enum selected for label generation.

    Attributes:
        name: Enum identifier (e.g. PaymentMethod)
        namespace: Qualifier of the enum, passed through untouched
        policy: Absence policy from the generation directive
        members: Members in declaration order
    """

    name: str
    namespace: str | None = None
    policy: AbsencePolicy = AbsencePolicy.IGNORE
    members: list[EnumMember] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("members")
    @classmethod
    def validate_unique_names(cls, v: list[EnumMember]) -> list[EnumMember]:
        """Ensure member names are unique."""
        seen: set[str] = set()
        for member in v:
            if member.name in seen:
                raise ValueError(f"Duplicate member name '{member.name}'")
            seen.add(member.name)
        return v

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name
