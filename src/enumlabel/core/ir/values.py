"""
Resolved values stored in mapping tables.

A table association maps a key to one of these tagged variants:

    LabelText("Card")       forward: the member's label
    MemberRef("Credit")     reverse: the member a label maps to
    NoLabel()               "no result"; consumers return None
    Failure(reason, ...)    deferred failure; consumers raise at lookup time

Failures are plain data. Nothing in the compiler raises them.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class FailureReason(str, Enum):
    """Why a lookup through a table entry fails."""

    MISSING_LABEL = "missing_label"
    AMBIGUOUS_LABEL = "ambiguous_label"
    NO_MATCH = "no_match"


MISSING_LABEL_MESSAGE = "label for member {member} not found"
NO_MATCH_MESSAGE = "no member for label '{label}'"
AMBIGUOUS_LABEL_MESSAGE = "multiple members were found with label '{label}'"


class LabelText(BaseModel):
    """A literal label."""

    kind: Literal["label"] = "label"
    text: str

    model_config = ConfigDict(frozen=True)


class MemberRef(BaseModel):
    """Reference to an enum member by name."""

    kind: Literal["member"] = "member"
    member: str

    model_config = ConfigDict(frozen=True)


class NoLabel(BaseModel):
    """Absence of a result; not an error."""

    kind: Literal["none"] = "none"

    model_config = ConfigDict(frozen=True)


class Failure(BaseModel):
    """
    A failure deferred until lookup.

    Attributes:
        reason: Failure category
        message: Message template; ``{label}`` is replaced by the looked-up
            input when the failure is surfaced
        subject: Member name or label key the failure is tied to, if any
    """

    kind: Literal["failure"] = "failure"
    reason: FailureReason
    message: str
    subject: str | None = None

    model_config = ConfigDict(frozen=True)

    def render(self, label: str | None = None) -> str:
        """Fill the ``{label}`` placeholder of the message template."""
        if label is None:
            label = self.subject or ""
        return self.message.replace("{label}", label)

    @classmethod
    def missing_label(cls, member: str) -> Failure:
        return cls(
            reason=FailureReason.MISSING_LABEL,
            message=MISSING_LABEL_MESSAGE.format(member=member),
            subject=member,
        )

    @classmethod
    def no_match(cls) -> Failure:
        return cls(reason=FailureReason.NO_MATCH, message=NO_MATCH_MESSAGE)

    @classmethod
    def ambiguous(cls, key: str) -> Failure:
        return cls(reason=FailureReason.AMBIGUOUS_LABEL, message=AMBIGUOUS_LABEL_MESSAGE, subject=key)


ForwardValue = Annotated[LabelText | NoLabel | Failure, Field(discriminator="kind")]
ReverseValue = Annotated[MemberRef | NoLabel | Failure, Field(discriminator="kind")]
ResolvedValue = Annotated[LabelText | MemberRef | NoLabel | Failure, Field(discriminator="kind")]
