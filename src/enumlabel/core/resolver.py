"""
Per-member label resolution.

Decides, for one member and the enum's absence policy, which association the
member contributes to the forward (member -> label) table and to the reverse
(label -> member) table:

    declared label      policy              forward             reverse
    ---------------     ----------------    ----------------    ----------------------
    absent / empty      IGNORE              name -> NoLabel     * -> NoLabel
    absent / empty      THROW_AT_RUNTIME    name -> Failure     * -> Failure(no match)
    absent / empty      USE_MEMBER_NAME     name -> name        name.lower() -> member
    "v"                 any                 name -> "v"         "v".lower() -> member

``*`` is the wildcard key. Reverse keys are always lowercased.
"""

from __future__ import annotations

from .ir import (
    WILDCARD,
    AbsencePolicy,
    Association,
    EnumMember,
    Failure,
    LabelText,
    MemberRef,
    NoLabel,
    fold_key,
)


class LabelResolver:
    """Stateless resolver of forward and reverse associations."""

    @staticmethod
    def resolve_forward(member: EnumMember, policy: AbsencePolicy) -> Association:
        label = member.label.text
        if label is not None:
            return Association(key=member.name, value=LabelText(text=label))

        match policy:
            case AbsencePolicy.IGNORE:
                return Association(key=member.name, value=NoLabel())
            case AbsencePolicy.THROW_AT_RUNTIME:
                return Association(key=member.name, value=Failure.missing_label(member.name))
            case AbsencePolicy.USE_MEMBER_NAME:
                return Association(key=member.name, value=LabelText(text=member.name))
        raise AssertionError(f"unhandled policy {policy!r}")

    @staticmethod
    def resolve_reverse(member: EnumMember, policy: AbsencePolicy) -> Association:
        target = MemberRef(member=member.name)
        label = member.label.text
        if label is not None:
            return Association(key=fold_key(label), value=target)

        match policy:
            case AbsencePolicy.IGNORE:
                return Association(key=WILDCARD, value=NoLabel())
            case AbsencePolicy.THROW_AT_RUNTIME:
                return Association(key=WILDCARD, value=Failure.no_match())
            case AbsencePolicy.USE_MEMBER_NAME:
                return Association(key=fold_key(member.name), value=target)
        raise AssertionError(f"unhandled policy {policy!r}")


def resolve_forward(member: EnumMember, policy: AbsencePolicy) -> Association:
    """Forward association of ``member`` under ``policy``."""
    return LabelResolver.resolve_forward(member, policy)


def resolve_reverse(member: EnumMember, policy: AbsencePolicy) -> Association:
    """Reverse association of ``member`` under ``policy``."""
    return LabelResolver.resolve_reverse(member, policy)
