"""
Enum mapping compiler.

Turns an EnumSpec into its three artifacts in a single pass over the members:

1. the available labels (distinct non-empty labels, declaration order)
2. the forward table (member -> label)
3. the reverse table (label -> member)

Inconsistent data (missing labels, duplicated labels) never aborts
compilation; it ends up as Failure values inside the tables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .ir import AbsencePolicy, CompiledEnum, EnumMember, EnumSpec, MappingTable
from .resolver import LabelResolver
from .switches import MappingTableBuilder

logger = logging.getLogger(__name__)


class EnumMappingCompiler:
    """
    Builds label mapping artifacts for enums.

    Each ``compile`` call uses fresh builders, so one compiler instance can be
    shared between enums (and threads).
    """

    def __init__(self, resolver: LabelResolver | None = None):
        self.resolver = resolver or LabelResolver()

    def compile(
        self, members: Iterable[EnumMember], policy: AbsencePolicy
    ) -> tuple[tuple[str, ...], MappingTable, MappingTable]:
        """
        Compile members into (available labels, forward table, reverse table).

        Args:
            members: Members in declaration order
            policy: Absence policy of the enum

        Returns:
            Tuple of available labels, forward table and reverse table
        """
        labels: dict[str, None] = {}
        forward = MappingTableBuilder(case_sensitive=True)
        reverse = MappingTableBuilder()

        for member in members:
            text = member.label.text
            if text:
                labels.setdefault(text, None)
            forward.add_association(self.resolver.resolve_forward(member, policy))
            reverse.add_association(self.resolver.resolve_reverse(member, policy))

        return tuple(labels), forward.build(), reverse.build()

    def compile_enum(self, spec: EnumSpec) -> CompiledEnum:
        """Compile an EnumSpec into a CompiledEnum."""
        available, forward, reverse = self.compile(spec.members, spec.policy)
        logger.debug(
            "Compiled %s (%s): %d labels, %d forward, %d reverse entries",
            spec.qualified_name,
            spec.policy.name,
            len(available),
            len(forward.associations),
            len(reverse.associations),
        )
        return CompiledEnum(
            name=spec.name,
            namespace=spec.namespace,
            policy=spec.policy,
            members=tuple(m.name for m in spec.members),
            available_labels=available,
            forward=forward,
            reverse=reverse,
        )


def compile_enum(spec: EnumSpec) -> CompiledEnum:
    """Compile one enum with a default compiler."""
    return EnumMappingCompiler().compile_enum(spec)
