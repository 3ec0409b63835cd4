"""
Table dump emitters (JSON and YAML).

Both dump the same structure:

    name, namespace, policy, members, available_labels,
    forward: [{key, value, is_collision}, ...]   # default (key null) last
    reverse: [{key, value, is_collision}, ...]
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from ..core import ir
from .base import Emitter, EmitterCapabilities, snake_case


def table_document(compiled: ir.CompiledEnum) -> dict[str, Any]:
    """Plain-data view of a compiled enum with defaults placed last."""

    def dump_table(table: ir.MappingTable) -> list[dict[str, Any]]:
        return [a.model_dump(mode="json") for a in table.associations]

    return {
        "name": compiled.name,
        "namespace": compiled.namespace,
        "policy": compiled.policy.name.lower(),
        "members": list(compiled.members),
        "available_labels": list(compiled.available_labels),
        "forward": dump_table(compiled.forward),
        "reverse": dump_table(compiled.reverse),
    }


class JsonEmitter(Emitter):
    """Emit ``<enum>_labels.json``."""

    name = "json"

    def get_capabilities(self) -> EmitterCapabilities:
        return EmitterCapabilities(
            name=self.name,
            description="JSON dump of the label list and both mapping tables",
            output_formats=["json"],
        )

    def filename(self, compiled: ir.CompiledEnum) -> str:
        return f"{snake_case(compiled.name)}_labels.json"

    def render(self, compiled: ir.CompiledEnum, **options: Any) -> str:
        indent = options.get("indent", 2)
        return json.dumps(table_document(compiled), indent=indent, ensure_ascii=False) + "\n"


class YamlEmitter(Emitter):
    """Emit ``<enum>_labels.yml``."""

    name = "yaml"

    def get_capabilities(self) -> EmitterCapabilities:
        return EmitterCapabilities(
            name=self.name,
            description="YAML dump of the label list and both mapping tables",
            output_formats=["yml"],
        )

    def filename(self, compiled: ir.CompiledEnum) -> str:
        return f"{snake_case(compiled.name)}_labels.yml"

    def render(self, compiled: ir.CompiledEnum, **options: Any) -> str:
        return yaml.dump(
            table_document(compiled),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
