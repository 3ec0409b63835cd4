"""
Python helper module emitter.

Renders a compiled enum into a standalone module with three functions:

- ``get_available_descriptions()``
- ``get_description_fast(member)``: ``match`` over the forward table
- ``get_enum_from_description_fast(description)``: ``match`` over the
  lowercased input using the reverse table, default case last

Failure markers become ``raise`` statements of the matching
``enumlabel.core.errors`` exception. A reverse table without a default ends
with ``case _: return None``.
"""

from __future__ import annotations

import json
import keyword
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from .._version import get_version
from ..core import ir
from ..core.errors import EmitterError
from .base import Emitter, EmitterCapabilities, snake_case

MODULE_TEMPLATE = '''\
# <auto-generated by enumlabel {{ version }} />
"""Label lookups for {{ enum.qualified_name }}."""

from __future__ import annotations

from enumlabel.core.errors import AmbiguousLabelError, MissingLabelError, NoMatchError  # noqa: F401
from {{ enum.namespace }} import {{ enum.name }}

_DESCRIPTIONS: tuple[str, ...] = (
{% for label in enum.available_labels %}
    {{ label | pystr }},
{% endfor %}
)


def get_available_descriptions() -> tuple[str, ...]:
    """Distinct labels declared on {{ enum.name }}, in declaration order."""
    return _DESCRIPTIONS


def get_description_fast(member: {{ enum.name }}) -> str | None:
    """Label of ``member``."""
    match member:
{% for case in forward %}
        case {{ case.pattern }}:
            {{ case.body }}
{% endfor %}
    return None


def get_enum_from_description_fast(description: str) -> {{ enum.name }} | None:
    """Member labelled ``description``, compared case-insensitively."""
    match description.lower():
{% for case in reverse %}
        case {{ case.pattern }}:
            {{ case.body }}
{% endfor %}
'''

_ERROR_NAMES = {
    ir.FailureReason.MISSING_LABEL: "MissingLabelError",
    ir.FailureReason.AMBIGUOUS_LABEL: "AmbiguousLabelError",
    ir.FailureReason.NO_MATCH: "NoMatchError",
}


def pystr(value: str) -> str:
    """Double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


def message_expr(template: str, variable: str) -> str:
    """Python expression building a failure message, ``{label}`` -> ``variable``."""
    parts = template.split("{label}")
    pieces: list[str] = []
    for i, part in enumerate(parts):
        if i:
            pieces.append(variable)
        if part:
            pieces.append(pystr(part))
    return " + ".join(pieces) or '""'


class PythonEmitter(Emitter):
    """Emit ``<enum>_labels.py`` helper modules."""

    name = "python"

    def __init__(self) -> None:
        self.env = Environment(
            loader=BaseLoader(),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["pystr"] = pystr
        self.template = self.env.from_string(MODULE_TEMPLATE)

    def get_capabilities(self) -> EmitterCapabilities:
        return EmitterCapabilities(
            name=self.name,
            description="Python module with match-based label lookups",
            output_formats=["py"],
        )

    def filename(self, compiled: ir.CompiledEnum) -> str:
        return f"{snake_case(compiled.name)}_labels.py"

    def render(self, compiled: ir.CompiledEnum, **options: Any) -> str:
        if not compiled.namespace:
            raise EmitterError(
                f"Enum {compiled.name} has no namespace; the python emitter needs the "
                "module to import it from"
            )
        for part in compiled.namespace.split("."):
            if not part.isidentifier() or keyword.iskeyword(part):
                raise EmitterError(
                    f"Namespace '{compiled.namespace}' of enum {compiled.name} is not an "
                    "importable module path"
                )
        self._check_identifier(compiled.name, compiled.name)
        for member in compiled.members:
            self._check_identifier(member, compiled.name)

        try:
            return self.template.render(
                version=get_version(),
                enum=compiled,
                forward=self._forward_cases(compiled),
                reverse=self._reverse_cases(compiled),
            )
        except TemplateError as e:
            raise EmitterError(f"Failed to render {compiled.name}: {e}") from e

    def _check_identifier(self, name: str, enum_name: str) -> None:
        if not name.isidentifier() or keyword.iskeyword(name):
            raise EmitterError(f"'{name}' in enum {enum_name} is not a valid Python identifier")

    def _forward_cases(self, compiled: ir.CompiledEnum) -> list[dict[str, str]]:
        cases = []
        for association in compiled.forward.associations:
            if association.is_default:
                pattern = "_"
                subject = "str(member)"
            else:
                pattern = f"{compiled.name}.{association.key}"
                subject = pystr(association.key or "")
            cases.append({"pattern": pattern, "body": self._body(association.value, compiled, subject)})
        if not cases:
            # A match statement needs at least one case
            cases.append({"pattern": "_", "body": "return None"})
        return cases

    def _reverse_cases(self, compiled: ir.CompiledEnum) -> list[dict[str, str]]:
        cases = []
        for association in compiled.reverse.associations:
            pattern = "_" if association.is_default else pystr(association.key or "")
            cases.append(
                {"pattern": pattern, "body": self._body(association.value, compiled, "description")}
            )
        if not compiled.reverse.has_default:
            cases.append({"pattern": "_", "body": "return None"})
        return cases

    def _body(self, value: ir.ResolvedValue, compiled: ir.CompiledEnum, subject: str) -> str:
        match value:
            case ir.LabelText(text=text):
                return f"return {pystr(text)}"
            case ir.MemberRef(member=member):
                return f"return {compiled.name}.{member}"
            case ir.NoLabel():
                return "return None"
            case ir.Failure():
                error = _ERROR_NAMES[value.reason]
                return f"raise {error}({message_expr(value.message, subject)}, label={subject})"
        raise EmitterError(f"Unsupported table value {value!r}")
