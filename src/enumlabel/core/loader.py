"""
YAML enum declaration files.

Format:

    enums:
      - name: PaymentMethod
        namespace: billing.models
        policy: ignore            # ignore | throw_at_runtime | use_member_name | 1..3
        members:
          - name: Credit
            label: Credit card
          - name: Debit
            label: null           # declared without a value
          - Boleto                # no label

An enum whose policy is missing or malformed is skipped with a warning; its
members produce no output at all.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import PolicyError, make_load_error
from .ir import AbsencePolicy, DeclaredLabel, EnumMember, EnumSpec

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def _parse_member(raw: Any, file: Path, enum_name: str) -> EnumMember:
    if isinstance(raw, str):
        return EnumMember(name=raw)

    if not isinstance(raw, dict) or "name" not in raw:
        raise make_load_error(
            f"Member entry must be a name or a mapping with 'name', got {raw!r}",
            file,
            enum=enum_name,
        )

    name = raw["name"]
    if not isinstance(name, str) or not name:
        raise make_load_error(f"Invalid member name {name!r}", file, enum=enum_name)

    if "label" not in raw:
        return EnumMember(name=name)

    label = raw["label"]
    if label is not None and not isinstance(label, str):
        raise make_load_error(
            f"Label of member '{name}' must be a string or null, got {label!r}",
            file,
            enum=enum_name,
        )
    return EnumMember(name=name, label=DeclaredLabel.of(label))


def parse_enum_document(data: Any, file: Path) -> list[EnumSpec]:
    """
    Turn a loaded YAML document into EnumSpecs.

    Args:
        data: Result of ``yaml.safe_load``
        file: Source path, used in error messages

    Raises:
        LoadError: If the document structure is invalid
    """
    if not isinstance(data, dict) or not isinstance(data.get("enums"), list):
        raise make_load_error("Expected a mapping with an 'enums' list", file)

    specs: list[EnumSpec] = []
    for index, raw in enumerate(data["enums"]):
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise make_load_error(f"Enum entry #{index + 1} must be a mapping with a 'name'", file)
        name = raw["name"]

        if "policy" not in raw:
            logger.warning("%s: enum %s has no policy, skipping", file, name)
            continue
        try:
            policy = AbsencePolicy.parse(raw["policy"])
        except PolicyError as e:
            logger.warning("%s: enum %s skipped: %s", file, name, e.message)
            continue

        raw_members = raw.get("members") or []
        if not isinstance(raw_members, list):
            raise make_load_error("'members' must be a list", file, enum=name)
        members = [_parse_member(m, file, name) for m in raw_members]

        try:
            specs.append(
                EnumSpec(
                    name=name,
                    namespace=raw.get("namespace"),
                    policy=policy,
                    members=members,
                )
            )
        except ValidationError as e:
            raise make_load_error(str(e), file, enum=name) from e

    return specs


def load_enum_file(path: Path) -> list[EnumSpec]:
    """
    Load enum declarations from a YAML file.

    Raises:
        LoadError: If the file is missing, not YAML, or malformed
    """
    if not path.exists():
        raise make_load_error("File not found", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        line = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
        raise make_load_error(f"Invalid YAML: {e}", path, line=line) from e

    specs = parse_enum_document(data, path)
    logger.debug("Loaded %d enum(s) from %s", len(specs), path)
    return specs


def collect_enum_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into their YAML files (sorted); keep files as given."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in YAML_SUFFIXES)
            )
        else:
            files.append(path)
    return files
