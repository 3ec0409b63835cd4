"""
Extraction of enum declarations from Python ``enum.Enum`` classes.

Labels are declared on the enum class with a ``__labels__`` mapping from
member name to label. Dunder names are not turned into members, so the
mapping can live in the class body:

    @generate_helper(AbsencePolicy.IGNORE)
    class PaymentMethod(Enum):
        __labels__ = {"CREDIT": "Credit card", "DEBIT": None}

        CREDIT = 1
        DEBIT = 2   # present but empty label
        CASH = 3    # no label

A missing key means "no label", ``None`` or ``""`` means "label declared
without a value".
"""

from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Mapping
from enum import Enum
from types import ModuleType
from typing import Any

from pydantic import ValidationError

from .errors import LoadError, PolicyError
from .ir import AbsencePolicy, DeclaredLabel, EnumMember, EnumSpec

logger = logging.getLogger(__name__)

LABELS_ATTR = "__labels__"
POLICY_ATTR = "__enumlabel_policy__"


def declared_labels(enum_cls: type[Enum]) -> dict[str, str | None]:
    """Return the ``__labels__`` mapping of an enum keyed by member name."""
    raw = vars(enum_cls).get(LABELS_ATTR) or {}
    if not isinstance(raw, Mapping):
        raise LoadError(f"{enum_cls.__qualname__}.{LABELS_ATTR} must be a mapping")

    labels: dict[str, str | None] = {}
    for key, value in raw.items():
        name = key.name if isinstance(key, Enum) else key
        if not isinstance(name, str):
            raise LoadError(f"{enum_cls.__qualname__}: label key {key!r} is not a member name")
        if value is not None and not isinstance(value, str):
            raise LoadError(
                f"{enum_cls.__qualname__}: label for {name} must be a string, got {type(value).__name__}"
            )
        labels[name] = value
    return labels


def spec_from_enum(enum_cls: type[Enum], policy: Any = None) -> EnumSpec:
    """
    Build an EnumSpec from a Python enum class.

    Args:
        enum_cls: The enum class; aliases are skipped
        policy: Absence policy selector; defaults to the one recorded by
            ``generate_helper``

    Raises:
        LoadError: If ``enum_cls`` is not an enum or its labels are malformed
        PolicyError: If no valid policy is available
    """
    if not (inspect.isclass(enum_cls) and issubclass(enum_cls, Enum)):
        raise LoadError(f"{enum_cls!r} is not an Enum class")

    if policy is None:
        policy = getattr(enum_cls, POLICY_ATTR, None)
    resolved = AbsencePolicy.parse(policy)

    labels = declared_labels(enum_cls)
    members = []
    for member in enum_cls:
        if member.name in labels:
            label = DeclaredLabel.of(labels[member.name])
        else:
            label = DeclaredLabel.absent()
        members.append(EnumMember(name=member.name, label=label))

    unknown = set(labels) - {m.name for m in members}
    if unknown:
        logger.warning(
            "%s declares labels for unknown members: %s",
            enum_cls.__qualname__,
            ", ".join(sorted(unknown)),
        )

    try:
        return EnumSpec(
            name=enum_cls.__name__,
            namespace=enum_cls.__module__,
            policy=resolved,
            members=members,
        )
    except ValidationError as e:
        raise LoadError(f"Invalid enum {enum_cls.__qualname__}: {e}") from e


def discover_enums(module: ModuleType) -> list[type[Enum]]:
    """Find enums defined in ``module`` that carry a generation policy."""
    found = []
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if not issubclass(obj, Enum) or obj.__module__ != module.__name__:
            continue
        if POLICY_ATTR in vars(obj):
            found.append(obj)
    return found


def specs_from_reference(reference: str) -> list[EnumSpec]:
    """
    Load specs from ``package.module`` or ``package.module:EnumName``.

    A module reference yields every decorated enum of the module, in name
    order. Enums whose policy is unusable are skipped with a warning.
    """
    module_name, _, attr = reference.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise LoadError(f"Cannot import module '{module_name}': {e}") from e

    if attr:
        enum_cls = getattr(module, attr, None)
        if enum_cls is None:
            raise LoadError(f"Module '{module_name}' has no attribute '{attr}'")
        return [spec_from_enum(enum_cls)]

    specs = []
    for enum_cls in discover_enums(module):
        try:
            specs.append(spec_from_enum(enum_cls))
        except PolicyError as e:
            logger.warning("Skipping %s.%s: %s", module_name, enum_cls.__name__, e)
    return specs
