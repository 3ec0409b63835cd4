"""
enumlabel Intermediate Representation (IR) types.

Declarations (what the extraction front-ends produce), resolved values and
mapping tables (what the compiler produces). All types are frozen pydantic
models and re-exported from this package.
"""

# Declarations
from .members import (
    DeclaredLabel,
    EnumMember,
    EnumSpec,
    LabelState,
)
from .policy import AbsencePolicy

# Tables
from .tables import (
    WILDCARD,
    Association,
    CompiledEnum,
    MappingTable,
    fold_key,
)

# Resolved values
from .values import (
    AMBIGUOUS_LABEL_MESSAGE,
    MISSING_LABEL_MESSAGE,
    NO_MATCH_MESSAGE,
    Failure,
    FailureReason,
    ForwardValue,
    LabelText,
    MemberRef,
    NoLabel,
    ResolvedValue,
    ReverseValue,
)

__all__ = [
    # Declarations
    "AbsencePolicy",
    "DeclaredLabel",
    "EnumMember",
    "EnumSpec",
    "LabelState",
    # Resolved values
    "AMBIGUOUS_LABEL_MESSAGE",
    "MISSING_LABEL_MESSAGE",
    "NO_MATCH_MESSAGE",
    "Failure",
    "FailureReason",
    "ForwardValue",
    "LabelText",
    "MemberRef",
    "NoLabel",
    "ResolvedValue",
    "ReverseValue",
    # Tables
    "WILDCARD",
    "Association",
    "CompiledEnum",
    "MappingTable",
    "fold_key",
]
