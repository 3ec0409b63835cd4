"""
enumlabel - label lookups for enums.

Compiles per-member labels of an enum into a forward (member -> label) and a
reverse (label -> member) mapping table, with a configurable policy for
members that have no label, and renders them as lookup code.
"""

from ._version import get_version
from .core import ir
from .core.compiler import EnumMappingCompiler, compile_enum
from .core.errors import (
    AmbiguousLabelError,
    EnumLabelError,
    LabelLookupError,
    MissingLabelError,
    NoMatchError,
)
from .core.ir import AbsencePolicy
from .runtime import LabelHelper, generate_helper

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "AbsencePolicy",
    "EnumMappingCompiler",
    "compile_enum",
    "LabelHelper",
    "generate_helper",
    "EnumLabelError",
    "LabelLookupError",
    "MissingLabelError",
    "AmbiguousLabelError",
    "NoMatchError",
]
