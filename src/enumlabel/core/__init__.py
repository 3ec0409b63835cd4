"""Core enumlabel functionality: IR, label resolution, table building, compilation, input loading."""

from . import ir
from .compiler import EnumMappingCompiler, compile_enum
from .errors import (
    AmbiguousLabelError,
    BuilderStateError,
    EmitterError,
    EnumLabelError,
    ErrorContext,
    LabelLookupError,
    LoadError,
    ManifestError,
    MissingLabelError,
    NoMatchError,
    PolicyError,
)
from .extract import discover_enums, spec_from_enum, specs_from_reference
from .loader import collect_enum_files, load_enum_file
from .manifest import ProjectManifest, find_manifest, load_manifest
from .resolver import LabelResolver, resolve_forward, resolve_reverse
from .switches import MappingTableBuilder, SwitchesBuilder

__all__ = [
    "ir",
    "EnumLabelError",
    "PolicyError",
    "LoadError",
    "ManifestError",
    "BuilderStateError",
    "EmitterError",
    "LabelLookupError",
    "MissingLabelError",
    "AmbiguousLabelError",
    "NoMatchError",
    "ErrorContext",
    "LabelResolver",
    "resolve_forward",
    "resolve_reverse",
    "MappingTableBuilder",
    "SwitchesBuilder",
    "EnumMappingCompiler",
    "compile_enum",
    "spec_from_enum",
    "discover_enums",
    "specs_from_reference",
    "load_enum_file",
    "collect_enum_files",
    "ProjectManifest",
    "load_manifest",
    "find_manifest",
]
