"""
Error types for enumlabel extraction, building, emission and lookups.

The compiler core never raises for inconsistent enum data: missing labels
and ambiguous labels are encoded as ``Failure`` values inside the mapping
tables. The exceptions below are raised at the edges only (loading input,
rendering output, and consumers performing lookups).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class EnumLabelError(Exception):
    """Base exception for all enumlabel errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class PolicyError(EnumLabelError):
    """Raised when an absence policy selector cannot be interpreted."""

    pass


class LoadError(EnumLabelError):
    """
    Raised when an enum declaration source cannot be read.

    Examples:
    - File not found or unreadable
    - YAML that does not parse
    - Document without an ``enums`` list
    - Member entries that are neither a name nor a mapping
    """

    pass


class ManifestError(EnumLabelError):
    """Raised when ``enumlabel.toml`` is missing or invalid."""

    pass


class BuilderStateError(EnumLabelError):
    """Raised when a mapping table builder is used after it was built."""

    pass


class EmitterError(EnumLabelError):
    """
    Raised when an emitter fails to produce output.

    Examples:
    - Unknown emitter name
    - Duplicate emitter registration
    - Template rendering errors
    """

    pass


class LabelLookupError(EnumLabelError, LookupError):
    """
    Raised by consumers when a lookup hits a failure marker.

    Attributes:
        label: The label (reverse lookups) or member name (forward lookups)
            that was looked up
    """

    def __init__(self, message: str, label: str | None = None):
        self.label = label
        super().__init__(message)


class MissingLabelError(LabelLookupError):
    """A member without a label was asked for its label."""

    pass


class AmbiguousLabelError(LabelLookupError):
    """More than one member declares the requested label."""

    pass


class NoMatchError(LabelLookupError):
    """No member declares the requested label."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Optional line number (1-indexed)
        enum: Optional name of the enum being processed
    """

    file: Path
    line: int | None = None
    enum: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "enums.yml:10 in enum PaymentMethod"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
        if self.enum:
            location += f" in enum {self.enum}"
        return location


def make_load_error(
    message: str,
    file: Path,
    line: int | None = None,
    enum: str | None = None,
) -> LoadError:
    """
    Helper to create a LoadError with context.

    Args:
        message: Error description
        file: Source file path
        line: Optional line number
        enum: Optional enum name

    Returns:
        LoadError with context attached
    """
    return LoadError(message, ErrorContext(file=file, line=line, enum=enum))
