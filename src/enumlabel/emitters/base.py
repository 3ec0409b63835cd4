"""
Base classes for emitters.

An emitter renders a CompiledEnum into one artifact (a Python helper module,
a JSON dump, ...). Emitters never change table semantics; they only pick a
representation for LabelText / MemberRef / NoLabel / Failure values.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core import ir


@dataclass
class EmitterCapabilities:
    """
    Describes what an emitter produces.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    output_formats: list[str]  # e.g., ["py"], ["json"]


@dataclass
class EmitResult:
    """
    Result from an emitter run.

    Attributes:
        files_created: Paths written
        warnings: Non-fatal issues to show the user
    """

    files_created: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        """Record a file that was created."""
        self.files_created.append(path)

    def add_warning(self, warning: str) -> None:
        """Record a warning."""
        self.warnings.append(warning)

    def merge(self, other: "EmitResult") -> None:
        """Merge another result into this one."""
        self.files_created.extend(other.files_created)
        self.warnings.extend(other.warnings)


class Emitter(ABC):
    """
    Abstract base class for all emitters.

    Subclasses implement ``render`` and ``filename``; ``emit`` writes the
    rendered text. Rendering must be deterministic: identical compiled
    input gives byte-identical output.
    """

    name: str = ""

    @abstractmethod
    def render(self, compiled: ir.CompiledEnum, **options: Any) -> str:
        """
        Render the artifact for one enum.

        Raises:
            EmitterError: If the enum cannot be represented
        """
        pass

    @abstractmethod
    def filename(self, compiled: ir.CompiledEnum) -> str:
        """File name of the artifact for ``compiled``."""
        pass

    def emit(self, compiled: ir.CompiledEnum, output_dir: Path, **options: Any) -> EmitResult:
        """Render and write the artifact into ``output_dir``."""
        result = EmitResult()
        content = self.render(compiled, **options)
        path = output_dir / self.filename(compiled)
        self._write_file(path, content)
        result.add_file(path)
        return result

    def get_capabilities(self) -> EmitterCapabilities:
        """
        Get emitter capabilities for introspection.

        Override to provide emitter metadata.
        """
        return EmitterCapabilities(
            name=self.name or self.__class__.__name__,
            description="No description provided",
            output_formats=["unknown"],
        )

    def _write_file(self, path: Path, content: str) -> None:
        """Write content to a file, creating parent directories if needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="\n")


def snake_case(name: str) -> str:
    """Convert CamelCase to snake_case for file names."""
    result = []
    for i, char in enumerate(name):
        if i > 0 and char.isupper() and (name[i - 1].islower() or name[i - 1].isdigit()):
            result.append("_")
        result.append(char.lower())
    return "".join(result)
