import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_NAME = "enumlabel.toml"


@dataclass
class SourcesConfig:
    """Where enum declarations come from."""

    modules: list[str] = field(default_factory=list)  # "pkg.mod" or "pkg.mod:Enum"
    paths: list[Path] = field(default_factory=list)  # YAML files or directories


@dataclass
class OutputConfig:
    """Where and how artifacts are written."""

    dir: Path = Path("generated")
    emitter: str = "python"


@dataclass
class ProjectManifest:
    """Parsed ``enumlabel.toml``.

    Example:

        [project]
        name = "billing"

        [sources]
        modules = ["billing.models"]
        paths = ["enums/"]

        [output]
        dir = "generated"
        emitter = "python"
    """

    name: str
    project_root: Path
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _string_list(value: object, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ManifestError(f"'{key}' must be a list of strings")
    return value


def _table(data: dict, key: str, path: Path) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ManifestError(f"{path}: [{key}] must be a table")
    return value


def load_manifest(path: Path) -> ProjectManifest:
    """Load ``enumlabel.toml``; relative paths resolve against its directory."""
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project = _table(data, "project", path)
    sources_data = _table(data, "sources", path)
    output_data = _table(data, "output", path)

    name = project.get("name")
    if not name:
        raise ManifestError(f"{path}: [project] name is required")

    root = path.parent.resolve()

    sources = SourcesConfig(
        modules=_string_list(sources_data.get("modules", []), "sources.modules"),
        paths=[root / p for p in _string_list(sources_data.get("paths", []), "sources.paths")],
    )
    output = OutputConfig(
        dir=root / output_data.get("dir", "generated"),
        emitter=output_data.get("emitter", "python"),
    )

    return ProjectManifest(name=name, project_root=root, sources=sources, output=output)


def find_manifest(start: Path) -> Path | None:
    """Walk up from ``start`` looking for ``enumlabel.toml``."""
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.exists():
            return candidate
    return None
