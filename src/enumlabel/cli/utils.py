"""
enumlabel CLI utilities.

Shared helpers used across CLI modules: version display, logging setup and
source resolution.
"""

import logging
import platform
import sys
from pathlib import Path

import typer

from enumlabel._version import get_version
from enumlabel.core.ir import EnumSpec
from enumlabel.core.extract import specs_from_reference
from enumlabel.core.loader import collect_enum_files, load_enum_file
from enumlabel.core.manifest import ProjectManifest

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"enumlabel {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def ensure_importable(root: Path) -> None:
    """Put ``root`` on sys.path so project modules can be imported."""
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


def load_sources(sources: list[str]) -> list[EnumSpec]:
    """
    Load enum specs from CLI source arguments.

    Existing paths are YAML files or directories of them; anything else is a
    ``module`` or ``module:EnumName`` reference.
    """
    specs: list[EnumSpec] = []
    for source in sources:
        path = Path(source)
        if path.exists():
            for file in collect_enum_files([path]):
                specs.extend(load_enum_file(file))
        else:
            specs.extend(specs_from_reference(source))
    logger.debug("Resolved %d enum(s) from %d source(s)", len(specs), len(sources))
    return specs


def load_manifest_sources(manifest: ProjectManifest) -> list[EnumSpec]:
    """Load every enum named by a manifest's [sources] section."""
    ensure_importable(manifest.project_root)
    specs: list[EnumSpec] = []
    for file in collect_enum_files(manifest.sources.paths):
        specs.extend(load_enum_file(file))
    for reference in manifest.sources.modules:
        specs.extend(specs_from_reference(reference))
    return specs
