"""
Generation commands.

Commands:
- generate: compile enums and write artifacts with an emitter
- inspect: print the compiled tables of enums
- emitters: list available emitters
"""

from __future__ import annotations

from pathlib import Path

import typer

from enumlabel.cli.utils import (
    configure_logging,
    ensure_importable,
    load_manifest_sources,
    load_sources,
)
from enumlabel.core.compiler import EnumMappingCompiler
from enumlabel.core.errors import EmitterError, EnumLabelError
from enumlabel.core.ir import CompiledEnum, EnumSpec
from enumlabel.core.manifest import MANIFEST_NAME, find_manifest, load_manifest
from enumlabel.emitters import Emitter, get_emitter, get_registry


def _resolve(
    sources: list[str] | None, manifest_path: Path | None
) -> tuple[list[EnumSpec], Path | None, str | None]:
    """Specs plus the manifest's output dir and emitter, when a manifest is used."""
    if sources:
        ensure_importable(Path.cwd())
        return load_sources(sources), None, None

    path = manifest_path or find_manifest(Path.cwd())
    if path is None:
        raise EnumLabelError(f"No sources given and no {MANIFEST_NAME} found")
    manifest = load_manifest(path)
    return load_manifest_sources(manifest), manifest.output.dir, manifest.output.emitter


def _check_output_clashes(compiled: list[CompiledEnum], emitter: Emitter) -> None:
    """Refuse to write two enums to the same file."""
    owners: dict[str, str] = {}
    for enum in compiled:
        filename = emitter.filename(enum)
        if filename in owners:
            raise EmitterError(
                f"{owners[filename]} and {enum.qualified_name} would both be written to "
                f"{filename}"
            )
        owners[filename] = enum.qualified_name


def generate_command(
    sources: list[str] | None = typer.Argument(  # noqa: B008
        None, help="YAML files/directories or module[:Enum] references"
    ),
    manifest: Path | None = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help=f"Path to {MANIFEST_NAME}"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output directory"
    ),
    emitter: str | None = typer.Option(
        None, "--emitter", "-e", help="Emitter name (see 'enumlabel emitters')"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Compile enums and write label lookup artifacts."""
    configure_logging(verbose)
    try:
        specs, manifest_output, manifest_emitter = _resolve(sources, manifest)
        output_dir = output or manifest_output or Path("generated")
        chosen = get_emitter(emitter or manifest_emitter or "python")

        compiler = EnumMappingCompiler()
        compiled = [compiler.compile_enum(spec) for spec in specs]
        _check_output_clashes(compiled, chosen)

        written = 0
        for spec, enum in zip(specs, compiled):
            result = chosen.emit(enum, output_dir)
            for warning in result.warnings:
                typer.echo(f"⚠ {warning}", err=True)
            for path in result.files_created:
                typer.echo(f"  ✓ {spec.qualified_name} → {path}")
                written += 1
    except EnumLabelError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if not specs:
        typer.echo("No enums found.")
        return
    typer.echo(f"Generated {written} file(s) in {output_dir}")


def inspect_command(
    sources: list[str] | None = typer.Argument(  # noqa: B008
        None, help="YAML files/directories or module[:Enum] references"
    ),
    manifest: Path | None = typer.Option(  # noqa: B008
        None, "--manifest", "-m", help=f"Path to {MANIFEST_NAME}"
    ),
    format: str = typer.Option("json", "--format", "-f", help="Output format: json or yaml"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Print the compiled label list and mapping tables."""
    configure_logging(verbose)
    if format not in ("json", "yaml"):
        typer.echo(f"Error: unknown format '{format}' (expected json or yaml)", err=True)
        raise typer.Exit(code=2)

    try:
        specs, _, _ = _resolve(sources, manifest)
        dumper = get_emitter(format)
        compiler = EnumMappingCompiler()
        for spec in specs:
            typer.echo(dumper.render(compiler.compile_enum(spec)), nl=False)
    except EnumLabelError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def emitters_command() -> None:
    """List available emitters."""
    registry = get_registry()
    for name in registry.list_emitters():
        capabilities = registry.get(name).get_capabilities()
        formats = ", ".join(capabilities.output_formats)
        typer.echo(f"  • {name:<8} {capabilities.description} [{formats}]")
