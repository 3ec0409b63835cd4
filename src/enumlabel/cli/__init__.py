"""
enumlabel CLI Package.

- commands.py: generate / inspect / emitters
- utils.py: Shared utilities

The ``enumlabel`` console script runs ``main``.
"""

import sys

import typer

from enumlabel.cli.commands import emitters_command, generate_command, inspect_command
from enumlabel.cli.utils import version_callback

app = typer.Typer(
    help="""enumlabel – label lookups for enums

Compiles per-member labels into forward (member → label) and reverse
(label → member) tables and renders them as lookup code.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """enumlabel CLI main callback for global options."""
    pass


app.command(name="generate")(generate_command)
app.command(name="inspect")(inspect_command)
app.command(name="emitters")(emitters_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
