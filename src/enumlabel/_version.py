"""
Version lookup for enumlabel.

The version is stamped into every generated module header, so a source
checkout must report the same version that ``pip install`` would.
"""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    """Version from the source checkout's pyproject.toml, if this is one."""
    if not _PYPROJECT.is_file():
        return None
    try:
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != "enumlabel":
        return None
    return project.get("version")


def get_version() -> str:
    """Installed or checkout version; ``0.0.0`` when neither is available."""
    checkout = _checkout_version()
    if checkout:
        return checkout
    try:
        return _metadata_version("enumlabel")
    except PackageNotFoundError:
        return "0.0.0"
