"""
Emitter plugin system for enumlabel.

Emitters render compiled enums into artifacts (Python helper modules, table
dumps). Built-in emitters are discovered from this package by module; more
can be registered at runtime.
"""

import logging

from ..core.errors import EmitterError
from .base import Emitter, EmitterCapabilities, EmitResult, snake_case

logger = logging.getLogger(__name__)


class EmitterRegistry:
    """
    Registry for emitter plugins.

    Supports:
    - Manual registration via register()
    - Auto-discovery of emitters in this package
    - Lookup by name
    """

    def __init__(self) -> None:
        self._emitters: dict[str, type[Emitter]] = {}

    def register(self, name: str, emitter_class: type[Emitter]) -> None:
        """
        Register an emitter class.

        Args:
            name: Emitter name (used in CLI: --emitter <name>)
            emitter_class: Emitter class (must extend Emitter)

        Raises:
            EmitterError: If name already registered or class invalid
        """
        if name in self._emitters:
            raise EmitterError(
                f"Emitter '{name}' is already registered. Cannot register {emitter_class.__name__}."
            )

        if not issubclass(emitter_class, Emitter):
            raise EmitterError(f"Emitter class {emitter_class.__name__} must extend Emitter")

        self._emitters[name] = emitter_class

    def get(self, name: str) -> Emitter:
        """
        Get an emitter instance by name.

        Raises:
            EmitterError: If emitter not found
        """
        if name not in self._emitters:
            available = self.list_emitters()
            raise EmitterError(f"Emitter '{name}' not found. Available emitters: {available}")

        return self._emitters[name]()

    def list_emitters(self) -> list[str]:
        """List all registered emitter names, sorted."""
        return sorted(self._emitters)

    def discover(self) -> None:
        """
        Register the Emitter subclasses defined in this package's modules,
        under their ``name`` attribute.
        """
        import importlib
        import inspect
        from pathlib import Path

        package_dir = Path(__file__).parent
        for py_file in sorted(package_dir.glob("*.py")):
            if py_file.name.startswith("_") or py_file.stem == "base":
                continue

            try:
                module = importlib.import_module(f"{__name__}.{py_file.stem}")
            except ImportError as e:
                logger.warning("Skipping emitter module %s: %s", py_file.stem, e)
                continue

            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    issubclass(obj, Emitter)
                    and obj is not Emitter
                    and obj.__module__ == module.__name__
                    and obj.name
                    and obj.name not in self._emitters
                ):
                    self.register(obj.name, obj)


# Global registry instance
_registry: EmitterRegistry | None = None


def get_registry() -> EmitterRegistry:
    """
    Get the global emitter registry.

    Performs auto-discovery on first call.
    """
    global _registry
    if _registry is None:
        _registry = EmitterRegistry()
        _registry.discover()
    return _registry


def register_emitter(name: str, emitter_class: type[Emitter]) -> None:
    """Register an emitter in the global registry."""
    get_registry().register(name, emitter_class)


def get_emitter(name: str) -> Emitter:
    """
    Get an emitter instance by name.

    Raises:
        EmitterError: If emitter not found
    """
    return get_registry().get(name)


__all__ = [
    "Emitter",
    "EmitterCapabilities",
    "EmitResult",
    "EmitterRegistry",
    "EmitterError",
    "get_registry",
    "register_emitter",
    "get_emitter",
    "snake_case",
]
