"""Exceptions raised by scriptrun."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .runtime.types import ResolutionResult


class ScriptrunError(Exception):
    """Base class for all scriptrun errors."""


class UnknownFileType(ScriptrunError, ValueError):
    """Raised when a path's extension maps to no runtime family."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unknown file type: {path}")


class UnsupportedFamily(ScriptrunError, ValueError):
    """Raised when a value that is not a RuntimeFamily reaches the resolver."""

    def __init__(self, family: Any):
        self.family = family
        super().__init__(f"Unsupported runtime family: {family!r}")


class RuntimeNotFound(ScriptrunError, RuntimeError):
    """Raised when none of a family's candidates is installed."""

    def __init__(self, result: ResolutionResult):
        self.result = result
        tried = ", ".join(result.unavailable)
        super().__init__(
            f"No {result.family.label} runtime found.\n\n"
            f"Tried: {tried}\n\n"
            f"Install one of them and make sure it is on PATH."
        )


class ConfigError(ScriptrunError):
    """Raised when .scriptrun.toml holds invalid values."""
