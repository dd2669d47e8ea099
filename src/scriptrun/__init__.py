"""Pick a runtime for JavaScript, TypeScript and WebAssembly files."""

from .errors import (
    ConfigError,
    RuntimeNotFound,
    ScriptrunError,
    UnknownFileType,
    UnsupportedFamily,
)
from .runtime import (
    ResolutionResult,
    RuntimeFamily,
    RuntimeResolver,
    classify,
    detect_runtimes,
    select_runtime,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ResolutionResult",
    "RuntimeFamily",
    "RuntimeNotFound",
    "RuntimeResolver",
    "ScriptrunError",
    "UnknownFileType",
    "UnsupportedFamily",
    "classify",
    "detect_runtimes",
    "select_runtime",
]
