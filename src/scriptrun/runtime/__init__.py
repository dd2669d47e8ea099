"""Runtime resolution for script files (JavaScript, TypeScript, WebAssembly)."""

from .classifier import classify
from .resolver import RuntimeResolver, detect_runtimes, select_runtime
from .specs import FILE_EXTENSIONS, RUNTIME_CANDIDATES, get_candidates
from .types import ResolutionResult, RuntimeFamily

__all__ = [
    "FILE_EXTENSIONS",
    "RUNTIME_CANDIDATES",
    "ResolutionResult",
    "RuntimeFamily",
    "RuntimeResolver",
    "classify",
    "detect_runtimes",
    "get_candidates",
    "select_runtime",
]
