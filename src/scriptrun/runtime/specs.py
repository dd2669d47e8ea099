"""Declarative runtime tables for every supported file family.

This is DATA, not code. To support a new runtime, add it to its family's
table at the position that reflects its preference.
"""

from typing import Dict, Tuple

from ..errors import UnsupportedFamily
from .types import RuntimeFamily

# Checked in order, first match wins
FILE_EXTENSIONS: Tuple[Tuple[Tuple[str, ...], RuntimeFamily], ...] = (
    ((".ts", ".tsx", ".mts", ".cts"), RuntimeFamily.TYPED_SCRIPT),
    ((".wasm", ".wat"), RuntimeFamily.BINARY_MODULE),
    ((".js", ".mjs", ".cjs"), RuntimeFamily.SCRIPT),
)

# Candidate runtimes per family, most preferred first
RUNTIME_CANDIDATES: Dict[RuntimeFamily, Tuple[str, ...]] = {
    RuntimeFamily.TYPED_SCRIPT: ("bun", "deno", "tsx", "ts-node", "nix-shell"),
    RuntimeFamily.BINARY_MODULE: ("wasmer", "wasmtime", "nix-shell"),
    RuntimeFamily.SCRIPT: ("bun", "node", "deno", "nix-shell"),
}


def get_candidates(family: RuntimeFamily) -> Tuple[str, ...]:
    """Get the priority-ordered candidate runtimes for a family.

    Args:
        family: Runtime family

    Returns:
        Candidate executable names, most preferred first

    Raises:
        UnsupportedFamily: If family is not a RuntimeFamily member
    """
    if not isinstance(family, RuntimeFamily):
        raise UnsupportedFamily(family)

    return RUNTIME_CANDIDATES[family]
