"""Data types for runtime resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RuntimeFamily(str, Enum):
    """Families of files that share a set of compatible runtimes.

    - TYPED_SCRIPT: TypeScript sources
    - SCRIPT: JavaScript sources
    - BINARY_MODULE: WebAssembly modules
    """

    TYPED_SCRIPT = "ts"
    SCRIPT = "js"
    BINARY_MODULE = "wasm"

    @property
    def label(self) -> str:
        """Human readable family name."""
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "RuntimeFamily":
        """Look a family up by value ("ts") or label ("typed-script").

        Raises:
            ValueError: If the name matches no family
        """
        for family in cls:
            if name in (family.value, family.label):
                return family
        valid = ", ".join(f"{f.value} ({f.label})" for f in cls)
        raise ValueError(f"Unknown runtime family '{name}'. Valid families: {valid}")


_LABELS = {
    RuntimeFamily.TYPED_SCRIPT: "typed-script",
    RuntimeFamily.SCRIPT: "script",
    RuntimeFamily.BINARY_MODULE: "binary-module",
}


@dataclass(frozen=True)
class ResolutionResult:
    """Candidates of one family split by whether they are installed.

    Attributes:
        family: Family the candidates belong to
        available: Installed candidates, in priority order
        unavailable: Missing candidates, in priority order
    """

    family: RuntimeFamily
    available: Tuple[str, ...] = ()
    unavailable: Tuple[str, ...] = ()

    @property
    def best(self) -> Optional[str]:
        """Highest priority installed candidate, if any."""
        return self.available[0] if self.available else None

    def __repr__(self) -> str:
        return (
            f"<ResolutionResult {self.family.label} "
            f"available={list(self.available)} unavailable={list(self.unavailable)}>"
        )
