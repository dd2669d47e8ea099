"""Runtime availability report shown by `scriptrun doctor`."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .config import ScriptrunConfig
from .runtime import ResolutionResult, RuntimeFamily, RuntimeResolver
from .utils.commands import is_command_available

# ANSI SGR: dim + strikethrough, then reset
_STRIKE = "\x1b[2;9m"
_RESET = "\x1b[0m"


def build_report(
    config: ScriptrunConfig,
    families: Optional[Sequence[RuntimeFamily]] = None,
    probe=is_command_available,
) -> List[ResolutionResult]:
    """Resolve every family that belongs in the report.

    Args:
        config: Effective configuration
        families: Families to report, defaults to config.report_families
        probe: Executable lookup used by the resolver

    Returns:
        One ResolutionResult per family, in report order
    """
    resolver = RuntimeResolver(probe)
    if families is None:
        families = config.report_families
    return [resolver.resolve(family) for family in families]


def format_line(result: ResolutionResult, color: bool = True) -> str:
    """Render one family: installed runtimes, then the missing ones struck out."""
    parts = [" ".join(result.available) if result.available else "(none)"]

    if result.unavailable:
        missing = " ".join(result.unavailable)
        if color:
            parts.append(f"{_STRIKE}{missing}{_RESET}")
        else:
            parts.append(f"~{missing}~")

    return f"{result.family.label}: {' '.join(parts)}"


def format_report(results: Iterable[ResolutionResult], color: bool = True) -> List[str]:
    return [format_line(result, color=color) for result in results]
