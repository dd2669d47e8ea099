"""Resolve which runtimes of a family are installed on the host."""

import logging
import os
from typing import Any, Callable, List, Optional, Union

from ..errors import RuntimeNotFound
from ..utils.commands import is_command_available
from .classifier import classify
from .specs import get_candidates
from .types import ResolutionResult, RuntimeFamily

logger = logging.getLogger(__name__)

Probe = Callable[[str], bool]


class RuntimeResolver:
    """Partition a family's candidate runtimes into installed and missing.

    Every call re-probes the host, since tooling may be installed or removed
    between calls in a long-running session. The resolver keeps no state
    besides its probe, so one instance can be shared between threads.
    """

    def __init__(self, probe: Probe = is_command_available):
        """Initialize resolver.

        Args:
            probe: Returns True if an executable name is on the search path
        """
        self.probe = probe

    def resolve(self, family: RuntimeFamily) -> ResolutionResult:
        """Probe every candidate of a family, in priority order.

        All candidates are probed, even after the first hit, so callers get
        the full picture for diagnostics.

        Args:
            family: Runtime family to resolve

        Returns:
            ResolutionResult with both partitions in priority order

        Raises:
            UnsupportedFamily: If family is not a RuntimeFamily member
        """
        candidates = get_candidates(family)

        available: List[str] = []
        unavailable: List[str] = []
        for name in candidates:
            if self.probe(name):
                logger.debug("%s runtime %s: found", family.label, name)
                available.append(name)
            else:
                logger.debug("%s runtime %s: missing", family.label, name)
                unavailable.append(name)

        return ResolutionResult(
            family=family,
            available=tuple(available),
            unavailable=tuple(unavailable),
        )

    def detect(self, path: Union[str, "os.PathLike[str]"]) -> ResolutionResult:
        """Classify a file and resolve its family.

        Raises:
            UnknownFileType: If the extension is not recognized. Nothing is
                probed in that case.
        """
        return self.resolve(classify(path))

    def select(
        self,
        path: Union[str, "os.PathLike[str]"],
        config: Optional[Any] = None,  # ScriptrunConfig
    ) -> str:
        """Choose the runtime to execute a file with.

        Priority:
        1. The family's preferred runtime from config, if installed
        2. The highest priority installed candidate

        Args:
            path: Path of the script file
            config: Optional ScriptrunConfig with runtime preferences

        Returns:
            Executable name of the chosen runtime

        Raises:
            UnknownFileType: If the extension is not recognized
            RuntimeNotFound: If no candidate is installed
        """
        result = self.detect(path)

        preferred = self._preferred_runtime(result, config)
        if preferred:
            return preferred

        if result.best is None:
            raise RuntimeNotFound(result)

        logger.info("Using %s for %s", result.best, os.fspath(path))
        return result.best

    def _preferred_runtime(
        self,
        result: ResolutionResult,
        config: Optional[Any],
    ) -> Optional[str]:
        """Return the configured preference if it is installed."""
        if config is None:
            return None

        preferred = config.preferred.get(result.family)
        if not preferred:
            return None

        if preferred in result.available:
            logger.info("Using preferred %s runtime %s", result.family.label, preferred)
            return preferred

        if preferred in result.unavailable:
            logger.info(
                "Preferred %s runtime %s is not installed",
                result.family.label,
                preferred,
            )
        else:
            logger.warning(
                "Ignoring preferred %s runtime %s: not one of %s",
                result.family.label,
                preferred,
                ", ".join(get_candidates(result.family)),
            )
        return None


def detect_runtimes(
    path: Union[str, "os.PathLike[str]"],
    probe: Probe = is_command_available,
) -> ResolutionResult:
    """Resolve the installed runtimes for a file.

    Equivalent to ``RuntimeResolver(probe).resolve(classify(path))``.
    """
    return RuntimeResolver(probe).detect(path)


def select_runtime(
    path: Union[str, "os.PathLike[str]"],
    config: Optional[Any] = None,
    probe: Probe = is_command_available,
) -> str:
    """Choose the runtime to execute a file with.

    See RuntimeResolver.select.
    """
    return RuntimeResolver(probe).select(path, config)
