"""Configuration file parser for scriptrun."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from ..errors import ConfigError
from ..runtime.types import RuntimeFamily

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".scriptrun.toml"

# Families shown by `scriptrun doctor` unless configured otherwise
DEFAULT_REPORT_FAMILIES = [RuntimeFamily.SCRIPT, RuntimeFamily.TYPED_SCRIPT]

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ScriptrunConfig:
    """Complete scriptrun configuration."""

    verbose: bool = False
    color: bool = True
    report_families: List[RuntimeFamily] = field(
        default_factory=lambda: list(DEFAULT_REPORT_FAMILIES)
    )
    # Preferred runtime per family, used when installed
    preferred: Dict[RuntimeFamily, str] = field(default_factory=dict)

    # Project root the config was loaded from
    project_root: Path = field(default_factory=Path.cwd)

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> ScriptrunConfig:
        """Override settings from environment variables.

        Supports:
            SCRIPTRUN_VERBOSE - enable debug logging ("1", "true", ...)
            NO_COLOR - disable colored output when set to anything
        """
        env = os.environ if environ is None else environ

        verbose = env.get("SCRIPTRUN_VERBOSE")
        if verbose is not None:
            self.verbose = verbose.strip().lower() in _TRUE_VALUES

        if env.get("NO_COLOR"):
            self.color = False

        return self


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .scriptrun.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .scriptrun.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file
    return None


def load_config(project_path: Path) -> ScriptrunConfig:
    """Load configuration from .scriptrun.toml or use defaults.

    Args:
        project_path: Root path of the project

    Returns:
        ScriptrunConfig with loaded or default configuration

    Raises:
        ConfigError: If the file parses but holds invalid values
    """
    config = ScriptrunConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if not config_file:
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        # If TOML parsing fails, return defaults
        logger.warning("Ignoring %s: %s", config_file, e)
        return config

    if "scriptrun" in data:
        _parse_general(config, _table(data, "scriptrun"))

    # [runtime.ts] style sections become nested dicts
    runtime_section = _table(data, "runtime")
    for name, family_data in runtime_section.items():
        family = _parse_family(name, "runtime")
        if not isinstance(family_data, dict):
            raise ConfigError(f"[runtime.{name}] must be a table")
        prefer = family_data.get("prefer")
        if prefer is None:
            continue
        if not isinstance(prefer, str):
            raise ConfigError(f"runtime.{name}.prefer must be a string")
        config.preferred[family] = prefer

    return config


def load_effective_config(project_path: Optional[Path] = None) -> ScriptrunConfig:
    """Load .scriptrun.toml, then apply environment overrides.

    A .env file next to .scriptrun.toml is loaded first, without replacing
    variables that are already set.
    """
    project_root = Path(project_path) if project_path else Path.cwd()
    load_dotenv(project_root / ".env")
    config = load_config(project_root)
    return config.apply_env()


def _parse_general(config: ScriptrunConfig, general: Dict[str, Any]) -> None:
    config.verbose = _bool(general, "verbose", config.verbose)
    config.color = _bool(general, "color", config.color)

    families = general.get("report_families")
    if families is not None:
        if not isinstance(families, list):
            raise ConfigError("scriptrun.report_families must be a list")
        config.report_families = [
            _parse_family(name, "scriptrun.report_families") for name in families
        ]


def _parse_family(name: Any, where: str) -> RuntimeFamily:
    if not isinstance(name, str):
        raise ConfigError(f"{where}: expected a family name, got {name!r}")
    try:
        return RuntimeFamily.parse(name)
    except ValueError as e:
        raise ConfigError(f"{where}: {e}") from e


def _table(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def _bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false")
    return value
