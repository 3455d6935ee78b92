"""Run configuration assembled from defaults, an optional YAML file and CLI flags.

Precedence, lowest to highest: Constants defaults, config file, CLI flags.
The result is an immutable RunConfig handed to every step of a run.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional, Tuple

import yaml

from constants import Constants, OutputTargets
from errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Everything one resolution run needs to know."""

    starter_url: str = Constants.STARTER_URL
    boot_url: str = Constants.BOOT_URL
    insecure: bool = False
    type_id: str = Constants.DEFAULT_TYPE_ID
    boot_version: str = ""
    dependencies: Tuple[str, ...] = field(default_factory=tuple)
    output: str = OutputTargets.STDOUT.value
    verbose: bool = False
    timeout: float = Constants.REQUEST_TIMEOUT


_FIELD_NAMES = {f.name for f in fields(RunConfig)}


def _coerce(name: str, value: Any, path: str) -> Any:
    """Convert a YAML scalar/list to the RunConfig field type."""
    if name in ("insecure", "verbose"):
        if not isinstance(value, bool):
            raise ConfigError(path, f"'{name}' must be true or false")
        return value
    if name == "timeout":
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(path, "'timeout' must be a positive number")
        return float(value)
    if name == "dependencies":
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list) and all(isinstance(v, (str, int, float)) for v in value):
            return tuple(str(v) for v in value)
        raise ConfigError(path, "'dependencies' must be a string or a list of strings")
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(path, f"'{name}' must be a string")
    # YAML reads "boot_version: 3.1" as a float
    return str(value)


def load_config_file(path: str) -> Dict[str, Any]:
    """Load RunConfig overrides from a YAML (or JSON) file.

    Raises:
        ConfigError: If the file is missing, unreadable, not a mapping or has
            unknown keys.
    """
    if not os.path.isfile(path):
        raise ConfigError(path, "file not found")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(path, str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")
    unknown = sorted(str(k) for k in data if k not in _FIELD_NAMES)
    if unknown:
        raise ConfigError(path, "unknown keys: " + ", ".join(unknown))
    overrides = {name: _coerce(name, value, path) for name, value in data.items()}
    logger.debug("Loaded configuration overrides from %s: %s", path, sorted(overrides))
    return overrides


def build_config(args, base: Optional[RunConfig] = None) -> RunConfig:
    """Merge parsed CLI arguments over the config file over defaults."""
    config = base or RunConfig()
    config_path = getattr(args, "CONFIG", None)
    if config_path:
        config = replace(config, **load_config_file(config_path))

    cli: Dict[str, Any] = {}
    for name, dest in (
        ("starter_url", "STARTER_URL"),
        ("boot_url", "BOOT_URL"),
        ("insecure", "INSECURE"),
        ("type_id", "TYPE_ID"),
        ("boot_version", "BOOT_VERSION"),
        ("output", "OUTPUT"),
        ("verbose", "VERBOSE"),
        ("timeout", "TIMEOUT"),
    ):
        value = getattr(args, dest, None)
        if value is not None:
            cli[name] = value
    deps = getattr(args, "DEPENDENCIES", None)
    if deps:
        cli["dependencies"] = tuple(deps)
    return replace(config, **cli)
