"""Run configuration.

Settings are read from a YAML file. Other YAML files can be pulled in with
the !include tag, resolved relative to the including file:

    suites: !include suites.yaml
    exclude:
      - Slow
    fail_fast: false
    log_level: DEBUG
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


class IncludeLoader(yaml.SafeLoader):
    """YAML loader that supports !include directive."""

    def __init__(self, stream):
        name = getattr(stream, "name", None)
        self._root = Path(name).parent if isinstance(name, (str, os.PathLike)) else Path.cwd()
        super().__init__(stream)


def include_constructor(loader: IncludeLoader, node: yaml.Node) -> Any:
    """Construct included YAML file."""
    filepath = loader._root / loader.construct_scalar(node)
    try:
        with open(filepath) as f:
            return yaml.load(f, IncludeLoader)
    except OSError as e:
        raise ConfigError(f"Cannot include {filepath}: {e}") from e


# Register the !include constructor
IncludeLoader.add_constructor("!include", include_constructor)


@dataclass
class RunConfig:
    """Settings for a run over a suite registry."""

    suites: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    fail_fast: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """
        Build a config from parsed YAML.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

        for key in ("suites", "exclude"):
            value = data.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"'{key}' must be a list of suite names")

        if not isinstance(data.get("fail_fast", False), bool):
            raise ConfigError("'fail_fast' must be a boolean")

        log_level = data.get("log_level", "INFO")
        if not isinstance(log_level, str) or not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid log level: {log_level!r}")

        return cls(
            suites=list(data.get("suites", [])),
            exclude=list(data.get("exclude", [])),
            fail_fast=data.get("fail_fast", False),
            log_level=log_level.upper(),
        )


def load_config(path: Union[str, Path]) -> RunConfig:
    """
    Load a RunConfig from a YAML file with !include support.

    Args:
        path: Path to the config file

    Returns:
        Parsed RunConfig (defaults if the file is empty)

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.load(f, IncludeLoader)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    logger.debug("Loaded run config from %s", path)
    return RunConfig.from_dict(data or {})


def configure_logging(level: str = "INFO") -> None:
    """Send runtime log records to stderr at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
