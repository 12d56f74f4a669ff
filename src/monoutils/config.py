"""
Demo configuration.

The web-app demo runs against a fixed set of sample inputs. Those inputs
can be overridden from a YAML file:

    names:
      - john doe
      - jane smith
    numbers: [1, 2, 2, 3]
    sum_args: [1, 10]
    chunk_size: 2

Missing keys fall back to the defaults below. Unknown keys are ignored
with a UserWarning.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from numbers import Number
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .errors import ConfigError


logger = logging.getLogger(__name__)


DEFAULT_NAMES = ["john doe", "jane smith", "bob johnson", "alice brown"]
DEFAULT_NUMBERS = [1, 2, 2, 3, 4, 4, 5]
DEFAULT_SUM_ARGS = [1, 10]
DEFAULT_CHUNK_SIZE = 2


@dataclass
class DemoConfig:
    """
    Inputs for one demo run.

    Properties:
        names: Text values fed to capitalize / kebab_case / chunk
        numbers: Numbers (with duplicates) fed to unique
        sum_args: Positional arguments for sum
        chunk_size: Chunk length for chunk(names, chunk_size)
    """

    names: List[str] = field(default_factory=lambda: list(DEFAULT_NAMES))
    numbers: List[Number] = field(default_factory=lambda: list(DEFAULT_NUMBERS))
    sum_args: List[Number] = field(default_factory=lambda: list(DEFAULT_SUM_ARGS))
    chunk_size: int = DEFAULT_CHUNK_SIZE


_KNOWN_KEYS = ("names", "numbers", "sum_args", "chunk_size")


def _require_list(d: Dict[str, Any], key: str, item_type: type, type_name: str) -> List[Any]:
    value = d[key]
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    for item in value:
        if isinstance(item, bool) or not isinstance(item, item_type):
            raise ConfigError(f"'{key}' must contain only {type_name} values, got {item!r}")
    return list(value)


def config_from_dict(d: Dict[str, Any]) -> DemoConfig:
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")

    unknown = sorted(k for k in d if k not in _KNOWN_KEYS)
    if unknown:
        warnings.warn(f"Ignoring unknown config keys: {unknown}", UserWarning)

    config = DemoConfig()
    if "names" in d:
        config.names = _require_list(d, "names", str, "string")
    if "numbers" in d:
        config.numbers = _require_list(d, "numbers", Number, "numeric")
    if "sum_args" in d:
        config.sum_args = _require_list(d, "sum_args", Number, "numeric")
    if "chunk_size" in d:
        size = d["chunk_size"]
        if isinstance(size, bool) or not isinstance(size, int):
            raise ConfigError(f"'chunk_size' must be an integer, got {size!r}")
        config.chunk_size = size
    return config


def config_to_dict(config: DemoConfig) -> Dict[str, Any]:
    return {
        "names": list(config.names),
        "numbers": list(config.numbers),
        "sum_args": list(config.sum_args),
        "chunk_size": config.chunk_size,
    }


def load_config(path: Union[str, Path]) -> DemoConfig:
    """
    Load a DemoConfig from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing or unreadable, is not UTF-8,
                     is not valid YAML, or does not describe a valid config
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    logger.debug("Loading demo config from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return DemoConfig()
    return config_from_dict(data)


__all__ = ["DemoConfig", "config_from_dict", "config_to_dict", "load_config"]
