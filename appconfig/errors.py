from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ConfigError(Exception):
    """Base class for every configuration loading failure."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class ConfigIOError(ConfigError):
    """Config file could not be opened or read."""

    @classmethod
    def from_os_error(cls, path: PathLike, exc: OSError) -> "ConfigIOError":
        reason = exc.strerror or str(exc)
        return cls(f'Couldn\'t open config file "{path}": {reason}', path)


class ParseError(ConfigError):
    """Config content is not valid YAML (or not valid UTF-8)."""

    @classmethod
    def from_cause(cls, path: PathLike, cause: Exception) -> "ParseError":
        return cls(f'Couldn\'t load configuration from file "{path}": {cause}', path)


class SchemaError(ConfigError):
    """Parsed value is not a string-keyed mapping."""


class MissingConfigError(ConfigError):
    """Neither a config file, a mode file nor a default is available."""

    def __init__(self, path: PathLike):
        super().__init__(f'Config file "{path}" missing, maybe you need to create it?', path)
