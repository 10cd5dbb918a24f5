"""Layered application config: defaults, a config file and a mode file."""

from .environment import ConfigSource  # noqa: F401
from .errors import (  # noqa: F401
    ConfigError,
    ConfigIOError,
    MissingConfigError,
    ParseError,
    SchemaError,
)
from .loader import load  # noqa: F401
from .options import ConfigOptions  # noqa: F401
from .parser import parse  # noqa: F401
from .paths import ResolvedPaths, resolve  # noqa: F401
from .plugin import Application, ConfigPlugin, register  # noqa: F401

__version__ = "0.1.0"
