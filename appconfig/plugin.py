"""Register layered configuration on an application.

Layers, lowest to highest precedence: ``options.default``, the primary
config file, the mode specific config file. The merged result is written
into ``app.config`` in place, so earlier references to it see the update.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from .bindings import FrozenMapping, app_bindings
from .environment import ENV_HOME, ENV_MODE, ConfigSource
from .errors import MissingConfigError
from .loader import read_text
from .options import ConfigOptions
from .parser import parse as parse_content
from .paths import ResolvedPaths, resolve
from .utils import copy_layer, overlay

DEFAULT_MODE = "development"


@dataclass
class Application:
    """Minimal host application: a home directory, a mode and a shared config."""

    home: Path = field(default_factory=Path.cwd)
    mode: str = DEFAULT_MODE
    config: Optional[Dict[str, Any]] = None
    defaults: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.home = Path(self.home).absolute()

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None, **kwargs: Any) -> "Application":
        environ = os.environ if environ is None else environ
        kwargs.setdefault("home", environ.get(ENV_HOME) or Path.cwd())
        kwargs.setdefault("mode", environ.get(ENV_MODE) or DEFAULT_MODE)
        return cls(**kwargs)


class ConfigPlugin:
    """Loads, parses and registers application config.

    Subclasses may override :meth:`parse` to support another content syntax.
    """

    def __init__(self, source: Optional[ConfigSource] = None):
        self.source = source if source is not None else ConfigSource.from_environ()

    def load(self, file_path: Union[str, Path], options: Any = None, app: Any = None) -> Dict[str, Any]:
        return self.parse(read_text(file_path), file_path, options, app)

    def parse(self, content: str, file_path: Union[str, Path], options: Any = None, app: Any = None) -> Dict[str, Any]:
        bindings = self.bindings(app) if app is not None else None
        return parse_content(content, file_path, bindings)

    def bindings(self, app: Any) -> FrozenMapping:
        return app_bindings(app, moniker=self.source.app_identifier())

    def resolve(self, app: Any, options: Any = None) -> ResolvedPaths:
        options = ConfigOptions.coerce(options)
        return resolve(
            options,
            self.source.config_path,
            self.source.app_identifier(),
            app.home,
            app.mode,
        )

    def register(self, app: Any, options: Any = None) -> Dict[str, Any]:
        options = ConfigOptions.coerce(options)
        paths = self.resolve(app, options)

        config: Dict[str, Any] = {}
        layers: List[str] = []
        if paths.primary.exists():
            config = self.load(paths.primary, options, app)
            layers.append(str(paths.primary))
        elif options.default is None and paths.mode_specific is None:
            raise MissingConfigError(paths.primary)

        if paths.mode_specific is not None:
            config = overlay(config, self.load(paths.mode_specific, options, app))
            layers.append(str(paths.mode_specific))

        if options.default is not None:
            config = overlay(copy_layer(options.default), config)
            layers.insert(0, "default")

        current = getattr(app, "config", None)
        if current is None:
            current = {}
            app.config = current
        current.update(config)

        defaults = getattr(app, "defaults", None)
        if isinstance(defaults, dict):
            defaults["config"] = current

        logger.debug(f"Config merged from {layers}: {len(config)} keys")
        return current


def register(
    app: Any,
    options: Any = None,
    source: Optional[ConfigSource] = None,
) -> Dict[str, Any]:
    return ConfigPlugin(source).register(app, options)
