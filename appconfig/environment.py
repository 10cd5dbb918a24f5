from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .utils import decamelize, strip_script_suffix

ENV_CONFIG = "APPCONFIG_CONFIG"
ENV_APP = "APPCONFIG_APP"
ENV_EXE = "APPCONFIG_EXE"
ENV_HOME = "APPCONFIG_HOME"
ENV_MODE = "APPCONFIG_MODE"

FALLBACK_IDENTIFIER = "app"


@dataclass(frozen=True)
class ConfigSource:
    """Process-level inputs to config discovery, captured once."""

    config_path: Optional[str] = None
    app_class: Optional[str] = None
    executable: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ConfigSource":
        environ = os.environ if environ is None else environ
        executable = environ.get(ENV_EXE) or (sys.argv[0] if sys.argv else None)
        return cls(
            config_path=environ.get(ENV_CONFIG) or None,
            app_class=environ.get(ENV_APP) or None,
            executable=executable or None,
        )

    def app_identifier(self) -> str:
        if self.app_class:
            name = decamelize(self.app_class)
        elif self.executable:
            name = os.path.basename(self.executable)
        else:
            name = ""
        return strip_script_suffix(name) or FALLBACK_IDENTIFIER
