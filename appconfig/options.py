from __future__ import annotations

from collections.abc import Mapping
from os import PathLike, fspath
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import SchemaError

DEFAULT_EXT = "conf"


class ConfigOptions(BaseModel):
    """Options accepted by ``register``.

    ``file`` overrides config file discovery, ``ext`` is the extension used
    for derived file names and ``default`` is the lowest-precedence layer.
    """

    model_config = ConfigDict(extra="ignore")

    file: Optional[str] = None
    ext: str = DEFAULT_EXT
    default: Optional[Dict[str, Any]] = None

    @field_validator("file", mode="before")
    @classmethod
    def _normalize_file(cls, value: Any) -> Any:
        if isinstance(value, PathLike):
            value = fspath(value)
        return value or None

    @field_validator("ext", mode="before")
    @classmethod
    def _normalize_ext(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_EXT
        if isinstance(value, str):
            return value.strip().lstrip(".") or DEFAULT_EXT
        return value

    @classmethod
    def coerce(cls, options: Any = None) -> "ConfigOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise SchemaError(f"Config options must be a mapping, got {type(options).__name__}")

        unknown = sorted(str(key) for key in options if key not in cls.model_fields)
        if unknown:
            logger.warning(f"Ignoring unknown config options: {unknown}")

        default = options.get("default")
        if default is not None and not isinstance(default, Mapping):
            raise SchemaError(
                f"Config option 'default' must be a mapping, got {type(default).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise SchemaError(f"Invalid config options: {exc}") from exc
