from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from .errors import ConfigIOError, ParseError
from .parser import parse


def read_text(file_path: Union[str, Path]) -> str:
    """Slurp a config file as UTF-8 text."""
    logger.debug(f'Reading config file "{file_path}".')
    try:
        with open(file_path, "r", encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise ParseError.from_cause(file_path, exc) from exc
    except OSError as exc:
        raise ConfigIOError.from_os_error(file_path, exc) from exc


def load(
    file_path: Union[str, Path],
    bindings: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return parse(read_text(file_path), file_path, bindings)
