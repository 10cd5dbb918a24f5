"""Config file path discovery.

The primary file comes from ``options.file``, the environment, or the
application identifier plus extension, in that order. A mode variant
``<stem>.<mode>.<ext>`` sits next to it and is only kept if it exists.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .options import ConfigOptions

_MODE_PATTERN = re.compile(r"^(.*)\.([^.]+)$")


@dataclass(frozen=True)
class ResolvedPaths:
    primary: Path
    mode_specific: Optional[Path] = None


def config_filename(
    options: ConfigOptions,
    env_config_path: Optional[str],
    app_identifier: str,
) -> str:
    if options.file:
        return options.file
    if env_config_path:
        return env_config_path
    return f"{app_identifier}.{options.ext}"


def mode_filename(filename: str, mode: str) -> Optional[str]:
    """Insert ``mode`` before the last extension of ``filename``, if it has one."""
    path = Path(filename)
    match = _MODE_PATTERN.match(path.name)
    if match is None:
        return None
    stem, ext = match.groups()
    return str(path.with_name(f"{stem}.{mode}.{ext}"))


def _absolute(filename: str, home: Union[str, Path]) -> Path:
    path = Path(filename)
    if path.is_absolute():
        return path
    return Path(home).absolute() / path


def resolve(
    options: ConfigOptions,
    env_config_path: Optional[str],
    app_identifier: str,
    home: Union[str, Path],
    mode: str,
) -> ResolvedPaths:
    filename = config_filename(options, env_config_path, app_identifier)
    primary = _absolute(filename, home)

    mode_specific = None
    mode_name = mode_filename(filename, mode) if mode else None
    if mode_name is not None:
        candidate = _absolute(mode_name, home)
        if candidate.exists():
            mode_specific = candidate
        else:
            logger.debug(f'Mode specific config file "{candidate}" not found, skipping.')

    return ResolvedPaths(primary=primary, mode_specific=mode_specific)
