"""Turn config file text into a mapping.

Config files are YAML documents (JSON is accepted as a subset). Nothing in
the file is executed; the only context available to it is an explicit,
read-only set of ``${name}`` bindings.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ParseError, SchemaError
from .utils import expand_placeholders


def parse(
    content: str,
    file_path: Union[str, Path],
    bindings: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ParseError.from_cause(file_path, exc) from exc

    if not isinstance(data, dict):
        raise SchemaError(f'Config file "{file_path}" did not return a mapping', file_path)
    for key in data:
        if not isinstance(key, str):
            raise SchemaError(
                f'Config file "{file_path}" has non-string top-level key {key!r}', file_path
            )

    if bindings:
        data = expand_placeholders(data, bindings)
    return data
