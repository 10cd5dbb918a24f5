from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict

import re

_PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)\}")
_SCRIPT_SUFFIX_PATTERN = re.compile(r"\.(?:pl|t|py)$", re.IGNORECASE)
_CAMEL_PART_PATTERN = re.compile(r"([A-Z][^A-Z]*)")
_NAMESPACE_PATTERN = re.compile(r"::|\.")


def decamelize(name: str) -> str:
    """Turn ``MyApp::Admin`` (or ``MyApp.Admin``) into ``my_app-admin``.

    Names that do not start with an upper-case letter are returned as-is.
    """
    if not name or not name[0].isupper():
        return name
    parts = []
    for namespace in _NAMESPACE_PATTERN.split(name):
        words = [word.lower() for word in _CAMEL_PART_PATTERN.split(namespace) if word]
        parts.append("_".join(words))
    return "-".join(parts)


def strip_script_suffix(name: str) -> str:
    return _SCRIPT_SUFFIX_PATTERN.sub("", name)


def overlay(*layers: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow-merge layers left to right; later layers win per top-level key."""
    result: Dict[str, Any] = {}
    for layer in layers:
        result.update(layer)
    return result


def expand_placeholders(data: Any, bindings: Mapping[str, Any]) -> Any:
    """Recursively substitute ${name} placeholders in string values.

    Unknown names are left untouched.
    """
    if isinstance(data, str):
        def _replace(match: re.Match[str]) -> str:
            name = match.group(1).strip()
            if name not in bindings:
                return match.group(0)
            return str(bindings[name])

        return _PLACEHOLDER_PATTERN.sub(_replace, data)
    if isinstance(data, list):
        return [expand_placeholders(item, bindings) for item in data]
    if isinstance(data, dict):
        return {key: expand_placeholders(value, bindings) for key, value in data.items()}
    return data


def copy_layer(layer: Mapping[str, Any]) -> Dict[str, Any]:
    return deepcopy(dict(layer))
