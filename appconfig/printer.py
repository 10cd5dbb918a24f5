from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from .paths import ResolvedPaths


def format_paths(paths: ResolvedPaths) -> str:
    lines = ["Config files:"]

    def _format_entry(title: str, path) -> None:
        if path is None:
            lines.append(f"  - {title}: -")
        else:
            state = "present" if path.exists() else "missing"
            lines.append(f"  - {title}: {path} ({state})")

    _format_entry("primary", paths.primary)
    _format_entry("mode", paths.mode_specific)
    return "\n".join(lines)


def format_config(config: Dict[str, Any], fmt: str = "yaml") -> str:
    if fmt == "json":
        return json.dumps(config, indent=2, ensure_ascii=False, sort_keys=True, default=str)
    return yaml.safe_dump(config, default_flow_style=False, allow_unicode=True, sort_keys=True).rstrip("\n")
