from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict


class FrozenMapping(Mapping[str, Any]):
    """Immutable mapping handed to config content as its view of the app."""

    def __init__(self, data: Dict[str, Any]):
        self._data = {key: _freeze(value) for key, value in data.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._data)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"FrozenMapping({self._data!r})"


def _freeze(value: Any) -> Any:
    if isinstance(value, FrozenMapping):
        return value
    if isinstance(value, dict):
        return FrozenMapping(value)
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def app_bindings(app: Any, moniker: str | None = None) -> FrozenMapping:
    """Expose ``home``, ``mode`` and ``moniker`` of ``app`` for ${...} placeholders."""
    data: Dict[str, Any] = {
        "home": str(getattr(app, "home", "")),
        "mode": getattr(app, "mode", ""),
    }
    if moniker is not None:
        data["moniker"] = moniker
    return FrozenMapping(data)
