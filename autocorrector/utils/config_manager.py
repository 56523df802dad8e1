# config_manager.py - JSON settings for the CLI/web shells

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from autocorrector.core.errors import ConfigError

DEFAULT_PATH = "autocorrect.json"

DEFAULTS: Dict[str, Any] = {
    "data": [],  # corpus files for the REPL
    "prefix": False,
    "whitespace": False,
    "led": 0,
    "port": 4567,
    "default_corpus": "data/sample_corpus.txt",  # corpus rebuilt by /setflags
}


class Config:
    """
    Shell defaults, optionally overridden from a JSON file.
    Missing file -> defaults. Malformed file -> ConfigError.
    Nothing is written until save() is called.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_PATH
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self.data["data"] = list(DEFAULTS["data"])
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"cannot read settings file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"settings file {self.path} must hold a JSON object")
        for k, v in loaded.items():
            self.set(k, v, persist=False)

    def save(self) -> None:
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, val: Any, persist: bool = True) -> None:
        """Set a known key, coercing to the type of its default."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        if persist:
            self.save()

    def show(self, console: Optional[Console] = None) -> None:
        table = Table(title="Settings")
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)


def _coerce(key: str, val: Any) -> Any:
    kind = type(DEFAULTS[key])
    try:
        if kind is bool:
            if isinstance(val, str):
                return val.strip().lower() in ("1", "true", "yes", "on")
            return bool(val)
        if kind is list:
            return _as_list(val)
        return kind(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad value for {key}: {val!r}") from e


def _as_list(val: Any) -> List[str]:
    if isinstance(val, str):
        return [p.strip() for p in val.split(",") if p.strip()]
    return [str(p) for p in val]
