"""Configuration loading helpers for the partner directory."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import Settings

SETTINGS_FILENAME = "settings.yaml"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _write_file(path: Path, payload: dict) -> None:
    with path.open("w", encoding="utf-8") as stream:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, stream, allow_unicode=True, sort_keys=False)
        else:
            json.dump(payload, stream, indent=2, ensure_ascii=False)


@dataclass(slots=True)
class ConfigLocator:
    """Resolve important paths from project root."""

    project_root: Path | None = None
    data_dir: Path | None = None
    logs_dir: Path | None = None

    def __post_init__(self) -> None:
        env_root = os.environ.get("PARTNER_DIRECTORY_HOME")
        if env_root:
            root = Path(env_root).expanduser().resolve()
        else:
            root = (self.project_root or Path(__file__).resolve().parents[2]).resolve()
        self.project_root = root
        self.data_dir = (root / "data").resolve()
        self.logs_dir = (root / "logs").resolve()
        self.ensure_directories()

    def ensure_directories(self) -> None:
        for directory in (self.data_dir, self.logs_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def settings_path(self) -> Path:
        return self.data_dir / SETTINGS_FILENAME


class ConfigRepository:
    """Repository encapsulating settings IO and schema validation."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()
        self._cache: Settings | None = None

    def load_settings(self) -> Settings:
        if self._cache is not None:
            return self._cache
        path = self.locator.settings_path()
        if path.exists():
            settings = Settings.model_validate(_read_file(path))
        else:
            settings = Settings()
            self.save_settings(settings)
        self._cache = settings
        return settings

    def save_settings(self, settings: Settings) -> Path:
        path = self.locator.settings_path()
        _write_file(path, settings.model_dump(mode="json"))
        self._cache = settings
        return path

    def reload(self) -> Settings:
        self._cache = None
        return self.load_settings()


__all__ = ["ConfigLocator", "ConfigRepository", "SETTINGS_FILENAME"]
