"""
Settings manager for uni2skin
Loads user preferences; the file is edited by hand
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from uni2skin.utils.constants import BACKUP_WINDOW_DAYS, PROGRAM_NAME
from uni2skin.utils.logging_config import get_logger

logger = get_logger(__name__)


class SettingsManager:
    """Read-only access to the user's settings file"""

    def __init__(self, settings_file: str | Path | None = None, app_name: str = PROGRAM_NAME):
        self.app_name = app_name
        self.settings_file = Path(settings_file) if settings_file else self._get_settings_path()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get the appropriate settings file for the platform"""
        if os.name == "nt":  # Windows
            base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
            settings_dir = base / self.app_name
        else:  # Linux/Mac
            base = Path(os.path.expanduser("~"))
            settings_dir = base / f".{self.app_name}"
        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file, falling back to defaults"""
        settings = self._get_default_settings()
        if not self.settings_file.exists():
            return settings

        try:
            with open(self.settings_file) as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
            return settings

        if isinstance(stored, dict):
            settings.update(stored)
        else:
            logger.warning(f"Ignoring settings file {self.settings_file}: not a JSON object")
        return settings

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "log_level": "INFO",
            "log_file": None,
            "characters_file": None,
            "backup_window_days": BACKUP_WINDOW_DAYS,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value, dotted keys reach into nested dicts"""
        value = self.settings
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_backup_window_days(self) -> int:
        """Get the backup window in days (at least 0)"""
        try:
            return max(0, int(self.get("backup_window_days", BACKUP_WINDOW_DAYS)))
        except (TypeError, ValueError):
            return BACKUP_WINDOW_DAYS

