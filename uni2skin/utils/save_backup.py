"""
Save file backup utilities for uni2skin
"""
from __future__ import annotations

import os
import shutil
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from uni2skin.utils.constants import BACKUP_NAME_INFIX, BACKUP_WINDOW_MS
from uni2skin.utils.exceptions import BackupError
from uni2skin.utils.logging_config import get_logger

logger = get_logger(__name__)


def now_ms() -> int:
    """Current unix time in milliseconds"""
    return time.time_ns() // 1_000_000


def _created_ms(stat: os.stat_result) -> int:
    # st_birthtime is missing on most Linux filesystems; backups are written
    # fresh (never with copied metadata) so mtime is their creation time there.
    created = getattr(stat, "st_birthtime", None)
    if created is None:
        created = stat.st_mtime
    return int(created * 1000)


class SaveBackupManager:
    """Creates time-gated backups of a save file before it is modified"""

    def __init__(self, window_ms: int = BACKUP_WINDOW_MS) -> None:
        self.window_ms = window_ms

    @staticmethod
    def backup_prefix(save_path: str | Path) -> str:
        return f"{Path(save_path).name}{BACKUP_NAME_INFIX}"

    def _iter_backups(self, save_path: str | Path):
        save_path = Path(save_path)
        prefix = self.backup_prefix(save_path)
        for file_path in sorted(save_path.parent.iterdir()):
            if file_path.name.startswith(prefix) and file_path.is_file():
                yield file_path

    def latest_backup_timestamp(self, save_path: str | Path) -> int:
        """
        Get the creation time of the newest backup of a save file.

        Returns:
            Epoch milliseconds of the newest backup, or 0 if none exist
        """
        latest = 0
        for file_path in self._iter_backups(save_path):
            created = _created_ms(file_path.stat())
            logger.debug(f"Found backup {file_path.name} (created {created})")
            latest = max(latest, created)
        return latest

    def maybe_backup(self, save_path: str | Path, now: int | None = None) -> Path | None:
        """
        Back up the save file unless a backup exists inside the window.

        Args:
            save_path: Path to the save file
            now: Current epoch milliseconds (defaults to the system clock)

        Returns:
            Path to the new backup, or None if a recent backup already exists

        Raises:
            BackupError: If the directory scan or the copy fails
        """
        save_path = Path(save_path)
        if now is None:
            now = now_ms()

        try:
            latest = self.latest_backup_timestamp(save_path)
        except OSError as e:
            raise BackupError(f"Failed to scan for backups of {save_path}: {e}") from e

        elapsed = now - latest
        if elapsed <= self.window_ms:
            logger.debug(
                f"Skipping backup: last backup {elapsed} ms ago (window {self.window_ms} ms)"
            )
            return None

        backup_path = save_path.with_name(f"{save_path.name}{BACKUP_NAME_INFIX}{now}")
        try:
            # copyfile rather than copy2: the backup's timestamps must be its own
            _ = shutil.copyfile(save_path, backup_path)
        except OSError as e:
            raise BackupError(f"Failed to create backup of {save_path}: {e}") from e

        logger.info(f"Created backup: {backup_path.name}")
        return backup_path

    def list_backups(self, save_path: str | Path) -> list[dict[str, Any]]:
        """
        List all backups of a save file.

        Returns:
            List of backup info dicts (path, filename, size, created_ms, date),
            newest first
        """
        backups = []
        for file_path in self._iter_backups(save_path):
            stat = file_path.stat()
            created = _created_ms(stat)
            backups.append(
                {
                    "path": str(file_path),
                    "filename": file_path.name,
                    "size": stat.st_size,
                    "created_ms": created,
                    "date": datetime.fromtimestamp(created / 1000, timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S"
                    ),
                }
            )

        backups.sort(key=lambda x: x["created_ms"], reverse=True)
        return backups
