"""
Skin export and import for uni2skin

Moves one palette between a SYS-DATA save file and a 6-byte skin file.
"""
from __future__ import annotations

from pathlib import Path

from uni2skin.core import palette_codec
from uni2skin.core.character_registry import CharacterRegistry
from uni2skin.core.offsets import offset_for
from uni2skin.core.save_validator import SaveFileValidator, check_palette_range
from uni2skin.utils.constants import (
    MAX_USER_SLOT,
    MIN_USER_SLOT,
    PALETTE_RECORD_SIZE,
    SKIN_FILE_SIZE,
)
from uni2skin.utils.exceptions import MalformedPaletteError, SlotOutOfRangeError
from uni2skin.utils.logging_config import get_logger
from uni2skin.utils.save_backup import SaveBackupManager

logger = get_logger(__name__)


def validate_slot(slot: int) -> int:
    """
    Convert a 1-based user slot into the 0-based slot index.

    Raises:
        SlotOutOfRangeError: If the slot is not between 1 and 5
    """
    if not MIN_USER_SLOT <= slot <= MAX_USER_SLOT:
        raise SlotOutOfRangeError(slot, MIN_USER_SLOT, MAX_USER_SLOT)
    return slot - MIN_USER_SLOT


def read_skin(skin_path: str | Path) -> palette_codec.Palette:
    """
    Read a skin file as a palette.

    Raises:
        MalformedPaletteError: If the file is not exactly 6 bytes
        PaletteOutOfRangeError: If a value is above 39
    """
    data = Path(skin_path).read_bytes()
    if len(data) != SKIN_FILE_SIZE:
        raise MalformedPaletteError(
            f"Skin file {skin_path} does not have correct length "
            f"(expected: {SKIN_FILE_SIZE}, actual: {len(data)})"
        )
    palette = tuple(data)
    check_palette_range(palette, f"skin file {skin_path}")
    return palette


class SkinTransfer:
    """Exports and imports character skins"""

    def __init__(
        self,
        registry: CharacterRegistry,
        backup_manager: SaveBackupManager | None = None,
    ) -> None:
        self.registry = registry
        self.validator = SaveFileValidator(registry)
        self.backup_manager = backup_manager or SaveBackupManager()

    def export_skin(
        self,
        save_path: str | Path,
        character: str,
        slot: int,
        skin_path: str | Path,
    ) -> palette_codec.Palette:
        """
        Write one palette slot of a save file out as a skin file.

        Args:
            save_path: SYS-DATA save file
            character: Character name (any case)
            slot: Palette slot, 1-5
            skin_path: Destination skin file; missing directories are created

        Returns:
            The exported palette
        """
        slot_index = validate_slot(slot)
        logger.info(f"Exporting custom palette {slot} for {character} to {skin_path}...")

        data = Path(save_path).read_bytes()
        self.validator.validate(data)

        entry = self.registry.lookup(character.lower())
        offset = offset_for(entry, slot_index)
        logger.debug(f"Reading {entry.name} slot {slot} at offset 0x{offset:X}")
        palette = palette_codec.decode(data[offset : offset + PALETTE_RECORD_SIZE])

        skin_path = Path(skin_path)
        skin_path.parent.mkdir(parents=True, exist_ok=True)
        skin_path.write_bytes(bytes(palette))

        logger.info(f"Exported palette {list(palette)} to {skin_path}")
        return palette

    def import_skin(
        self,
        save_path: str | Path,
        character: str,
        slot: int,
        skin_path: str | Path,
    ) -> palette_codec.Palette:
        """
        Write a skin file into one palette slot of a save file.

        The save file is backed up first (at most once per backup window).
        Nothing is written unless the whole save file validates.

        Args:
            save_path: SYS-DATA save file, modified in place
            character: Character name (any case)
            slot: Palette slot, 1-5
            skin_path: Source skin file

        Returns:
            The imported palette
        """
        slot_index = validate_slot(slot)
        logger.info(f"Importing palette from {skin_path} to custom palette {slot} for {character}...")

        # Must finish before the save file is opened for writing
        self.backup_manager.maybe_backup(save_path)

        palette = read_skin(skin_path)

        with open(save_path, "r+b") as f:
            self.validator.validate(f.read())

            entry = self.registry.lookup(character.lower())
            offset = offset_for(entry, slot_index)
            record = palette_codec.encode(palette)

            _ = f.seek(offset)
            _ = f.write(record)

        logger.info(f"Imported palette {list(palette)} into {entry.name} slot {slot}")
        return palette
