"""
Save file validation for uni2skin
"""
from __future__ import annotations

from uni2skin.core import palette_codec
from uni2skin.core.character_registry import CharacterRegistry
from uni2skin.core.offsets import offset_for
from uni2skin.utils.constants import (
    MAX_PALETTE_VALUE,
    PALETTE_RECORD_SIZE,
    PALETTES_PER_CHARACTER,
    SAVE_HEADER_MAGIC,
    SAVE_HEADER_SIZE,
)
from uni2skin.utils.exceptions import (
    HeaderMismatchError,
    PaletteOutOfRangeError,
    SaveTooSmallError,
)
from uni2skin.utils.logging_config import get_logger

logger = get_logger(__name__)


def check_palette_range(palette: palette_codec.Palette, location: str) -> None:
    """
    Raises:
        PaletteOutOfRangeError: On the first value above the maximum index
    """
    for value in palette:
        if value > MAX_PALETTE_VALUE:
            raise PaletteOutOfRangeError(value, MAX_PALETTE_VALUE, location)


class SaveFileValidator:
    """Validates SYS-DATA save files against the character table"""

    def __init__(self, registry: CharacterRegistry) -> None:
        self.registry = registry

    @staticmethod
    def validate_header(data: bytes) -> None:
        """
        Raises:
            SaveTooSmallError: If the data is shorter than the header
            HeaderMismatchError: If the header is not the magic string
        """
        if len(data) < SAVE_HEADER_SIZE:
            raise SaveTooSmallError(SAVE_HEADER_SIZE, len(data))

        header = bytes(data[:SAVE_HEADER_SIZE])
        if header != SAVE_HEADER_MAGIC:
            raise HeaderMismatchError(SAVE_HEADER_MAGIC, header)

    def validate(self, data: bytes) -> None:
        """
        Validate the header and every palette record of a save file.

        Stops at the first problem. Characters are checked in table order,
        slots in ascending order.

        Raises:
            SaveTooSmallError: If the file ends before a header or record
            HeaderMismatchError: If the header does not match
            PaletteOutOfRangeError: If a stored value is above 39
        """
        self.validate_header(data)

        for entry in self.registry:
            for slot in range(PALETTES_PER_CHARACTER):
                offset = offset_for(entry, slot)
                end = offset + PALETTE_RECORD_SIZE
                if end > len(data):
                    raise SaveTooSmallError(end, len(data))

                palette = palette_codec.decode(data[offset:end])
                check_palette_range(
                    palette,
                    f"character {entry.id} ({entry.name or 'unnamed'}) "
                    f"slot {slot + 1}, offset 0x{offset:X}",
                )

        logger.debug(f"Save data validated ({len(data)} bytes)")
