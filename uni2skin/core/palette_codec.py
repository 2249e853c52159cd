"""
Palette record codec

A record is 8 bytes on disk: one padding byte, the 6 palette values, and a
trailing padding byte.
"""
from __future__ import annotations

from collections.abc import Sequence

from uni2skin.utils.constants import (
    PALETTE_PADDING_BYTE,
    PALETTE_RECORD_SIZE,
    PALETTE_VALUE_COUNT,
)
from uni2skin.utils.exceptions import MalformedPaletteError, MalformedRecordError

Palette = tuple[int, ...]


def decode(record: bytes | bytearray | memoryview) -> Palette:
    """
    Convert an 8-byte record into its 6 palette values.

    Padding bytes are dropped without being checked.

    Raises:
        MalformedRecordError: If the record is not exactly 8 bytes
    """
    if len(record) != PALETTE_RECORD_SIZE:
        raise MalformedRecordError(
            f"Record {bytes(record).hex()} does not have correct length "
            f"(expected: {PALETTE_RECORD_SIZE}, actual: {len(record)})"
        )
    return tuple(record[1 : 1 + PALETTE_VALUE_COUNT])


def encode(palette: Sequence[int]) -> bytes:
    """
    Convert 6 palette values into an 8-byte record.

    Both padding bytes are written as zero, whatever was on disk before.

    Raises:
        MalformedPaletteError: If the palette is not exactly 6 values
    """
    if len(palette) != PALETTE_VALUE_COUNT:
        raise MalformedPaletteError(
            f"Palette {list(palette)} does not have correct length "
            f"(expected: {PALETTE_VALUE_COUNT}, actual: {len(palette)})"
        )
    return bytes([PALETTE_PADDING_BYTE, *palette, PALETTE_PADDING_BYTE])
