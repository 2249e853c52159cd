"""Palette slot offset arithmetic"""
from __future__ import annotations

from uni2skin.core.character_registry import CharacterEntry
from uni2skin.utils.constants import PALETTE_RECORD_SIZE


def offset_for(entry: CharacterEntry, slot: int) -> int:
    """Absolute byte offset of a 0-based palette slot (0-4) for a character"""
    return entry.base_offset + slot * PALETTE_RECORD_SIZE
