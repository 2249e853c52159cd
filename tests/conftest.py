"""
Shared pytest fixtures for uni2skin tests
"""
from __future__ import annotations

import json
import logging

import pytest

from uni2skin.core.character_registry import CharacterEntry, CharacterRegistry
from uni2skin.utils.constants import (
    PALETTE_RECORD_SIZE,
    PALETTES_PER_CHARACTER,
    SAVE_HEADER_MAGIC,
)

# ids 1-3 at 0x40, 0x80, 0xC0; the last block ends at 0xC0 + 5 * 8
TEST_ENTRIES = (
    CharacterEntry(id=1, name="hyde", base_offset=0x40),
    CharacterEntry(id=2, name="linne", base_offset=0x80),
    CharacterEntry(id=3, name="waldstein", base_offset=0xC0),
)
TEST_SAVE_SIZE = 0xC0 + PALETTES_PER_CHARACTER * PALETTE_RECORD_SIZE + 0x18


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by setup_logging so streams do not leak between tests"""
    yield
    logger = logging.getLogger("uni2skin")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def stored_palette(entry_index: int, slot: int) -> list[int]:
    """Deterministic in-range palette stored at a character slot"""
    return [(entry_index * 10 + slot * 6 + i) % 40 for i in range(6)]


@pytest.fixture
def palette_at():
    """Lookup for the palette sample_save_data stores at (entry index, slot)"""
    return stored_palette


@pytest.fixture
def test_entries():
    return TEST_ENTRIES


@pytest.fixture
def registry():
    """Validated three-character registry"""
    return CharacterRegistry.load(TEST_ENTRIES)


@pytest.fixture
def sample_save_data():
    """Well-formed save data for the test registry, padding bytes set to 0xAA"""
    data = bytearray(TEST_SAVE_SIZE)
    data[: len(SAVE_HEADER_MAGIC)] = SAVE_HEADER_MAGIC
    for index, entry in enumerate(TEST_ENTRIES):
        for slot in range(PALETTES_PER_CHARACTER):
            offset = entry.base_offset + slot * PALETTE_RECORD_SIZE
            data[offset : offset + PALETTE_RECORD_SIZE] = bytes(
                [0xAA, *stored_palette(index, slot), 0xAA]
            )
    return bytes(data)


@pytest.fixture
def save_file(tmp_path, sample_save_data):
    """SYS-DATA file in its own directory"""
    save_dir = tmp_path / "Save"
    save_dir.mkdir()
    save_path = save_dir / "SYS-DATA"
    save_path.write_bytes(sample_save_data)
    return save_path


@pytest.fixture
def skin_file(tmp_path):
    """Valid 6-byte skin file"""
    skin_path = tmp_path / "skins" / "custom.skin"
    skin_path.parent.mkdir()
    skin_path.write_bytes(bytes([1, 2, 3, 37, 38, 39]))
    return skin_path


@pytest.fixture
def characters_file(tmp_path):
    """characters.json matching the test registry"""
    records = [
        {"id": entry.id, "name": entry.name, "offset": hex(entry.base_offset), "exists": True}
        for entry in TEST_ENTRIES
    ]
    path = tmp_path / "characters.json"
    path.write_text(json.dumps(records))
    return path


@pytest.fixture
def settings_file(tmp_path):
    """Settings path inside the test directory (not created)"""
    return tmp_path / "settings" / "settings.json"
