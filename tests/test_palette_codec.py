"""
Tests for palette record encoding and slot offsets
"""
from __future__ import annotations

import pytest

from uni2skin.core.character_registry import CharacterEntry
from uni2skin.core.offsets import offset_for
from uni2skin.core.palette_codec import decode, encode
from uni2skin.utils.exceptions import CodecError, MalformedPaletteError, MalformedRecordError

pytestmark = [pytest.mark.unit]


class TestDecode:
    """Test record to palette conversion"""

    def test_decode_drops_padding(self):
        """Bytes 1-6 are the palette, padding is ignored"""
        record = bytes([0xFF, 1, 2, 3, 4, 5, 6, 0xEE])

        assert decode(record) == (1, 2, 3, 4, 5, 6)

    def test_decode_accepts_bytearray_and_memoryview(self):
        record = bytearray([0, 10, 20, 30, 39, 0, 1, 0])

        assert decode(record) == (10, 20, 30, 39, 0, 1)
        assert decode(memoryview(bytes(record))) == (10, 20, 30, 39, 0, 1)

    def test_decode_does_not_check_range(self):
        """Range checks belong to the validator"""
        assert decode(bytes([0, 255, 40, 0, 0, 0, 0, 0]))[:2] == (255, 40)

    @pytest.mark.parametrize("length", [0, 1, 6, 7, 9, 16])
    def test_decode_wrong_length(self, length):
        with pytest.raises(MalformedRecordError, match="expected: 8"):
            decode(bytes(length))


class TestEncode:
    """Test palette to record conversion"""

    def test_encode_adds_zero_padding(self):
        assert encode([1, 2, 3, 4, 5, 6]) == bytes([0, 1, 2, 3, 4, 5, 6, 0])

    def test_encode_accepts_tuple(self):
        assert len(encode((39,) * 6)) == 8

    @pytest.mark.parametrize("length", [0, 1, 5, 7, 8])
    def test_encode_wrong_length(self, length):
        with pytest.raises(MalformedPaletteError, match="expected: 6"):
            encode([0] * length)

    def test_codec_errors_share_base(self):
        assert issubclass(MalformedRecordError, CodecError)
        assert issubclass(MalformedPaletteError, CodecError)

    @pytest.mark.parametrize(
        "palette",
        [(0, 0, 0, 0, 0, 0), (39, 38, 37, 1, 2, 3), (255, 128, 64, 40, 0, 7)],
    )
    def test_decode_recovers_encoded_palette(self, palette):
        """Values across the whole byte range survive encoding"""
        assert decode(encode(palette)) == palette

    def test_encode_does_not_preserve_original_padding(self):
        """Re-encoding a record zeroes padding that was non-zero"""
        record = bytes([0xAA, 1, 2, 3, 4, 5, 6, 0xBB])

        assert encode(decode(record)) == bytes([0, 1, 2, 3, 4, 5, 6, 0])


class TestOffsetFor:
    """Test slot offset arithmetic"""

    def test_slot_offsets(self):
        entry = CharacterEntry(id=1, name="hyde", base_offset=0x1000)

        assert [offset_for(entry, slot) for slot in range(5)] == [
            0x1000,
            0x1008,
            0x1010,
            0x1018,
            0x1020,
        ]

    def test_offsets_strictly_increase(self, registry):
        for entry in registry:
            offsets = [offset_for(entry, slot) for slot in range(5)]
            assert offsets == sorted(set(offsets))
            assert offsets[0] == entry.base_offset

    def test_slots_stay_inside_character_block(self, registry):
        """Five 8-byte records fit in the 0x40 spacing between characters"""
        for entry in registry:
            assert offset_for(entry, 4) + 8 <= entry.base_offset + 0x40
