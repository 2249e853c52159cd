"""
Character table for uni2skin
Loads the known characters and their palette block offsets
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from uni2skin.utils.constants import CHARACTER_ID_STEP, CHARACTER_OFFSET_STEP
from uni2skin.utils.exceptions import CharacterNotFoundError, RegistryInvalidError
from uni2skin.utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CHARACTERS_PATH = Path(__file__).parent.parent / "config" / "characters.json"


def parse_offset(offset: str | int) -> int:
    """Parse a hexadecimal offset string ("0x1C0" or "1C0")"""
    if isinstance(offset, bool):
        raise TypeError(f"offset must be a hex string or integer, not {offset!r}")
    if isinstance(offset, int):
        return offset
    return int(offset, 16)


def validate_contiguous(name: str, values: Iterable[int], distance: int) -> None:
    """
    Check that the sorted values are evenly spaced by ``distance``.

    Raises:
        RegistryInvalidError: Naming the first pair that breaks the spacing
    """
    sorted_values = sorted(values)
    logger.debug(f"Validating {name}: {sorted_values} (distance {distance})")
    for prev_value, value in zip(sorted_values, sorted_values[1:]):
        if value - prev_value != distance:
            raise RegistryInvalidError(
                f"Values for {name} were not contiguous between {prev_value} and {value}"
            )


@dataclass(frozen=True)
class CharacterEntry:
    """A character and the offset of its first palette slot"""

    id: int
    name: str
    base_offset: int
    present: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CharacterEntry:
        """Build an entry from a characters.json record"""
        try:
            return cls(
                id=int(data["id"]),
                name=str(data.get("name") or ""),
                base_offset=parse_offset(data["offset"]),
                present=data.get("exists") is True,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryInvalidError(f"Invalid character record {data!r}: {e}") from e


class CharacterRegistry:
    """Validated, read-only table of characters"""

    def __init__(self, entries: tuple[CharacterEntry, ...]) -> None:
        # Use load() rather than calling this directly; it skips validation
        self._entries = entries
        self._by_name: dict[str, CharacterEntry] = {}
        for entry in entries:
            if entry.name:
                _ = self._by_name.setdefault(entry.name, entry)

    @classmethod
    def load(cls, entries: Iterable[CharacterEntry]) -> CharacterRegistry:
        """
        Validate a whole character table and build a registry from it.

        Raises:
            RegistryInvalidError: If the table is empty, a present character
                has no name, or ids/offsets are not contiguous
        """
        entries = tuple(entries)
        if not entries:
            raise RegistryInvalidError("No characters found")

        for entry in entries:
            if entry.present and not entry.name:
                raise RegistryInvalidError(f"Character with ID {entry.id} has no name!")

        validate_contiguous("ids", (entry.id for entry in entries), CHARACTER_ID_STEP)
        validate_contiguous(
            "offsets", (entry.base_offset for entry in entries), CHARACTER_OFFSET_STEP
        )

        logger.debug(f"Character validation complete ({len(entries)} entries)")
        return cls(entries)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> CharacterRegistry:
        entries = []
        for record in records:
            if not isinstance(record, Mapping):
                raise RegistryInvalidError(f"Invalid character record {record!r}: expected an object")
            entries.append(CharacterEntry.from_dict(record))
        return cls.load(entries)

    @classmethod
    def from_json(cls, path: str | Path | None = None) -> CharacterRegistry:
        """
        Load and validate a characters.json table.

        Args:
            path: Table to load (uses the bundled table if None)

        Raises:
            RegistryInvalidError: If the file cannot be read or is invalid
        """
        path = Path(path) if path else DEFAULT_CHARACTERS_PATH
        try:
            with path.open(encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RegistryInvalidError(f"Could not read character table {path}: {e}") from e

        if not isinstance(records, list):
            raise RegistryInvalidError(f"Character table {path} must be a JSON list")

        logger.debug(f"Loaded character table: {path}")
        return cls.from_records(records)

    def lookup(self, name: str) -> CharacterEntry:
        """
        Find a character by exact name, first match in table order.

        Callers lowercase user input before calling. Entries marked absent
        are still found, as long as they are named.

        Raises:
            CharacterNotFoundError: If no character has this name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise CharacterNotFoundError(name) from None

    def names(self) -> list[str]:
        """Names of the present characters in table order"""
        return [entry.name for entry in self._entries if entry.present]

    def __iter__(self) -> Iterator[CharacterEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
