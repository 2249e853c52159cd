"""Custom exceptions for uni2skin"""


class SkinToolError(Exception):
    """Base exception for all uni2skin errors."""


class RegistryInvalidError(SkinToolError):
    """Raised when the character table is empty, unnamed or non-contiguous."""


class CharacterNotFoundError(SkinToolError):
    """Raised when a character name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not find character with name {name!r}")
        self.name = name


class SlotOutOfRangeError(SkinToolError):
    """Raised when a user-facing slot number is outside 1-5."""

    def __init__(self, slot: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Slot must be between {minimum} and {maximum} (got {slot})"
        )
        self.slot = slot


class SaveValidationError(SkinToolError):
    """Base exception for save files that fail structural validation."""


class SaveTooSmallError(SaveValidationError):
    """Raised when the save file ends before a required region."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Save file too small (expected at least {expected}, actual: {actual})"
        )
        self.expected = expected
        self.actual = actual


class HeaderMismatchError(SaveValidationError):
    """Raised when the save file header does not match the magic string."""

    def __init__(self, expected: bytes, actual: bytes) -> None:
        super().__init__(
            f"Save file header did not match (expected: {expected!r}, actual: {actual!r})"
        )
        self.expected = expected
        self.actual = actual


class PaletteOutOfRangeError(SaveValidationError):
    """Raised when a palette value exceeds the maximum color index."""

    def __init__(self, value: int, maximum: int, location: str) -> None:
        super().__init__(
            f"Palette value {value} exceeds maximum {maximum} at {location}"
        )
        self.value = value
        self.maximum = maximum
        self.location = location


class CodecError(SkinToolError):
    """Base exception for byte sequences of the wrong length."""


class MalformedRecordError(CodecError):
    """Raised when a palette record is not exactly 8 bytes."""


class MalformedPaletteError(CodecError):
    """Raised when a palette is not exactly 6 values."""


class BackupError(SkinToolError):
    """Raised when backup creation fails"""
