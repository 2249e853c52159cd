"""
Constants for uni2skin
All save file layout numbers in one place
"""

# Save file header
SAVE_HEADER_MAGIC = b"UNIEL-SaveData "
SAVE_HEADER_SIZE = len(SAVE_HEADER_MAGIC)  # 15 bytes

# Palette record layout
PALETTE_RECORD_SIZE = 8  # [pad][v1..v6][pad]
PALETTE_VALUE_COUNT = 6
PALETTE_PADDING_BYTE = 0x00
MAX_PALETTE_VALUE = 39  # Color selection indices are 0-39

# Per-character layout
PALETTES_PER_CHARACTER = 5
MIN_USER_SLOT = 1
MAX_USER_SLOT = PALETTES_PER_CHARACTER
CHARACTER_ID_STEP = 1
CHARACTER_OFFSET_STEP = 0x40  # 64 bytes between character blocks

# Skin files are the raw palette values, no header or padding
SKIN_FILE_SIZE = PALETTE_VALUE_COUNT

# Backups
BACKUP_NAME_INFIX = ".backup-"
BACKUP_WINDOW_DAYS = 7
MS_PER_DAY = 24 * 60 * 60 * 1000
BACKUP_WINDOW_MS = BACKUP_WINDOW_DAYS * MS_PER_DAY  # 604,800,000 ms

# Preview swatch
PREVIEW_CELL_SIZE = 16  # pixels per palette entry
GRAYSCALE_MAX_VALUE = 255

# Program identity
PROGRAM_NAME = "uni2skin"
DEFAULT_SAVE_FILE_NAME = "SYS-DATA"
