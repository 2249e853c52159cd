#!/usr/bin/env python3
"""
UNDER NIGHT IN-BIRTH II Sys:Celes custom color importer

Usage:
    uni2skin export <save_path> <character> <slot> <skin_path> [--preview PNG]
    uni2skin import <save_path> <character> <slot> <skin_path>
    uni2skin characters
    uni2skin backups <save_path>

The save file is usually
"<Steam>/steamapps/common/UNDER NIGHT IN-BIRTH II Sys Celes/Save/<a number>/SYS-DATA".
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from uni2skin import __version__
from uni2skin.core.character_registry import CharacterRegistry
from uni2skin.core.preview import save_preview
from uni2skin.core.skin_transfer import SkinTransfer
from uni2skin.utils.constants import (
    DEFAULT_SAVE_FILE_NAME,
    MAX_USER_SLOT,
    MIN_USER_SLOT,
    MS_PER_DAY,
    PROGRAM_NAME,
)
from uni2skin.utils.exceptions import RegistryInvalidError, SkinToolError
from uni2skin.utils.logging_config import get_logger, setup_logging
from uni2skin.utils.save_backup import SaveBackupManager
from uni2skin.utils.settings_manager import SettingsManager

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_COMMAND_FAILED = 1
EXIT_STARTUP_FAILED = 2

SAVE_PATH_HELP = (
    f"Path to your UNDER NIGHT IN-BIRTH II Sys Celes {DEFAULT_SAVE_FILE_NAME} file"
)
SLOT_HELP = f"The custom palette slot ({MIN_USER_SLOT}-{MAX_USER_SLOT})"


def initialize(characters_path: str | None = None) -> tuple[CharacterRegistry | None, str | None]:
    """
    Load and validate the character table.

    Returns:
        Tuple of (registry, error_message); registry is None on failure
    """
    logger.debug("Validating characters...")
    try:
        registry = CharacterRegistry.from_json(characters_path)
    except RegistryInvalidError as e:
        return None, str(e)
    logger.debug("Character validation complete.")
    return registry, None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="CLI to export and import UNI2 character skins",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from settings, INFO)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--characters", help="Character table JSON (default: bundled table)")
    parser.add_argument("--settings", help="Settings file (default: ~/.uni2skin/settings.json)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export a skin from UNI2")
    export_parser.add_argument("save_path", help=SAVE_PATH_HELP)
    export_parser.add_argument("character", help="The character to export the skin for")
    export_parser.add_argument("slot", type=int, help=SLOT_HELP)
    export_parser.add_argument("skin_path", help="The location to export the skin to")
    export_parser.add_argument("--preview", metavar="PNG", help="Also write a swatch preview PNG")
    export_parser.set_defaults(handler=cmd_export)

    import_parser = subparsers.add_parser("import", help="Import a skin into UNI2")
    import_parser.add_argument("save_path", help=SAVE_PATH_HELP)
    import_parser.add_argument("character", help="The character to import the skin for")
    import_parser.add_argument("slot", type=int, help=SLOT_HELP)
    import_parser.add_argument("skin_path", help="The path of the skin to import")
    import_parser.set_defaults(handler=cmd_import)

    characters_parser = subparsers.add_parser("characters", help="List known characters")
    characters_parser.set_defaults(handler=cmd_characters)

    backups_parser = subparsers.add_parser("backups", help="List backups of a save file")
    backups_parser.add_argument("save_path", help=SAVE_PATH_HELP)
    backups_parser.set_defaults(handler=cmd_backups)

    return parser


def cmd_export(args: argparse.Namespace, transfer: SkinTransfer) -> int:
    palette = transfer.export_skin(args.save_path, args.character, args.slot, args.skin_path)
    print(list(palette))
    if args.preview:
        _ = save_preview(palette, args.preview)
    return EXIT_OK


def cmd_import(args: argparse.Namespace, transfer: SkinTransfer) -> int:
    _ = transfer.import_skin(args.save_path, args.character, args.slot, args.skin_path)
    return EXIT_OK


def cmd_characters(args: argparse.Namespace, transfer: SkinTransfer) -> int:
    for name in transfer.registry.names():
        print(name)
    return EXIT_OK


def cmd_backups(args: argparse.Namespace, transfer: SkinTransfer) -> int:
    backups = transfer.backup_manager.list_backups(args.save_path)
    if not backups:
        print(f"No backups found for {args.save_path}")
    for backup in backups:
        print(f"{backup['date']}  {backup['size']:>8}  {backup['filename']}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = SettingsManager(args.settings)
    level = "DEBUG" if args.verbose else (args.log_level or settings.get("log_level", "INFO"))
    _ = setup_logging(level, args.log_file or settings.get("log_file"))

    registry, error = initialize(args.characters or settings.get("characters_file"))
    if registry is None:
        logger.error(f"Error validating character table: {error}")
        return EXIT_STARTUP_FAILED

    backup_manager = SaveBackupManager(window_ms=settings.get_backup_window_days() * MS_PER_DAY)
    transfer = SkinTransfer(registry, backup_manager)

    try:
        return args.handler(args, transfer)
    except (SkinToolError, OSError) as e:
        logger.error(f"Error executing {args.command} command: {e}")
        logger.debug("Command failure details", exc_info=True)
        return EXIT_COMMAND_FAILED


if __name__ == "__main__":
    sys.exit(main())
