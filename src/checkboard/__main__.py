"""CLI entry point for checkboard."""

import argparse
from pathlib import Path

from .config import Settings
from .logging import setup_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="checkboard",
        description="Terminal Kanban board for checklist tasks in markdown notes",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Directory containing the notes and checkboard.yml (default: current directory)",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate default checkboard.yml in the vault and exit",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the board to stdout and exit",
    )
    parser.add_argument(
        "--no-watch",
        action="store_true",
        help="Do not watch the vault for changes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    return parser.parse_args()


def run_list(settings: Settings) -> int:
    """Scan the vault once and print the board."""
    from .cli.listing import print_board
    from .cli.output import error
    from .repositories import FilesystemDocumentStore
    from .services import BoardService, ConfigService

    config_service = ConfigService(settings.vault_root)
    if not settings.vault_root.is_dir():
        error(f"Vault not found: {settings.vault_root}")
        return 1

    board_service = BoardService(FilesystemDocumentStore(settings.vault_root), config_service)
    board_service.full_scan()
    if config_service.has_config_error:
        error(config_service.config_error or "Invalid configuration")
    print_board(board_service.load_board())
    return 0


def main() -> None:
    """Main entry point."""
    args = parse_args()

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.vault:
        settings_kwargs["vault_root"] = args.vault
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    if args.no_watch:
        settings_kwargs["watch"] = False

    settings = Settings(**settings_kwargs)

    if args.generate:
        setup_logging(settings.verbose, settings.log_file)
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.vault_root))

    if args.list:
        setup_logging(settings.verbose, settings.log_file)
        raise SystemExit(run_list(settings))

    # The TUI owns the terminal, so only file logging is possible
    setup_logging(settings.verbose, settings.log_file, console=False)

    # Import here to keep textual off the non-interactive paths
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
