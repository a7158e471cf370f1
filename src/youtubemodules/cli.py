"""Command-line interface for numbering uploads by module."""

import argparse
import sys
from typing import List, Optional

from . import auth, commands
from .config import Settings
from .core import YouTubeChannel
from .logging_config import get_logger, setup_logging
from .prompt import Prompt

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Number new uploads by module and copy them into a playlist"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--dry-run", action="store_true", help="Simulate operations without making changes"
    )
    parser.add_argument("--token-file", help="Path of the cached OAuth token")
    parser.add_argument(
        "--playlist", help="Destination playlist ID (overrides PLAYLIST_ID_TO_INSERT_VIDEOS)"
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Give up after this many invalid module numbers (default: ask forever)",
    )
    return parser


def report_failure(error: Exception) -> None:
    """Log a run failure, formatted and then raw."""
    logger.error("Run failed: %s", str(error))
    logger.error("%r", error)


def main(argv: Optional[List[str]] = None, prompt: Optional[Prompt] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]
        prompt: Prompt for operator answers, defaults to the terminal

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    setup_logging(debug=args.debug)

    prompt = prompt or Prompt()

    try:
        settings = Settings.from_env(
            token_file=args.token_file,
            destination_playlist_id=args.playlist,
        )
        youtube = auth.get_youtube_service(settings, prompt)

        command = commands.RenumberCommand(
            youtube=YouTubeChannel(youtube),
            settings=settings,
            prompt=prompt,
            dry_run=args.dry_run,
            verbose=args.verbose,
            max_attempts=args.max_attempts,
        )
        if not command.run():
            logger.error("Command failed to run successfully")
            return 1
        return 0
    except Exception as e:
        report_failure(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
