"""Renumber command: number new uploads by module and copy them to a playlist."""

from typing import Optional

from ..config import Settings
from ..core import YouTubeChannel
from ..logging_config import get_logger
from ..numbering import filter_rename_and_sort
from ..prompt import Prompt
from ..publisher import Publisher, log_publish_summary
from .base import YouTubeCommand

# Get logger for this module
logger = get_logger(__name__)


class RenumberCommand(YouTubeCommand):
    """Command for numbering uploaded videos and inserting them into a playlist."""

    def __init__(
        self,
        youtube: YouTubeChannel,
        settings: Settings,
        prompt: Prompt,
        dry_run: bool = False,
        verbose: bool = False,
        max_attempts: Optional[int] = None,
    ) -> None:
        """Initialize command.

        Args:
            youtube: Channel API wrapper
            settings: Run settings
            prompt: Prompt used to ask for the module number
            dry_run: Whether to perform a dry run
            verbose: Whether to show verbose output
            max_attempts: Optional limit on invalid module answers
        """
        super().__init__(youtube)
        self.settings = settings
        self.prompt = prompt
        self.dry_run = dry_run
        self.verbose = verbose
        self.max_attempts = max_attempts

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.settings.destination_playlist_id:
            raise ValueError("Destination playlist ID is required")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def _run(self) -> bool:
        """Run the renumber command.

        Returns:
            bool: True if successful, False otherwise
        """
        uploads_playlist_id = self.youtube.get_uploads_playlist_id()
        entries = self.youtube.get_playlist_entries(uploads_playlist_id)

        selection = filter_rename_and_sort(entries, self.prompt, max_attempts=self.max_attempts)
        if not selection:
            logger.info("No videos to update")
            return True

        publisher = Publisher(
            self.youtube,
            self.settings.destination_playlist_id,
            category_id=self.settings.category_id,
            dry_run=self.dry_run,
        )
        summary = publisher.publish(selection)

        if not self.dry_run:
            log_publish_summary(summary, self.settings.destination_playlist_id, self.verbose)
        logger.info("Done!")
        return True
