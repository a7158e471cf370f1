"""Base command class for YouTube operations."""

from ..core import YouTubeChannel
from ..errors import YouTubeError


class YouTubeCommand:
    """Base class for YouTube commands."""

    def __init__(self, youtube: YouTubeChannel):
        """Initialize command.

        Args:
            youtube: Channel API wrapper
        """
        self.youtube = youtube
        self.dry_run = False
        self.verbose = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.youtube:
            raise ValueError("YouTube API client is required")

    def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            YouTubeError: If command fails
        """
        try:
            self.validate()
            return self._run()
        except YouTubeError:
            raise
        except Exception as e:
            raise YouTubeError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False
