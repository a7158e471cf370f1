"""Errors raised by youtubemodules."""


class YouTubeError(Exception):
    """Base class for YouTube API errors."""

    pass


class ConfigurationError(YouTubeError):
    """Error raised when required configuration is missing."""

    pass


class AuthorizationError(YouTubeError):
    """Error raised when the cached token is malformed or the code exchange fails."""

    pass


class PlaylistNotFoundError(YouTubeError):
    """Error raised when a playlist is not found."""

    pass


class UploadsPlaylistNotFoundError(YouTubeError):
    """Error raised when the channel's uploads playlist cannot be resolved."""

    def __init__(self, message: str = "Failed to get uploaded videos playlist id"):
        super().__init__(message)


class InvalidInputError(YouTubeError):
    """Error raised when the operator gives up entering a valid value."""

    def __init__(self, attempts: int):
        """Initialize error.

        Args:
            attempts: Number of invalid answers received
        """
        self.attempts = attempts
        super().__init__(f"No valid input after {attempts} attempts")
