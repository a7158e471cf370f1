from src.youtubemodules.errors import (
    AuthorizationError,
    ConfigurationError,
    InvalidInputError,
    PlaylistNotFoundError,
    UploadsPlaylistNotFoundError,
    YouTubeError,
)


class TestErrors:
    def test_youtube_error_message(self):
        error = YouTubeError("Test error message")
        assert str(error) == "Test error message"

    def test_hierarchy(self):
        for cls in (
            AuthorizationError,
            ConfigurationError,
            PlaylistNotFoundError,
            UploadsPlaylistNotFoundError,
        ):
            assert issubclass(cls, YouTubeError)
        assert issubclass(InvalidInputError, YouTubeError)

    def test_uploads_playlist_not_found_default_message(self):
        error = UploadsPlaylistNotFoundError()
        assert str(error) == "Failed to get uploaded videos playlist id"

    def test_invalid_input_error_message(self):
        error = InvalidInputError(3)
        assert error.attempts == 3
        assert str(error) == "No valid input after 3 attempts"

