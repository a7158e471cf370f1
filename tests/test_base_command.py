"""Tests for base YouTubeCommand class."""

from unittest.mock import MagicMock

import pytest

from src.youtubemodules.commands.base import YouTubeCommand
from src.youtubemodules.core import YouTubeChannel
from src.youtubemodules.errors import UploadsPlaylistNotFoundError, YouTubeError


@pytest.fixture
def mock_youtube():
    """Create channel wrapper around a mock client."""
    return YouTubeChannel(MagicMock())


def test_youtube_command_init(mock_youtube):
    """Test YouTubeCommand initialization."""
    cmd = YouTubeCommand(youtube=mock_youtube)
    assert cmd.youtube == mock_youtube
    assert not cmd.dry_run
    assert not cmd.verbose


def test_youtube_command_validate_no_youtube():
    """Test YouTubeCommand validation with no YouTube client."""
    cmd = YouTubeCommand(youtube=None)
    with pytest.raises(ValueError, match="YouTube API client is required"):
        cmd.validate()


def test_youtube_command_validate_success(mock_youtube):
    """Test YouTubeCommand validation success."""
    assert YouTubeCommand(youtube=mock_youtube).validate() is None


def test_youtube_command_run_default(mock_youtube):
    """Test that the base command does nothing."""
    assert YouTubeCommand(youtube=mock_youtube).run() is False


def test_youtube_command_run_validation_error():
    """Test that validation errors are wrapped."""
    with pytest.raises(YouTubeError, match="YouTube API client is required"):
        YouTubeCommand(youtube=None).run()


def test_youtube_command_wraps_unexpected_errors(mock_youtube):
    """Test that unexpected errors are wrapped with their cause."""

    class Broken(YouTubeCommand):
        def _run(self):
            raise KeyError("items")

    with pytest.raises(YouTubeError) as excinfo:
        Broken(youtube=mock_youtube).run()
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_youtube_command_keeps_youtube_errors(mock_youtube):
    """Test that package errors pass through unchanged."""

    class Missing(YouTubeCommand):
        def _run(self):
            raise UploadsPlaylistNotFoundError()

    with pytest.raises(UploadsPlaylistNotFoundError):
        Missing(youtube=mock_youtube).run()
