"""Common test fixtures and utilities."""

import pytest
from unittest.mock import MagicMock

from src.youtubemodules.config import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing the token cache into a temporary directory."""
    return Settings(
        client_id="client-id",
        client_secret="client-secret",
        destination_playlist_id="PLdestination",
        token_file=str(tmp_path / "credentials" / "client_oauth_token.json"),
    )


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock YouTube API client with common methods configured
    """
    mock = MagicMock()

    # Configure common mock responses
    mock.channels.return_value.list.return_value.execute.return_value = {
        "items": [
            {"contentDetails": {"relatedPlaylists": {"uploads": "UUuploads"}}}
        ]
    }

    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "item1",
                "snippet": {
                    "resourceId": {"videoId": "vid1"},
                    "title": "012",
                    "description": "Description 1"
                }
            },
            {
                "id": "item2",
                "snippet": {
                    "resourceId": {"videoId": "vid2"},
                    "title": "05",
                    "description": "Description 2"
                }
            },
            {
                "id": "item3",
                "snippet": {
                    "resourceId": {"videoId": "vid3"},
                    "title": "2.1",
                    "description": "Description 3"
                }
            }
        ]
    }

    mock.videos.return_value.update.return_value.execute.return_value = {"id": "vid1"}
    mock.playlistItems.return_value.insert.return_value.execute.return_value = {"id": "new"}

    return mock
