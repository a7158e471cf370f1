"""Read-only checks against the real YouTube API.

Run with ``pytest --run-api`` after authorizing once with the CLI.
"""

import pytest

from src.youtubemodules.auth import get_youtube_service
from src.youtubemodules.config import Settings
from src.youtubemodules.core import YouTubeChannel
from src.youtubemodules.prompt import Prompt


@pytest.fixture(scope="module")
def channel() -> YouTubeChannel:
    """Channel wrapper authorized from the cached token."""
    return YouTubeChannel(get_youtube_service(Settings.from_env(), Prompt()))


@pytest.mark.api
def test_uploads_playlist_resolves(channel: YouTubeChannel):
    assert channel.get_uploads_playlist_id()


@pytest.mark.api
def test_uploads_entries_single_page(channel: YouTubeChannel):
    entries = channel.get_playlist_entries(channel.get_uploads_playlist_id())

    assert len(entries) <= 50
    for entry in entries:
        assert entry["video_id"]
