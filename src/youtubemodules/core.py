"""YouTube API base class."""

from typing import Any, Dict, List

from googleapiclient.errors import HttpError

from . import config
from .errors import PlaylistNotFoundError, UploadsPlaylistNotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)


class YouTubeChannel:
    """YouTube API operations on the authenticated channel."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def get_uploads_playlist_id(self) -> str:
        """Get the ID of the channel's uploads playlist.

        Returns:
            Uploads playlist ID

        Raises:
            UploadsPlaylistNotFoundError: If the response has no uploads playlist
        """
        request = self.youtube.channels().list(part="contentDetails", mine=True)
        response = request.execute()

        items = response.get("items") or []
        if not items:
            raise UploadsPlaylistNotFoundError()

        uploads = items[0].get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        if not uploads:
            raise UploadsPlaylistNotFoundError()

        logger.debug("Uploads playlist is %s", uploads)
        return uploads

    def get_playlist_entries(
        self, playlist_id: str, max_results: int = config.MAX_RESULTS
    ) -> List[Dict[str, Any]]:
        """Get the first page of entries in a playlist.

        Args:
            playlist_id: ID of playlist to get entries from
            max_results: Page size

        Returns:
            List of entry dictionaries with video_id and title. Missing fields
            are None.

        Raises:
            PlaylistNotFoundError: If playlist is not found
        """
        request = self.youtube.playlistItems().list(
            part="snippet",
            playlistId=playlist_id,
            maxResults=max_results,
        )
        try:
            response = request.execute()
        except HttpError as e:
            if "playlistNotFound" in str(e):
                raise PlaylistNotFoundError(f"Playlist {playlist_id} not found") from e
            raise

        entries = []
        for item in response.get("items") or []:
            snippet = item.get("snippet") or {}
            entries.append({
                "video_id": (snippet.get("resourceId") or {}).get("videoId"),
                "title": snippet.get("title"),
            })

        logger.debug("Fetched %d entries from %s", len(entries), playlist_id)
        return entries

    def update_video(
        self,
        video_id: str,
        title: str,
        category_id: str = config.DEFAULT_CATEGORY_ID,
        privacy_status: str = config.PRIVACY_STATUS,
        made_for_kids: bool = config.MADE_FOR_KIDS,
    ) -> bool:
        """Update a video's title, category and privacy.

        Returns:
            True if the update was accepted, False on an error response
        """
        try:
            request = self.youtube.videos().update(
                part="snippet,status",
                body={
                    "id": video_id,
                    "snippet": {"title": title, "categoryId": category_id},
                    "status": {
                        "privacyStatus": privacy_status,
                        "selfDeclaredMadeForKids": made_for_kids,
                    },
                },
            )
            request.execute()
            return True
        except HttpError as e:
            logger.debug("Update of %s failed with status %s", video_id, e.resp.status)
            return False

    def insert_playlist_item(self, playlist_id: str, video_id: str) -> bool:
        """Add a video to a playlist.

        Returns:
            True if the insert was accepted, False on an error response
        """
        try:
            request = self.youtube.playlistItems().insert(
                part="snippet",
                body={
                    "snippet": {
                        "playlistId": playlist_id,
                        "resourceId": {"kind": "youtube#video", "videoId": video_id},
                    }
                },
            )
            request.execute()
            return True
        except HttpError as e:
            logger.debug(
                "Insert of %s into %s failed with status %s", video_id, playlist_id, e.resp.status
            )
            return False

