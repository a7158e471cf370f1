"""Publishing of renumbered videos."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from tqdm import tqdm

from . import config
from .core import YouTubeChannel
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class PublishSummary:
    """Outcome of one publish run, as video IDs."""

    updated: List[str] = field(default_factory=list)
    inserted: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class Publisher:
    """Updates each selected video, then copies it into the destination playlist."""

    def __init__(
        self,
        channel: YouTubeChannel,
        destination_playlist_id: str,
        category_id: str = config.DEFAULT_CATEGORY_ID,
        privacy_status: str = config.PRIVACY_STATUS,
        made_for_kids: bool = config.MADE_FOR_KIDS,
        dry_run: bool = False,
    ) -> None:
        """Initialize publisher.

        Args:
            channel: Channel API wrapper
            destination_playlist_id: Playlist the videos are inserted into
            category_id: Category set on every video
            privacy_status: Privacy status set on every video
            made_for_kids: Made-for-kids declaration set on every video
            dry_run: Log the planned calls without making them
        """
        self.channel = channel
        self.destination_playlist_id = destination_playlist_id
        self.category_id = category_id
        self.privacy_status = privacy_status
        self.made_for_kids = made_for_kids
        self.dry_run = dry_run

    def publish_entry(self, entry: Dict[str, Any], summary: PublishSummary) -> None:
        """Update one video and insert it into the destination playlist.

        The insert is attempted even when the update failed.
        """
        video_id = entry.get("video_id")
        title = entry.get("title")
        if not video_id or not title:
            summary.skipped.append(video_id or "")
            return

        if self.dry_run:
            logger.info(
                "Would rename %s to %s and insert it into %s",
                video_id,
                title,
                self.destination_playlist_id,
            )
            return

        ok = True
        if self.channel.update_video(
            video_id,
            title,
            category_id=self.category_id,
            privacy_status=self.privacy_status,
            made_for_kids=self.made_for_kids,
        ):
            logger.info("Video %s edited", title)
            summary.updated.append(video_id)
        else:
            logger.warning("Failed to edit video %s", title)
            ok = False

        if self.channel.insert_playlist_item(self.destination_playlist_id, video_id):
            logger.info("Video %s inserted in the playlist", title)
            summary.inserted.append(video_id)
        else:
            logger.warning("Failed to insert video %s in the playlist", title)
            ok = False

        if not ok:
            summary.failed.append(video_id)

    def publish(self, selection: List[Dict[str, Any]]) -> PublishSummary:
        """Publish the selection one entry at a time, in order.

        Args:
            selection: Ordered, renamed entries

        Returns:
            PublishSummary of the run
        """
        summary = PublishSummary()
        for entry in tqdm(selection, desc="Publishing", unit="video", leave=False):
            self.publish_entry(entry, summary)
        return summary


def log_publish_summary(
    summary: PublishSummary, destination_playlist_id: str, verbose: bool = False
) -> None:
    """Log summary of a publish run.

    Args:
        summary: Result of Publisher.publish
        destination_playlist_id: Target playlist ID
        verbose: Whether to include the failed and skipped video lists
    """
    logger.info(
        f"\nPublish Summary:\n"
        f"Target Playlist: {destination_playlist_id}\n"
        f"Edited: {len(summary.updated)}\n"
        f"Inserted: {len(summary.inserted)}\n"
        f"Failed: {len(summary.failed)}\n"
        f"Skipped: {len(summary.skipped)}"
    )

    if verbose:
        if summary.failed:
            logger.info("\nFailed videos:")
            for video_id in summary.failed:
                logger.info(f"- {video_id}")

        if summary.skipped:
            logger.info("\nSkipped videos:")
            for video_id in summary.skipped:
                logger.info(f"- {video_id}")
