"""Configuration and environment settings."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# Force reload of environment variables
load_dotenv(override=True)

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")
CREDENTIALS_DIR = os.getenv("CREDENTIALS_DIR", os.path.join(DATA_DIR, "credentials"))

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube"]
TOKEN_FILE = os.path.join(CREDENTIALS_DIR, "client_oauth_token.json")
REDIRECT_URI = "http://localhost"
AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
MAX_RESULTS = 50  # Single page of playlist items

# Publishing Settings
DEFAULT_CATEGORY_ID = "22"  # People & Blogs
PRIVACY_STATUS = "private"
MADE_FOR_KIDS = False

# Required environment variables
ENV_CLIENT_ID = "CLIENT_ID"
ENV_CLIENT_SECRET = "CLIENT_SECRET"
ENV_DESTINATION_PLAYLIST = "PLAYLIST_ID_TO_INSERT_VIDEOS"


@dataclass
class Settings:
    """Run settings, built once at startup and passed to each component."""

    client_id: str
    client_secret: str
    destination_playlist_id: str
    token_file: str = TOKEN_FILE
    category_id: str = DEFAULT_CATEGORY_ID
    scopes: List[str] = field(default_factory=lambda: list(YOUTUBE_SCOPES))

    @classmethod
    def from_env(
        cls,
        token_file: Optional[str] = None,
        destination_playlist_id: Optional[str] = None,
    ) -> "Settings":
        """Build settings from the environment.

        Args:
            token_file: Optional override for the cached token path
            destination_playlist_id: Optional override for the target playlist

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a required value is missing
        """
        values = {
            ENV_CLIENT_ID: os.getenv(ENV_CLIENT_ID),
            ENV_CLIENT_SECRET: os.getenv(ENV_CLIENT_SECRET),
            ENV_DESTINATION_PLAYLIST: destination_playlist_id
            or os.getenv(ENV_DESTINATION_PLAYLIST),
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing env vars: {', '.join(missing)}. Please check .env.example"
            )

        return cls(
            client_id=values[ENV_CLIENT_ID],
            client_secret=values[ENV_CLIENT_SECRET],
            destination_playlist_id=values[ENV_DESTINATION_PLAYLIST],
            token_file=token_file or TOKEN_FILE,
            category_id=os.getenv("VIDEO_CATEGORY_ID", DEFAULT_CATEGORY_ID),
        )

    def client_config(self) -> dict:
        """Client configuration in the installed-app format used by the OAuth flow."""
        return {
            "installed": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [REDIRECT_URI],
            }
        }
