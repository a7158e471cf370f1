"""Number uploaded YouTube videos by module and copy them into a playlist."""

__version__ = "0.1.0"

# Import all public components
from .auth import CredentialStore, get_youtube_service
from .cli import main
from .commands import RenumberCommand, YouTubeCommand
from .config import Settings
from .core import YouTubeChannel
from .errors import YouTubeError
from .logging_config import get_logger, setup_logging
from .numbering import filter_rename_and_sort, select_entries
from .prompt import Prompt
from .publisher import Publisher, PublishSummary

# Import config variables
from .config import (  # noqa: F401
    YOUTUBE_SCOPES,
    CREDENTIALS_DIR,
    TOKEN_FILE,
    DEFAULT_CATEGORY_ID,
)

# Configure logging
logger = setup_logging()
