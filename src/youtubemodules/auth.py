"""YouTube API authentication handling."""

import json
import os
from typing import Any, Dict, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from . import config
from .config import Settings
from .errors import AuthorizationError
from .logging_config import get_logger
from .prompt import Prompt

logger = get_logger(__name__)

CODE_QUESTION = (
    "\nAfter the authorization, get the code from the new page's url and paste it here: "
)


class CredentialStore:
    """Cached OAuth token with an interactive authorization-code fallback.

    The token is the identity provider's token response, stored as JSON in
    ``settings.token_file``. A cached token is used as-is; it is never
    checked for expiry or refreshed here.
    """

    def __init__(self, settings: Settings, prompt: Prompt):
        """Initialize credential store.

        Args:
            settings: Run settings with client id/secret and token path
            prompt: Prompt used to read the authorization code
        """
        self.settings = settings
        self.prompt = prompt
        self._flow: Optional[Flow] = None

    @property
    def flow(self) -> Flow:
        """Authorization-code flow, created on first use."""
        if self._flow is None:
            self._flow = Flow.from_client_config(
                self.settings.client_config(),
                scopes=self.settings.scopes,
                redirect_uri=config.REDIRECT_URI,
            )
        return self._flow

    def load_token(self) -> Optional[Dict[str, Any]]:
        """Load the cached token.

        Returns:
            Token dictionary, or None if the token file is missing, unreadable
            or empty

        Raises:
            AuthorizationError: If the token file is not valid JSON
        """
        try:
            with open(self.settings.token_file, "r", encoding="utf-8") as token_file:
                content = token_file.read()
        except OSError:
            logger.debug("No cached token at %s", self.settings.token_file)
            return None

        if not content.strip():
            logger.debug("Cached token at %s is empty", self.settings.token_file)
            return None

        try:
            return json.loads(content)
        except ValueError as e:
            raise AuthorizationError(
                f"Cached token {self.settings.token_file} is not valid JSON: {str(e)}"
            ) from e

    def save_token(self, token: Dict[str, Any]) -> None:
        """Persist a token for the next run."""
        directory = os.path.dirname(self.settings.token_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.settings.token_file, "w", encoding="utf-8") as token_file:
            json.dump(token, token_file, indent=2)
        logger.debug("Token saved to %s", self.settings.token_file)

    def authorization_url(self) -> str:
        """Build the URL the operator visits to authorize the app."""
        url, _ = self.flow.authorization_url(access_type="offline", prompt="consent")
        return url

    def exchange_code(self, code: str) -> Dict[str, Any]:
        """Exchange an authorization code for a token.

        Raises:
            AuthorizationError: If the identity provider rejects the code
        """
        try:
            token = self.flow.fetch_token(code=code)
        except Exception as e:
            raise AuthorizationError(f"Failed to exchange authorization code: {str(e)}") from e
        return dict(token)

    def credentials_from_token(self, token: Dict[str, Any]) -> Credentials:
        """Build API credentials from a token response.

        Raises:
            AuthorizationError: If the token has no access token
        """
        if not isinstance(token, dict) or not token.get("access_token"):
            raise AuthorizationError("Token has no access_token")

        return Credentials(
            token=token["access_token"],
            refresh_token=token.get("refresh_token"),
            token_uri=config.TOKEN_URI,
            client_id=self.settings.client_id,
            client_secret=self.settings.client_secret,
            scopes=self.settings.scopes,
        )

    def authorize(self) -> Dict[str, Any]:
        """Run the interactive authorization and persist the new token."""
        logger.info("Authorize this app by visiting the url below:")
        logger.info(self.authorization_url())

        code = self.prompt.ask(CODE_QUESTION)
        token = self.exchange_code(code)
        self.save_token(token)
        return token

    def get_credentials(self) -> Credentials:
        """Get credentials from the cache, authorizing interactively on a miss."""
        token = self.load_token()
        if token is None:
            token = self.authorize()
        return self.credentials_from_token(token)


def get_youtube_service(settings: Settings, prompt: Prompt):
    """
    Get an authenticated YouTube service object.
    May block on the operator for an authorization code on the first run.
    """
    credentials = CredentialStore(settings, prompt).get_credentials()
    return build("youtube", "v3", credentials=credentials)
