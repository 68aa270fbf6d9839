"""
Abstract base provider for all remote version sources.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Dict, Any

import requests

from utils.logger import get_logger

_PROTOCOL = re.compile(r'(?i)https?://')

DEFAULT_TIMEOUT = 30


class BaseProvider(ABC):
    """Abstract base class for all update providers."""

    PROVIDER_AUTHOR = 'VersionSentinel'
    PROVIDER_VERSION = '1.0'

    def __init__(self, url: str, *params: Any, settings: Dict[str, Any] = None):
        """
        Initialize provider with its remote endpoint.

        Args:
            url: URL template with positional placeholders such as "{0}"
            params: Values substituted into the template
            settings: Application settings (the ``http`` section is read)
        """
        self.settings = settings or {}
        self.remote_url = self.create_url(url, *params)
        self.logger = get_logger(self.__class__.__name__)

        self._remote_version: Optional[str] = None
        self._download_link: Optional[str] = None
        self._changelog_link: Optional[str] = None

    @abstractmethod
    def initialize(self) -> bool:
        """
        Fetch the latest release from the remote server.

        Populates the remote version and links. Connection failures and
        other I/O errors are raised to the caller.

        Returns:
            True if usable data was fetched, False for "no data" conditions
            such as a missing resource, an empty release list or a rate limit
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """
        Get the unique name of this provider.

        Returns:
            Name used in logs and notifications
        """
        pass

    def get_provider_author(self) -> str:
        return self.PROVIDER_AUTHOR

    def get_provider_version(self) -> str:
        """Version of the adapter itself, not of the fetched release."""
        return self.PROVIDER_VERSION

    def get_download_link(self) -> Optional[str]:
        return self._download_link

    def get_changelog_link(self) -> Optional[str]:
        return self._changelog_link

    def get_remote_version(self) -> Optional[str]:
        """
        Get the raw version fetched from the remote server.

        Returns:
            Version string, or None until initialize() succeeds
        """
        return self._remote_version

    @staticmethod
    def create_url(url: str, *params: Any) -> str:
        """
        Build a request URL from a template.

        Args:
            url: Template with positional placeholders ("{0}", "{1}", ...)
            params: Values substituted into the template

        Returns:
            URL with an https:// scheme when none was given
        """
        if not _PROTOCOL.match(url):
            url = f"https://{url}"
        try:
            return url.format(*params)
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"Unable to create url from {url!r}: {e}") from e

    @property
    def timeout(self) -> float:
        return self.settings.get('http', {}).get('timeout', DEFAULT_TIMEOUT)

    @property
    def user_agent(self) -> str:
        user_agent = self.settings.get('http', {}).get('user_agent')
        if user_agent:
            return user_agent
        return f"VersionSentinel/{self.__class__.__name__} ({datetime.now():%a %b %d %H:%M:%S %Y})"

    def _request(self, accept: str = 'application/json', headers: Dict[str, str] = None) -> requests.Response:
        """Send a GET request to the remote URL."""
        headers = {
            'User-Agent': self.user_agent,
            'Accept': accept,
            **(headers or {}),
        }
        self.logger.debug(f"Fetching {self.remote_url}")
        return requests.get(self.remote_url, headers=headers, timeout=self.timeout)

    def test_connection(self) -> Optional[int]:
        """
        Log the response code of the remote server.

        Returns:
            HTTP status code, or None if the server could not be reached
        """
        try:
            response = self._request()
        except requests.exceptions.RequestException as e:
            self.logger.error(
                f"Connection test failed for {self.get_provider_name()}: "
                f"{type(e).__name__}: {e}"
            )
            return None

        self.logger.info(f"{self.get_provider_name()} responded with {response.status_code}")
        return response.status_code

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.remote_url}>"
