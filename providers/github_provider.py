"""
GitHub provider reading the latest published release of a repository.
"""

import os
from typing import Dict, Any

from dotenv import load_dotenv

from .base_provider import BaseProvider

# Load environment variables (GITHUB_TOKEN)
load_dotenv()

RATE_LIMIT_CODES = (403, 429)


class GithubProvider(BaseProvider):
    """Provider for GitHub releases."""

    API_URL = 'https://api.github.com/repos/{0}/releases/latest'

    def __init__(self, repo: str, settings: Dict[str, Any] = None, token: str = None):
        """
        Args:
            repo: Repository in "owner/name" form
            settings: Application settings
            token: API token. If not provided, reads from GITHUB_TOKEN env var.
        """
        super().__init__(self.API_URL, repo, settings=settings)
        self.repo = repo
        self.token = token or os.getenv('GITHUB_TOKEN')

    def get_provider_name(self) -> str:
        return 'GitHub'

    def initialize(self) -> bool:
        headers = {'Authorization': f"Bearer {self.token}"} if self.token else None
        response = self._request(accept='application/vnd.github+json', headers=headers)

        if response.status_code == 404:
            self.logger.warning(
                f"Unable to find releases for {self.repo}, perhaps the repository does not exist"
            )
            return False

        if response.status_code in RATE_LIMIT_CODES:
            self.logger.warning(f"Unable to connect to {self.get_provider_name()}: rate limit reached")
            return False

        response.raise_for_status()
        release = response.json()

        tag_name = release.get('tag_name')
        if not tag_name:
            self.logger.warning(f"Latest release of {self.repo} has no tag")
            return False

        self._remote_version = str(tag_name).strip()
        self._changelog_link = release.get('html_url')

        assets = release.get('assets') or []
        if assets:
            self._download_link = assets[0].get('browser_download_url')

        self.logger.info(f"Latest GitHub release for {self.repo}: {self._remote_version}")
        return True
