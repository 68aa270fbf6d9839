"""
Bukkit provider backed by the CurseForge servermods files API.
"""

from typing import Dict, Any

from .base_provider import BaseProvider


class BukkitProvider(BaseProvider):
    """Provider for resources hosted on the Bukkit network."""

    API_URL = 'https://api.curseforge.com/servermods/files?projectids={0}'

    def __init__(self, resource_id: int, settings: Dict[str, Any] = None):
        super().__init__(self.API_URL, resource_id, settings=settings)
        self.resource_id = resource_id

    def get_provider_name(self) -> str:
        return 'Bukkit'

    def initialize(self) -> bool:
        """
        Fetch the newest file uploaded for the project.

        The API lists files oldest first, so the last entry is the latest.

        Returns:
            True if a file was found, False otherwise
        """
        response = self._request()

        if response.status_code == 404:
            self.logger.warning(
                f"Unable to connect to provider, perhaps resource {self.resource_id} does not exist"
            )
            return False

        response.raise_for_status()
        files = response.json()

        if not files:
            self.logger.warning(f"There are no files yet for resource {self.resource_id}")
            return False

        latest = files[-1]
        self._remote_version = latest.get('name')
        self._download_link = latest.get('downloadUrl')
        return True
