"""
Polymart provider using the plain text resource info endpoint.
"""

from typing import Dict, Any

from .base_provider import BaseProvider


class PolymartProvider(BaseProvider):
    """Provider for resources hosted on Polymart."""

    API_URL = 'https://api.polymart.org/v1/getResourceInfoSimple/?resource_id={0}&key=version'
    RESOURCE_URL = 'https://polymart.org/resource/{0}'

    def __init__(self, resource_id: int, settings: Dict[str, Any] = None):
        super().__init__(self.API_URL, resource_id, settings=settings)
        self.resource_id = resource_id

        # Polymart links are known up front, only the version is fetched
        self._download_link = self.RESOURCE_URL.format(resource_id)
        self._changelog_link = f"{self._download_link}/updates"

    def get_provider_name(self) -> str:
        return 'Polymart'

    def initialize(self) -> bool:
        response = self._request(accept='text/plain')
        response.raise_for_status()

        body = response.text or ''
        if 'Unknown resource id' in body:
            self.logger.warning(
                f"Unable to connect to provider, perhaps resource {self.resource_id} does not exist"
            )
            return False

        lines = [line.strip() for line in body.splitlines() if line.strip()]
        if not lines:
            self.logger.warning(f"Polymart returned no version for resource {self.resource_id}")
            return False

        self._remote_version = lines[0]
        return True
