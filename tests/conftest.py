"""
Pytest configuration and fixtures.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.audience import StaticMember
from providers.base_provider import BaseProvider


class FakeProvider(BaseProvider):
    """Provider returning a canned version, or raising a canned error."""

    def __init__(self, version=None, name='Fake', available=True, error=None):
        super().__init__('example.com/{0}', name)
        self.version = version
        self.name = name
        self.available = available
        self.error = error
        self.calls = 0

    def get_provider_name(self) -> str:
        return self.name

    def initialize(self) -> bool:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if not self.available:
            return False
        self._remote_version = self.version
        self._download_link = f'https://example.com/{self.name}/download'
        return True


@pytest.fixture
def make_provider():
    """Factory for fake providers."""
    return FakeProvider


@pytest.fixture
def published():
    """Collects events passed to the updater's publisher."""
    return []


@pytest.fixture
def admin():
    return StaticMember('admin', online=True, permissions={'sentinel.notify'})


@pytest.fixture
def guest():
    return StaticMember('guest', online=True)


@pytest.fixture
def offline_admin():
    return StaticMember('offline-admin', online=False, permissions={'sentinel.notify'})


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML configuration and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / 'updater.yaml'
        path.write_text(content, encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def mock_github_release():
    """Sample GitHub latest release payload."""
    return {
        'tag_name': 'v1.3.0',
        'html_url': 'https://github.com/owner/project/releases/tag/v1.3.0',
        'assets': [
            {'browser_download_url': 'https://github.com/owner/project/releases/download/v1.3.0/project.jar'}
        ],
    }
