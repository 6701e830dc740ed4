"""
Shared pytest fixtures for Archive Client tests.

Provides archive configuration, token providers and client instances bound
to a fake archive base URL that pytest-httpx intercepts.
"""

from typing import List, Sequence

import pytest
import pytest_asyncio

from archive_client.api_clients import (
    AccessToken,
    StaticTokenProvider,
    VestfoldArchiveClient,
    VFKArchiveClient,
)
from archive_client.config import ArchiveConfig

BASE_URL = "https://archive.example.com/api"
ARCHIVE_URL = f"{BASE_URL}/archive"
SCOPES = ["https://archive.example.com/.default"]


class RotatingTokenProvider:
    """Issues a new token on every call: token-1, token-2, ..."""

    def __init__(self):
        self.calls: List[List[str]] = []

    async def get_access_token(self, scopes: Sequence[str]) -> AccessToken:
        self.calls.append(list(scopes))
        return AccessToken(token=f"token-{len(self.calls)}")


@pytest.fixture
def archive_config() -> ArchiveConfig:
    """Valid archive configuration pointing at the fake archive."""
    return ArchiveConfig(scopes=SCOPES, base_url=BASE_URL)


@pytest.fixture
def token_provider() -> StaticTokenProvider:
    """Token provider always returning 'test-token'."""
    return StaticTokenProvider("test-token")


@pytest.fixture
def rotating_token_provider() -> RotatingTokenProvider:
    """Token provider returning a distinct token per call."""
    return RotatingTokenProvider()


@pytest_asyncio.fixture
async def vfk_client(archive_config, token_provider):
    """VFK client closed after the test."""
    client = VFKArchiveClient(config=archive_config, auth_service=token_provider)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def vestfold_client(archive_config, token_provider):
    """Vestfold client closed after the test."""
    client = VestfoldArchiveClient(config=archive_config, auth_service=token_provider)
    yield client
    await client.close()
