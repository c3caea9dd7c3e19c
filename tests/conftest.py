"""
Shared fixtures for the submission service tests.

Provides a test ``Settings`` instance, a recording fake for the GitHub
dispatch client, and a ``TestClient`` wired to both.
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core.errors import UpstreamError
from main import create_app
from schemas import DispatchClientPayload

# NIP-19 reference vector
SAMPLE_NPUB = "npub10elfcs4fr0l0r8af98jlmgdh9c8tcxjvz9qkw038js35mp4dma8qzvjptg"
SAMPLE_HEX = "7e7e9c42a91bfef19fa929e5fda1b72e0ebc1a4c1141673e2794234d86addf4e"


class FakeDispatchClient:
    """Records every trigger call; optionally fails with a given error."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[str, DispatchClientPayload]] = []

    async def trigger(self, event_type: str, payload: DispatchClientPayload) -> None:
        self.calls.append((event_type, payload))
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings():
    return Settings(
        github_token="test-token",
        github_owner="test-owner",
        github_repo="test-repo",
        allowed_origin="https://example.org",
    )


@pytest.fixture
def fake_dispatch():
    return FakeDispatchClient()


@pytest.fixture
def failing_dispatch():
    return FakeDispatchClient(
        error=UpstreamError("GitHub API error: 422", upstream_status=422, upstream_body="Unprocessable")
    )


@pytest.fixture
def client(settings, fake_dispatch):
    return TestClient(create_app(settings, fake_dispatch))
