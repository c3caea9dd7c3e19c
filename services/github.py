import logging
from typing import Protocol
import httpx
from config import USER_AGENT, Settings
from core.errors import UpstreamError
from schemas import DispatchClientPayload, DispatchPayload

logger = logging.getLogger(__name__)


class DispatchClient(Protocol):
    async def trigger(self, event_type: str, payload: DispatchClientPayload) -> None:
        ...


class GitHubDispatchClient:
    """Sends ``repository_dispatch`` events to the configured GitHub repository."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.github_token}",
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def trigger(self, event_type: str, payload: DispatchClientPayload) -> None:
        body = DispatchPayload(event_type=event_type, client_payload=payload)
        try:
            response = await self.http_client.post(
                self.settings.dispatch_url,
                headers=self._headers(),
                json=body.model_dump(),
            )
        except httpx.RequestError as e:
            logger.error(f"GitHub connection error in trigger: {e}")
            raise UpstreamError("Connection error communicating with GitHub") from e

        if not response.is_success:
            logger.error(f"GitHub API error: status={response.status_code} body={response.text}")
            raise UpstreamError(
                f"GitHub API error: {response.status_code}",
                upstream_status=response.status_code,
                upstream_body=response.text,
            )

        logger.info(
            f"Dispatched {event_type} to {self.settings.github_owner}/{self.settings.github_repo} "
            f"for user: {payload.username}"
        )
