from typing import Any

import httpx

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.exceptions import UpstreamError


class SlackClient(BaseClient):
    """
    Client for the Slack Web API.

    Slack reports most failures with HTTP 200 and ``{"ok": false, "error": ...}``;
    those are raised as UpstreamError so callers can tell them apart from transport errors.
    """

    def __init__(self, token: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(
            base_url=settings.SLACK_API_BASE_URL,
            token=token if token is not None else settings.SLACK_BOT_TOKEN,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_retries=settings.SLACK_MAX_RETRIES,
            transport=transport,
        )

    async def call(self, method: str, **params: Any) -> dict[str, Any]:
        try:
            data = await self.get(f"/{method}", params=params or None)
        except ValueError as e:
            raise UpstreamError(method, "invalid_response") from e
        if not isinstance(data, dict):
            raise UpstreamError(method, "invalid_response")
        if not data.get("ok"):
            raise UpstreamError(method, data.get("error"))
        return data

    async def users_info(self, user_id: str) -> dict[str, Any]:
        return await self.call("users.info", user=user_id)

    async def users_profile_get(self, user_id: str) -> dict[str, Any]:
        return await self.call("users.profile.get", user=user_id)

    async def emoji_list(self) -> dict[str, Any]:
        return await self.call("emoji.list")


slack_client = SlackClient()
