from typing import Any
from urllib.parse import quote

import httpx

from app.core.base_client import BaseClient
from app.core.config import settings


class HackatimeClient(BaseClient):
    """
    Client for the Hackatime (WakaTime-compatible) stats API.
    """

    def __init__(self, api_key: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(
            base_url=settings.HACKATIME_BASE_URL,
            token=api_key if api_key is not None else settings.HACKATIME_API_KEY,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_retries=settings.HACKATIME_MAX_RETRIES,
            transport=transport,
        )

    async def get_user_stats(self, user_id: str) -> dict[str, Any]:
        """Get lifetime stats (totals, daily average, languages, trust factor) for a user."""
        return await self.get(f"/users/{quote(user_id, safe='')}/stats", params={"features": "languages"})


hackatime_client = HackatimeClient()
