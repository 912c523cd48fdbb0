from typing import Any

from loguru import logger

from app.core.config import settings
from app.models.profile import ActivitySummary, LanguageStat
from app.services.hackatime.client import HackatimeClient, hackatime_client
from app.services.icons import resolve_language

TRUST_LEVELS: dict[str, str] = {
    "blue": "Unanalyzed",
    "red": "Banned",
    "yellow": "Suspected",
    "green": "Trusted",
}
UNKNOWN_TRUST_LEVEL = "unknown"
DEFAULT_DAILY_AVERAGE = "0m"


def format_lifetime(total_seconds: float | int | None) -> str:
    """Whole hours of coding time, e.g. ``"42h"``."""
    return f"{int(total_seconds or 0) // 3600}h"


def map_trust_level(trust_factor: dict[str, Any] | None) -> str:
    token = (trust_factor or {}).get("trust_level")
    if not token:
        return UNKNOWN_TRUST_LEVEL
    token = str(token)
    return TRUST_LEVELS.get(token, token)


def rank_languages(languages: list[dict[str, Any]], limit: int) -> list[LanguageStat]:
    """Map raw language entries to LanguageStat, most time first (stable on ties)."""
    stats = []
    for entry in languages:
        label = entry.get("name") or ""
        canonical, icon_url = resolve_language(label)
        stats.append(
            LanguageStat(
                name=canonical,
                label=label,
                text=entry.get("text") or "",
                total_seconds=max(0, int(entry.get("total_seconds") or 0)),
                icon_url=icon_url,
            )
        )
    stats.sort(key=lambda s: s.total_seconds, reverse=True)
    return stats[:limit]


def parse_stats(payload: dict[str, Any], limit: int) -> ActivitySummary:
    data = payload.get("data") or {}
    return ActivitySummary(
        lifetime=format_lifetime(data.get("total_seconds")),
        daily_average=data.get("human_readable_daily_average") or DEFAULT_DAILY_AVERAGE,
        trust_level=map_trust_level(payload.get("trust_factor")),
        languages=rank_languages(data.get("languages") or [], limit),
    )


class ActivityService:
    """Coding activity for a member, degraded to a sentinel summary on any failure."""

    def __init__(self, client: HackatimeClient, top_languages: int = 3):
        self.client = client
        self.top_languages = top_languages

    async def fetch_activity(self, member_id: str) -> ActivitySummary:
        try:
            payload = await self.client.get_user_stats(member_id)
            return parse_stats(payload, self.top_languages)
        except Exception as e:
            logger.warning(f"[Activity] Failed to fetch stats for {member_id}: {e}")
            return ActivitySummary.unavailable()


activity_service = ActivityService(hackatime_client, top_languages=settings.TOP_LANGUAGES_LIMIT)
