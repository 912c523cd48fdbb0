import hashlib
from typing import Any

import httpx
from loguru import logger

from app.core.config import settings
from app.core.exceptions import NotFoundError, UpstreamError
from app.models.profile import MemberIdentity, ProfileDetail
from app.services.slack import SlackClient, slack_client

GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?d=identicon"


def gravatar_url(email: str | None) -> str:
    """Deterministic identicon URL for an email; the static default avatar when there is none."""
    normalized = (email or "").strip().lower()
    if not normalized:
        return settings.DEFAULT_AVATAR_URL
    digest = hashlib.md5(normalized.encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(digest=digest)


class IdentityService:
    """
    Resolves a Slack member id into a MemberIdentity.
    """

    def __init__(self, client: SlackClient):
        self.client = client

    async def fetch_profile_detail(self, member_id: str) -> ProfileDetail | None:
        """Best-effort secondary profile fetch; None when it fails."""
        try:
            data = await self.client.users_profile_get(member_id)
            profile = data.get("profile") or {}
            return ProfileDetail(title=profile.get("title") or "")
        except Exception as e:
            logger.warning(f"[Profile] Failed to fetch profile for {member_id}: {e}")
            return None

    async def resolve_identity(self, member_id: str) -> MemberIdentity:
        try:
            data = await self.client.users_info(member_id)
        except (UpstreamError, httpx.HTTPError) as e:
            logger.info(f"Member with UID {member_id} not found: {e}")
            raise NotFoundError(member_id) from e

        user = data.get("user")
        if not isinstance(user, dict):
            logger.info(f"Member with UID {member_id} not found: users.info returned no user object")
            raise NotFoundError(member_id)
        profile: dict[str, Any] = user.get("profile")
        if not isinstance(profile, dict):
            profile = {}
        real_name = user.get("real_name") or profile.get("real_name") or ""
        display_name = profile.get("display_name") or real_name or member_id

        avatar_url = profile.get("image_original") or gravatar_url(profile.get("email"))

        detail = await self.fetch_profile_detail(member_id)

        status_emoji = profile.get("status_emoji") or None
        status_text = profile.get("status_text") or ""
        if not status_emoji and not status_text:
            # Title first, then real name
            status_text = (detail.title if detail else "") or real_name

        return MemberIdentity(
            member_id=member_id,
            display_name=display_name,
            real_name=real_name,
            avatar_url=avatar_url,
            status_emoji=status_emoji,
            status_text=status_text,
            is_restricted=bool(user.get("is_restricted")),
            is_ultra_restricted=bool(user.get("is_ultra_restricted")),
            is_admin=bool(user.get("is_admin")),
            is_bot=bool(user.get("is_bot")),
        )


identity_service = IdentityService(slack_client)
