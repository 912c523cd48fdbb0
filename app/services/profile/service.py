import asyncio

from loguru import logger

from app.models.profile import ProfileRenderModel
from app.services.activity import ActivityService, activity_service
from app.services.emoji_cache import EmojiCache, emoji_cache
from app.services.identity import IdentityService, identity_service
from app.services.profile.builder import build_render_model
from app.services.status_emoji import render_status_emoji


class ProfileService:
    """
    Aggregates identity, presence and coding activity for one member.

    Only NotFoundError (from the identity lookup) escapes; every other upstream
    failure has already been turned into fallback values by the time it gets here.
    """

    def __init__(self, identity: IdentityService, activity: ActivityService, emojis: EmojiCache):
        self.identity = identity
        self.activity = activity
        self.emojis = emojis

    async def build(self, member_id: str) -> ProfileRenderModel:
        activity_task = asyncio.create_task(self.activity.fetch_activity(member_id))
        try:
            identity = await self.identity.resolve_identity(member_id)
        except BaseException:
            # No page will be rendered, stop the stats fetch
            activity_task.cancel()
            raise
        activity = await activity_task
        status_emoji_html = render_status_emoji(identity.status_emoji, self.emojis)
        logger.info(f"Visited profile of {identity.display_name}")
        return build_render_model(identity, activity, status_emoji_html)


profile_service = ProfileService(identity_service, activity_service, emoji_cache)
