from app.models.profile import ActivitySummary, MemberIdentity, ProfileRenderModel, RoleBanner

MULTI_CHANNEL_GUEST_BANNER = RoleBanner(
    message="This user is a multi-channel guest and can only access a few channels!", severity="neutral"
)
SINGLE_CHANNEL_GUEST_BANNER = RoleBanner(
    message="This user is a single-channel guest and can only access a single channel!", severity="neutral"
)
ADMIN_BANNER = RoleBanner(message="This user is an admin, beware!", severity="warning")
BOT_BANNER = RoleBanner(message="This is a bot. Please do not send them your freaky messages.", severity="neutral")


def select_banner(identity: MemberIdentity) -> RoleBanner | None:
    """
    Pick at most one role banner.

    Order matters: multi-channel guest, single-channel guest, admin, bot.
    The first flag that is set wins.
    """
    rules = (
        (identity.is_restricted, MULTI_CHANNEL_GUEST_BANNER),
        (identity.is_ultra_restricted, SINGLE_CHANNEL_GUEST_BANNER),
        (identity.is_admin, ADMIN_BANNER),
        (identity.is_bot, BOT_BANNER),
    )
    for flag, banner in rules:
        if flag:
            return banner
    return None


def build_render_model(
    identity: MemberIdentity, activity: ActivitySummary, status_emoji_html: str
) -> ProfileRenderModel:
    return ProfileRenderModel(
        member_id=identity.member_id,
        username=identity.display_name,
        avatar_url=identity.avatar_url,
        status_emoji_html=status_emoji_html,
        status_text=identity.status_text,
        lifetime=activity.lifetime,
        daily_average=activity.daily_average,
        trust_level=activity.trust_level,
        languages=tuple(activity.languages),
        banner=select_banner(identity),
    )
