from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UNAVAILABLE = "N/A"


class ProfileDetail(BaseModel):
    """Extended profile fields from ``users.profile.get``."""

    title: str = ""


class MemberIdentity(BaseModel):
    member_id: str
    display_name: str
    real_name: str = ""
    avatar_url: str
    status_emoji: str | None = None
    status_text: str = ""

    # Role flags as reported by Slack
    is_restricted: bool = False  # multi-channel guest
    is_ultra_restricted: bool = False  # single-channel guest
    is_admin: bool = False
    is_bot: bool = False


class LanguageStat(BaseModel):
    name: str
    label: str
    text: str = ""
    total_seconds: int = Field(default=0, ge=0)
    icon_url: str


class ActivitySummary(BaseModel):
    lifetime: str
    daily_average: str
    trust_level: str
    languages: list[LanguageStat] = Field(default_factory=list)

    @classmethod
    def unavailable(cls) -> "ActivitySummary":
        """Sentinel summary used whenever the stats fetch or parse fails."""
        return cls(lifetime=UNAVAILABLE, daily_average=UNAVAILABLE, trust_level=UNAVAILABLE, languages=[])


class RoleBanner(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    severity: Literal["neutral", "warning"]


class ProfileRenderModel(BaseModel):
    """Everything the profile template needs, for a single request."""

    model_config = ConfigDict(frozen=True)

    member_id: str
    username: str
    avatar_url: str
    status_emoji_html: str
    status_text: str
    lifetime: str
    daily_average: str
    trust_level: str
    languages: tuple[LanguageStat, ...] = ()
    banner: RoleBanner | None = None
