import hashlib

import pytest

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.services.identity import gravatar_url


def test_gravatar_url_normalizes_email():
    digest = hashlib.md5(b"someone@example.com").hexdigest()
    assert gravatar_url("  Someone@Example.com ") == f"https://www.gravatar.com/avatar/{digest}?d=identicon"


def test_gravatar_url_without_email_uses_default_avatar():
    assert gravatar_url(None) == settings.DEFAULT_AVATAR_URL
    assert gravatar_url("   ") == settings.DEFAULT_AVATAR_URL


@pytest.mark.asyncio
async def test_resolve_identity_reads_profile(identity, fake_slack):
    fake_slack.add_user(
        "U1",
        profile={
            "display_name": "ada",
            "image_original": "https://avatars.example/ada.png",
            "status_emoji": ":rocket:",
            "status_text": "shipping",
        },
        real_name="Ada Lovelace",
        is_admin=True,
    )
    fake_slack.profiles["U1"] = {"title": "Engineer"}

    member = await identity.resolve_identity("U1")

    assert member.display_name == "ada"
    assert member.avatar_url == "https://avatars.example/ada.png"
    assert member.status_emoji == ":rocket:"
    assert member.status_text == "shipping"
    assert member.is_admin is True
    assert member.is_bot is False


@pytest.mark.asyncio
async def test_display_name_falls_back_to_real_name(identity, fake_slack):
    fake_slack.add_user("U1", profile={"display_name": ""}, real_name="Ada Lovelace")

    member = await identity.resolve_identity("U1")

    assert member.display_name == "Ada Lovelace"


@pytest.mark.asyncio
async def test_avatar_falls_back_to_gravatar(identity, fake_slack):
    fake_slack.add_user("U1", profile={"email": "Ada@Example.com"}, real_name="Ada")

    member = await identity.resolve_identity("U1")

    assert member.avatar_url == gravatar_url("ada@example.com")


@pytest.mark.asyncio
async def test_empty_status_falls_back_to_title(identity, fake_slack):
    fake_slack.add_user("U1", profile={}, real_name="Ada Lovelace")
    fake_slack.profiles["U1"] = {"title": "Countess of Computing"}

    member = await identity.resolve_identity("U1")

    assert member.status_emoji is None
    assert member.status_text == "Countess of Computing"


@pytest.mark.asyncio
async def test_empty_status_and_title_fall_back_to_real_name(identity, fake_slack):
    fake_slack.add_user("U1", profile={}, real_name="Ada Lovelace")
    fake_slack.profiles["U1"] = {"title": ""}

    member = await identity.resolve_identity("U1")

    assert member.status_text == "Ada Lovelace"


@pytest.mark.asyncio
async def test_status_emoji_alone_keeps_empty_text(identity, fake_slack):
    fake_slack.add_user("U1", profile={"status_emoji": ":coffee:"}, real_name="Ada")
    fake_slack.profiles["U1"] = {"title": "Engineer"}

    member = await identity.resolve_identity("U1")

    assert member.status_text == ""


@pytest.mark.asyncio
async def test_profile_detail_failure_is_not_fatal(identity, fake_slack):
    fake_slack.add_user("U1", profile={}, real_name="Ada Lovelace")
    fake_slack.fail_methods.add("users.profile.get")

    assert await identity.fetch_profile_detail("U1") is None
    member = await identity.resolve_identity("U1")

    assert member.status_text == "Ada Lovelace"


@pytest.mark.asyncio
async def test_unknown_member_raises_not_found(identity):
    with pytest.raises(NotFoundError) as exc_info:
        await identity.resolve_identity("UNOBODY")
    assert exc_info.value.member_id == "UNOBODY"


@pytest.mark.asyncio
async def test_transport_failure_raises_not_found(identity, fake_slack):
    fake_slack.add_user("U1", profile={}, real_name="Ada")
    fake_slack.fail_methods.add("users.info")

    with pytest.raises(NotFoundError):
        await identity.resolve_identity("U1")
