"""Shared fixtures: in-memory fakes of the Slack and Hackatime APIs."""

import httpx
import pytest

from app.services.activity import ActivityService
from app.services.emoji_cache import EmojiCache
from app.services.hackatime.client import HackatimeClient
from app.services.identity import IdentityService
from app.services.profile.service import ProfileService
from app.services.slack import SlackClient


class FakeSlack:
    """Answers users.info / users.profile.get / emoji.list from plain dicts."""

    def __init__(self):
        self.users: dict[str, dict] = {}
        self.profiles: dict[str, dict] = {}
        self.emoji: dict[str, str] = {}
        self.emoji_error: str | None = None
        self.fail_methods: set[str] = set()
        self.raw_responses: dict[str, httpx.Response] = {}
        self.calls: list[str] = []

    def add_user(self, user_id: str, profile: dict | None = None, **fields) -> None:
        self.users[user_id] = {"id": user_id, "profile": profile or {}, **fields}

    def handler(self, request: httpx.Request) -> httpx.Response:
        method = request.url.path.rsplit("/", 1)[-1]
        self.calls.append(method)
        if method in self.fail_methods:
            raise httpx.ConnectError("connection refused", request=request)
        if method in self.raw_responses:
            return self.raw_responses[method]

        user_id = request.url.params.get("user")
        if method == "users.info":
            if user_id not in self.users:
                return httpx.Response(200, json={"ok": False, "error": "user_not_found"})
            return httpx.Response(200, json={"ok": True, "user": self.users[user_id]})
        if method == "users.profile.get":
            if user_id not in self.profiles:
                return httpx.Response(200, json={"ok": False, "error": "user_not_found"})
            return httpx.Response(200, json={"ok": True, "profile": self.profiles[user_id]})
        if method == "emoji.list":
            if self.emoji_error:
                return httpx.Response(200, json={"ok": False, "error": self.emoji_error})
            return httpx.Response(200, json={"ok": True, "emoji": self.emoji})
        return httpx.Response(200, json={"ok": False, "error": "unknown_method"})


class FakeHackatime:
    def __init__(self):
        self.stats: dict[str, dict] = {}
        self.fail = False
        self.raw_paths: list[bytes] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.raw_paths.append(request.url.raw_path)
        if self.fail:
            raise httpx.ReadTimeout("timed out", request=request)
        # /api/v1/users/<id>/stats
        user_id = request.url.path.rstrip("/").split("/")[-2]
        if user_id not in self.stats:
            return httpx.Response(404, json={"error": "user not found"})
        return httpx.Response(200, json=self.stats[user_id])


@pytest.fixture
def fake_slack():
    return FakeSlack()


@pytest.fixture
def fake_hackatime():
    return FakeHackatime()


@pytest.fixture
def slack(fake_slack):
    client = SlackClient(token="xoxb-test", transport=httpx.MockTransport(fake_slack.handler))
    client.max_retries = 1
    return client


@pytest.fixture
def hackatime(fake_hackatime):
    client = HackatimeClient(api_key="test-key", transport=httpx.MockTransport(fake_hackatime.handler))
    client.max_retries = 1
    return client


@pytest.fixture
def emojis(slack, tmp_path):
    return EmojiCache(slack, tmp_path / "emoji.json")


@pytest.fixture
def identity(slack):
    return IdentityService(slack)


@pytest.fixture
def activity(hackatime):
    return ActivityService(hackatime, top_languages=3)


@pytest.fixture
def profile_service(identity, activity, emojis):
    return ProfileService(identity, activity, emojis)


@pytest.fixture
def stats_payload():
    return {
        "data": {
            "total_seconds": 7 * 3600 + 1800,
            "human_readable_daily_average": "1h 5m",
            "languages": [
                {"name": "Python", "total_seconds": 500, "text": "8m"},
                {"name": "Go", "total_seconds": 900, "text": "15m"},
                {"name": "Rust", "total_seconds": 100, "text": "1m"},
                {"name": "C", "total_seconds": 50, "text": "0m"},
            ],
        },
        "trust_factor": {"trust_level": "green", "trust_value": 3},
    }
