import asyncio
import json
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from app.core.config import settings
from app.core.exceptions import UpstreamError
from app.services.slack import SlackClient, slack_client

ALIAS_PREFIX = "alias:"
MAX_ALIAS_DEPTH = 5


class EmojiCache:
    """
    Custom emoji short name -> image URL, refreshed from Slack ``emoji.list``.

    Single writer (the refresh job), many readers (requests). The snapshot is a
    read-only mapping that is replaced as a whole and never mutated in place, so
    a reader sees either the old or the new mapping.
    """

    def __init__(self, client: SlackClient, cache_file: str | Path):
        self.client = client
        self.cache_file = Path(cache_file)
        self._snapshot: Mapping[str, str] = MappingProxyType({})

    @property
    def snapshot(self) -> Mapping[str, str]:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def _swap(self, emojis: Mapping[str, str]) -> None:
        self._snapshot = MappingProxyType(dict(emojis))

    def load(self) -> int:
        """Seed the snapshot from the cache file. A missing or broken file leaves it empty."""
        if not self.cache_file.exists():
            return 0
        try:
            data = json.loads(self.cache_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"[Emoji] Ignoring unreadable cache file {self.cache_file}: {e}")
            return 0
        if not isinstance(data, dict):
            logger.warning(f"[Emoji] Ignoring cache file {self.cache_file}: not a JSON object")
            return 0
        self._swap({str(k): str(v) for k, v in data.items()})
        logger.info(f"[Emoji] Loaded {len(self._snapshot)} emojis from {self.cache_file}")
        return len(self._snapshot)

    def _persist(self, emojis: Mapping[str, str]) -> None:
        tmp = self.cache_file.with_name(self.cache_file.name + ".tmp")
        tmp.write_text(json.dumps(dict(emojis), indent=2), encoding="utf-8")
        os.replace(tmp, self.cache_file)

    async def refresh(self) -> int | None:
        """
        Fetch the full custom emoji list and replace the snapshot.

        Returns the number of emojis fetched, or None when the refresh failed and
        the previous snapshot was kept.
        """
        try:
            data = await self.client.emoji_list()
            emojis = data.get("emoji") or {}
            self._swap(emojis)
        except UpstreamError as e:
            logger.error(f"[Emoji] Failed to fetch emoji list: {e.error}")
            return None
        except Exception as e:
            logger.error(f"[Emoji] Error refreshing emoji list: {e}")
            return None

        try:
            await asyncio.to_thread(self._persist, self._snapshot)
        except OSError as e:
            logger.warning(f"[Emoji] Could not write {self.cache_file}: {e}")

        logger.info(f"[Emoji] Refreshed emoji cache ({len(self._snapshot)} emojis)")
        return len(self._snapshot)

    def lookup(self, short_name: str) -> str | None:
        """Image URL for a custom emoji, following Slack ``alias:`` entries."""
        snapshot = self._snapshot
        url = snapshot.get(short_name)
        depth = 0
        while url and url.startswith(ALIAS_PREFIX) and depth < MAX_ALIAS_DEPTH:
            url = snapshot.get(url[len(ALIAS_PREFIX) :])
            depth += 1
        if url and url.startswith(ALIAS_PREFIX):
            return None
        return url

    def alias_target(self, short_name: str) -> str:
        """Name an ``alias:`` chain ends on; a standard emoji when it leaves the custom set."""
        snapshot = self._snapshot
        name = short_name
        for _ in range(MAX_ALIAS_DEPTH):
            value = snapshot.get(name)
            if not value or not value.startswith(ALIAS_PREFIX):
                break
            name = value[len(ALIAS_PREFIX) :]
        return name

    async def run_forever(self, interval: float | None = None) -> None:
        """Refresh now and then every ``interval`` seconds until cancelled."""
        interval = interval or settings.EMOJI_REFRESH_INTERVAL_SECONDS
        while True:
            await self.refresh()
            await asyncio.sleep(interval)


emoji_cache = EmojiCache(slack_client, settings.EMOJI_CACHE_FILE)
