import emoji
from markupsafe import escape

from app.services.emoji_cache import EmojiCache

HIDDEN_PLACEHOLDER = '<span id="statusEmoji" style="display: none;"></span>'


def unicode_emoji(short_name: str) -> str | None:
    """Standard emoji character for a short name (``smile`` -> 😄), or None."""
    if not short_name:
        return None
    alias = f":{short_name}:"
    rendered = emoji.emojize(alias, language="alias")
    return None if rendered == alias else rendered


def render_status_emoji(token: str | None, cache: EmojiCache) -> str:
    """
    Markup for a status emoji token such as ``:partyparrot:``.

    Custom emoji from the cache win, then standard emoji, then the token itself.
    """
    if not token:
        return HIDDEN_PLACEHOLDER

    short_name = token.replace(":", "")
    url = cache.lookup(short_name)
    if url:
        return f'<img src="{escape(url)}" style="width: 1em; height: 1em;" alt="{escape(token)}">'

    character = unicode_emoji(short_name) or unicode_emoji(cache.alias_target(short_name))
    if character:
        return character

    return str(escape(token))
