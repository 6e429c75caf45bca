"""Identifier prefix contract and deterministic identifiers.

YouTube Music never tells us what an identifier points to. The prefix is the
only type discrimination available, so these constants are part of the wire
contract and must not be changed casually.
"""

import hashlib
import re

CHANNEL_PREFIX = "UC"
ALBUM_PREFIXES = ("MPRE", "OLAK")
PODCAST_SHOW_PREFIX = "MPSPP"
LYRICS_PREFIX = "MPLYt"
RADIO_PREFIX = "RD"
PLAYLIST_PREFIXES = ("VL", "PL")
MOOD_CATEGORY_PREFIX = "FEmusic_moods_and_genres"
MOOD_CATEGORY_BROWSE_ID = "FEmusic_moods_and_genres_category"

_WHITESPACE = re.compile(r"\s+")


def is_channel_id(value: str | None) -> bool:
    """Whether ``value`` is a real, navigable channel (artist) id."""
    return bool(value) and value.startswith(CHANNEL_PREFIX)


def is_album_id(value: str | None) -> bool:
    return bool(value) and value.startswith(ALBUM_PREFIXES)


def is_playlist_id(value: str | None) -> bool:
    return bool(value) and value.startswith(PLAYLIST_PREFIXES)


def is_radio_id(value: str | None) -> bool:
    return bool(value) and value.startswith(RADIO_PREFIX)


def is_podcast_show_id(value: str | None) -> bool:
    return bool(value) and value.startswith(PODCAST_SHOW_PREFIX)


def is_lyrics_id(value: str | None) -> bool:
    return bool(value) and value.startswith(LYRICS_PREFIX)


def is_mood_category_id(value: str | None) -> bool:
    return bool(value) and value.startswith(MOOD_CATEGORY_PREFIX)


def parse_mood_category_id(value: str) -> tuple[str, str | None] | None:
    """Split a combined ``browseId_params`` mood tile id.

    Returns:
        ``(browse_id, params)``, or None when ``value`` is not a mood
        category id. An id with an unexpected base is returned whole.
    """
    if not is_mood_category_id(value):
        return None
    if value == MOOD_CATEGORY_BROWSE_ID:
        return value, None
    if value.startswith(f"{MOOD_CATEGORY_BROWSE_ID}_"):
        return MOOD_CATEGORY_BROWSE_ID, value[len(MOOD_CATEGORY_BROWSE_ID) + 1 :]
    return value, None


def normalize_name(name: str) -> str:
    """Normalize a display name for hashing: trim, collapse spaces, casefold."""
    return _WHITESPACE.sub(" ", name.strip()).casefold()


def stable_id(namespace: str, *components: str) -> str:
    """Build a deterministic identifier from a namespace and components.

    The same inputs always produce the same id, across calls and processes.

    Args:
        namespace: Kind of entity (e.g. ``"artist"``), keeps kinds apart.
        components: Values identifying the entity.

    Returns:
        A 32 character lowercase hex digest (truncated SHA-256).
    """
    payload = "\x1f".join((namespace, *components))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:32]


def artist_id_from_name(name: str) -> str:
    """Deterministic id for an inline artist credit with no channel id."""
    return stable_id("artist", normalize_name(name))


def album_id_from_name(name: str) -> str:
    """Deterministic id for an inline album reference with no browse id."""
    return stable_id("album", normalize_name(name))
