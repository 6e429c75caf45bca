"""Utility functions for ytmparse.

Available via `from ytmparse.utils import ...` for power users.
Not re-exported at the top-level `ytmparse` package.
"""

from ytmparse.utils.ids import (
    artist_id_from_name,
    is_album_id,
    is_channel_id,
    is_mood_category_id,
    is_playlist_id,
    is_podcast_show_id,
    is_radio_id,
    parse_mood_category_id,
    stable_id,
)

__all__ = [
    "artist_id_from_name",
    "is_album_id",
    "is_channel_id",
    "is_mood_category_id",
    "is_playlist_id",
    "is_podcast_show_id",
    "is_radio_id",
    "parse_mood_category_id",
    "stable_id",
]
