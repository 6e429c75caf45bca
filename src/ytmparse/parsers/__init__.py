"""Parsers turning YouTube Music response documents into models.

Each parser module is selected by the caller, never by sniffing the
document. Parsers are pure functions and safe to call from any thread.

Public API:
    parse_home, parse_home_continuation - Home/explore feed
    parse_song, parse_radio_queue - "next" documents
    parse_artist_detail, parse_artist_songs - Artist pages
    parse_playlist_detail, parse_library_playlists,
    parse_playlist_continuation - Playlists
    lyrics_browse_id, parse_lyrics - Lyrics
    parse_discovery, parse_show_detail, ... - Podcasts
    parse_search, parse_search_suggestions - Search
"""

from ytmparse.parsers.artist import parse_artist_detail, parse_artist_songs
from ytmparse.parsers.home import (
    continuation_token,
    continuation_token_from_continuation,
    parse_home,
    parse_home_continuation,
)
from ytmparse.parsers.lyrics import lyrics_browse_id, parse_lyrics
from ytmparse.parsers.playlist import (
    parse_library_playlists,
    parse_playlist_continuation,
    parse_playlist_detail,
)
from ytmparse.parsers.podcast import (
    is_podcast_show,
    parse_discovery,
    parse_discovery_continuation,
    parse_episodes_continuation,
    parse_show_detail,
)
from ytmparse.parsers.search import parse_search, parse_search_suggestions
from ytmparse.parsers.song import (
    extract_panel_video_renderer,
    parse_menu_data,
    parse_radio_queue,
    parse_song,
    parse_song_item,
)

__all__ = [
    "continuation_token",
    "continuation_token_from_continuation",
    "extract_panel_video_renderer",
    "is_podcast_show",
    "lyrics_browse_id",
    "parse_artist_detail",
    "parse_artist_songs",
    "parse_discovery",
    "parse_discovery_continuation",
    "parse_episodes_continuation",
    "parse_home",
    "parse_home_continuation",
    "parse_library_playlists",
    "parse_lyrics",
    "parse_menu_data",
    "parse_playlist_continuation",
    "parse_playlist_detail",
    "parse_radio_queue",
    "parse_search",
    "parse_search_suggestions",
    "parse_show_detail",
    "parse_song",
    "parse_song_item",
]
