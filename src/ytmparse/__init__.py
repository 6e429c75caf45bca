"""ytmparse - Parse YouTube Music web responses into stable entities.

YouTube Music's web API returns deeply nested, undocumented JSON whose shape
varies by page and changes without notice. This library turns those
documents into frozen pydantic models (songs, albums, artists, playlists,
home sections, podcasts, lyrics) and never crashes on missing fields.

Parsers perform no I/O: fetch the document however you like (ytmusicapi,
a recorded fixture...) and hand the decoded JSON to the matching parser.

Examples:
    Parse the home feed:
    ```python
    from ytmparse import parse_home

    home = parse_home(document)
    for section in home.sections:
        print(section.title, [item.title for item in section.items])
    ```

    Fetch and parse a playlist:
    ```python
    from ytmparse import YTMusicRawClient, parse_playlist_detail

    client = YTMusicRawClient()
    detail = parse_playlist_detail(client.browse("VLPLxxx"), "VLPLxxx")
    ```
"""

from ytmparse.client import YTMusicRawClient, YTMusicRawProtocol
from ytmparse.config import APIConfig, DocumentKind
from ytmparse.document import Document, Node
from ytmparse.exceptions import (
    APIError,
    DocumentLoadError,
    StructureMismatchError,
    YTMParseError,
)
from ytmparse.models import (
    Album,
    AlbumItem,
    Artist,
    ArtistDetail,
    ArtistItem,
    EpisodeItem,
    FeedbackTokens,
    HomeResponse,
    HomeSection,
    HomeSectionItem,
    ItemKind,
    LikeStatus,
    Lyrics,
    MusicVideoType,
    PageType,
    Playlist,
    PlaylistContinuation,
    PlaylistDetail,
    PlaylistItem,
    PodcastEpisode,
    PodcastEpisodesContinuation,
    PodcastSection,
    PodcastSectionItem,
    PodcastShow,
    PodcastShowDetail,
    SearchResponse,
    SearchSuggestion,
    ShowItem,
    Song,
    SongItem,
)
from ytmparse.parsers import (
    continuation_token,
    continuation_token_from_continuation,
    extract_panel_video_renderer,
    is_podcast_show,
    lyrics_browse_id,
    parse_artist_detail,
    parse_artist_songs,
    parse_discovery,
    parse_discovery_continuation,
    parse_episodes_continuation,
    parse_home,
    parse_home_continuation,
    parse_library_playlists,
    parse_lyrics,
    parse_menu_data,
    parse_playlist_continuation,
    parse_playlist_detail,
    parse_radio_queue,
    parse_search,
    parse_search_suggestions,
    parse_show_detail,
    parse_song,
    parse_song_item,
)

__all__ = [
    "APIConfig",
    "APIError",
    "Album",
    "AlbumItem",
    "Artist",
    "ArtistDetail",
    "ArtistItem",
    "Document",
    "DocumentKind",
    "DocumentLoadError",
    "EpisodeItem",
    "FeedbackTokens",
    "HomeResponse",
    "HomeSection",
    "HomeSectionItem",
    "ItemKind",
    "LikeStatus",
    "Lyrics",
    "MusicVideoType",
    "Node",
    "PageType",
    "Playlist",
    "PlaylistContinuation",
    "PlaylistDetail",
    "PlaylistItem",
    "PodcastEpisode",
    "PodcastEpisodesContinuation",
    "PodcastSection",
    "PodcastSectionItem",
    "PodcastShow",
    "PodcastShowDetail",
    "SearchResponse",
    "SearchSuggestion",
    "ShowItem",
    "Song",
    "SongItem",
    "StructureMismatchError",
    "YTMParseError",
    "YTMusicRawClient",
    "YTMusicRawProtocol",
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
