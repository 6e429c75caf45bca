"""Data models for ytmparse.

Public API:
    Song, Artist, Album, Playlist - Core entities
    PlaylistDetail, PlaylistContinuation - Playlist pages
    HomeSection, HomeSectionItem, HomeResponse - Home/explore feed
    ArtistDetail - Artist page
    PodcastShow, PodcastEpisode, PodcastSection, ... - Podcasts
    Lyrics - Lyrics text and attribution
    SearchResponse, SearchSuggestion - Search results and suggestions
"""

from ytmparse.models.artist import ArtistDetail
from ytmparse.models.entities import (
    Album,
    Artist,
    FeedbackTokens,
    Playlist,
    PlaylistContinuation,
    PlaylistDetail,
    Song,
)
from ytmparse.models.enums import ItemKind, LikeStatus, MusicVideoType, PageType
from ytmparse.models.home import (
    AlbumItem,
    ArtistItem,
    HomeResponse,
    HomeSection,
    HomeSectionItem,
    PlaylistItem,
    SongItem,
)
from ytmparse.models.lyrics import Lyrics
from ytmparse.models.podcast import (
    EpisodeItem,
    PodcastEpisode,
    PodcastEpisodesContinuation,
    PodcastSection,
    PodcastSectionItem,
    PodcastShow,
    PodcastShowDetail,
    ShowItem,
)
from ytmparse.models.search import SearchResponse, SearchSuggestion

__all__ = [
    "Album",
    "AlbumItem",
    "Artist",
    "ArtistDetail",
    "ArtistItem",
    "EpisodeItem",
    "FeedbackTokens",
    "HomeResponse",
    "HomeSection",
    "HomeSectionItem",
    "ItemKind",
    "LikeStatus",
    "Lyrics",
    "MusicVideoType",
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
]
