"""Search results and suggestion models."""

from __future__ import annotations

from pydantic import Field

from ytmparse.models.entities import Album, Artist, Playlist, Song, YTMusicEntity
from ytmparse.models.home import (
    AlbumItem,
    ArtistItem,
    HomeSectionItem,
    PlaylistItem,
    SongItem,
)


class SearchResponse(YTMusicEntity):
    """Search results grouped by entity type, in response order."""

    songs: list[Song] = Field(default_factory=list)
    albums: list[Album] = Field(default_factory=list)
    artists: list[Artist] = Field(default_factory=list)
    playlists: list[Playlist] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.songs or self.albums or self.artists or self.playlists)

    @property
    def all_items(self) -> list[HomeSectionItem]:
        """All results as tagged items (songs, albums, artists, playlists)."""
        items: list[HomeSectionItem] = []
        items.extend(SongItem(song=song) for song in self.songs)
        items.extend(AlbumItem(album=album) for album in self.albums)
        items.extend(ArtistItem(artist=artist) for artist in self.artists)
        items.extend(PlaylistItem(playlist=playlist) for playlist in self.playlists)
        return items


class SearchSuggestion(YTMusicEntity):
    """A query completion offered while typing, or a past search."""

    query: str
    is_history: bool = False
