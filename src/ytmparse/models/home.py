"""Home and explore feed models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from ytmparse.models.entities import Album, Artist, Playlist, Song, YTMusicEntity

__all__ = [
    "AlbumItem",
    "ArtistItem",
    "HomeResponse",
    "HomeSection",
    "HomeSectionItem",
    "PlaylistItem",
    "SongItem",
]


class SongItem(YTMusicEntity):
    kind: Literal["song"] = "song"
    song: Song

    @property
    def id(self) -> str:
        return f"song-{self.song.id}"

    @property
    def title(self) -> str:
        return self.song.title

    @property
    def subtitle(self) -> str | None:
        return self.song.artists_display

    @property
    def thumbnail_url(self) -> str | None:
        return self.song.thumbnail_url

    @property
    def video_id(self) -> str | None:
        return self.song.id

    @property
    def browse_id(self) -> str | None:
        return None


class AlbumItem(YTMusicEntity):
    kind: Literal["album"] = "album"
    album: Album

    @property
    def id(self) -> str:
        return f"album-{self.album.id}"

    @property
    def title(self) -> str:
        return self.album.title

    @property
    def subtitle(self) -> str | None:
        return self.album.artists_display

    @property
    def thumbnail_url(self) -> str | None:
        return self.album.thumbnail_url

    @property
    def video_id(self) -> str | None:
        return None

    @property
    def browse_id(self) -> str | None:
        return self.album.id


class PlaylistItem(YTMusicEntity):
    kind: Literal["playlist"] = "playlist"
    playlist: Playlist

    @property
    def id(self) -> str:
        return f"playlist-{self.playlist.id}"

    @property
    def title(self) -> str:
        return self.playlist.title

    @property
    def subtitle(self) -> str | None:
        return self.playlist.author

    @property
    def thumbnail_url(self) -> str | None:
        return self.playlist.thumbnail_url

    @property
    def video_id(self) -> str | None:
        return None

    @property
    def browse_id(self) -> str | None:
        return self.playlist.browse_target

    @property
    def params(self) -> str | None:
        return self.playlist.params


class ArtistItem(YTMusicEntity):
    kind: Literal["artist"] = "artist"
    artist: Artist

    @property
    def id(self) -> str:
        return f"artist-{self.artist.id}"

    @property
    def title(self) -> str:
        return self.artist.name

    @property
    def subtitle(self) -> str | None:
        return "Artist"

    @property
    def thumbnail_url(self) -> str | None:
        return self.artist.thumbnail_url

    @property
    def video_id(self) -> str | None:
        return None

    @property
    def browse_id(self) -> str | None:
        return self.artist.id


HomeSectionItem = Annotated[
    SongItem | AlbumItem | PlaylistItem | ArtistItem,
    Field(discriminator="kind"),
]


class HomeSection(YTMusicEntity):
    """A titled row of items on the home or explore page.

    Sections are never empty: a section whose items all fail to parse is
    dropped by the parser.
    """

    id: str
    title: str
    items: list[HomeSectionItem]
    is_chart: bool = False


class HomeResponse(YTMusicEntity):
    """Sections of one home/explore page plus the cursor for the next one."""

    sections: list[HomeSection] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def has_more(self) -> bool:
        return self.continuation_token is not None
