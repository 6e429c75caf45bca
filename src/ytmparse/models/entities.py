"""Core music entities: artists, albums, songs and playlists.

These are the stable values the rest of an application works with. They are
frozen, hold no back-references, and reference each other only by value.

The ``from_data`` constructors accept the flat, already-simplified mappings
some endpoints (and ytmusicapi) produce, e.g. ``{"videoId": ..., "title": ...}``.
Renderer-level documents go through ``ytmparse.parsers`` instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ytmparse.document import Node
from ytmparse.models.enums import LikeStatus, MusicVideoType
from ytmparse.utils.durations import format_duration, parse_duration
from ytmparse.utils.ids import (
    album_id_from_name,
    artist_id_from_name,
    is_album_id,
    is_channel_id,
    is_radio_id,
)
from ytmparse.utils.thumbnails import pick_widest

__all__ = [
    "Album",
    "Artist",
    "FeedbackTokens",
    "Playlist",
    "PlaylistContinuation",
    "PlaylistDetail",
    "Song",
    "YTMusicEntity",
]


class YTMusicEntity(BaseModel):
    """Base model for parsed entities."""

    model_config = ConfigDict(extra="ignore", frozen=True)


def _join_names(artists: list[Artist] | None) -> str:
    return ", ".join(a.name for a in artists or [] if a.name)


class Artist(YTMusicEntity):
    """An artist credit or artist page.

    ``id`` is either a channel id (``UC...``) or, for inline credits without
    one, a hash of the artist name.
    """

    id: str
    name: str = "Unknown Artist"
    thumbnail_url: str | None = None

    @property
    def has_navigable_id(self) -> bool:
        """Whether the id resolves to a real artist page upstream."""
        return is_channel_id(self.id)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Artist:
        node = Node(data)
        name = node["name"].as_str() or "Unknown Artist"
        artist_id = (
            node["id"].as_str()
            or node["browseId"].as_str()
            or artist_id_from_name(name)
        )
        return cls(
            id=artist_id,
            name=name,
            thumbnail_url=pick_widest(node["thumbnails"].as_list() or []),
        )


class Album(YTMusicEntity):
    """An album, either fully described or as an inline reference."""

    id: str
    title: str = "Unknown Album"
    artists: list[Artist] | None = None
    thumbnail_url: str | None = None
    year: str | None = None
    track_count: int | None = None

    @property
    def artists_display(self) -> str:
        return _join_names(self.artists)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Album | None:
        """Build an album from a flat mapping.

        The id is taken from ``browseId``, ``id`` then ``albumId``. Inline
        references that only carry a ``name`` get an id derived from it.

        Returns:
            The album, or None when neither an id nor a name is present.
        """
        node = Node(data)
        name = node["title"].as_str() or node["name"].as_str()
        album_id = (
            node["browseId"].as_str() or node["id"].as_str() or node["albumId"].as_str()
        )
        if album_id is None:
            if name is None:
                return None
            album_id = album_id_from_name(name)

        artists = node["artists"].as_list()
        return cls(
            id=album_id,
            title=name or "Unknown Album",
            artists=(
                [Artist.from_data(a) for a in artists if isinstance(a, Mapping)]
                if artists is not None
                else None
            ),
            thumbnail_url=pick_widest(node["thumbnails"].as_list() or []),
            year=node["year"].as_str(),
            track_count=node["trackCount"].as_int(),
        )


class FeedbackTokens(YTMusicEntity):
    """Tokens for adding or removing a song from the library."""

    add: str | None = None
    remove: str | None = None

    def token(self, adding: bool) -> str | None:
        """Return the token for the desired library action."""
        return self.add if adding else self.remove


class Song(YTMusicEntity):
    """A playable song or video. ``id`` is the video id."""

    id: str
    title: str = "Unknown Title"
    artists: list[Artist] = Field(default_factory=list)
    album: Album | None = None
    duration: float | None = None
    thumbnail_url: str | None = None
    music_video_type: MusicVideoType | None = None
    like_status: LikeStatus = LikeStatus.INDIFFERENT
    is_in_library: bool = False
    feedback_tokens: FeedbackTokens | None = None

    @property
    def video_id(self) -> str:
        return self.id

    @property
    def artists_display(self) -> str:
        return _join_names(self.artists)

    @property
    def duration_display(self) -> str:
        return format_duration(self.duration)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Song | None:
        """Build a song from a flat mapping.

        Returns:
            The song, or None when there is no ``videoId``.
        """
        node = Node(data)
        video_id = node["videoId"].as_str()
        if not video_id:
            return None

        duration = parse_duration(node["duration_seconds"].value)
        if duration is None:
            duration = parse_duration(node["duration"].value)

        album_data = node["album"].as_dict()
        artists = node["artists"].as_list() or []
        return cls(
            id=video_id,
            title=node["title"].as_str() or "Unknown Title",
            artists=[Artist.from_data(a) for a in artists if isinstance(a, Mapping)],
            album=Album.from_data(album_data) if album_data is not None else None,
            duration=duration,
            thumbnail_url=pick_widest(node["thumbnails"].as_list() or []),
        )


class Playlist(YTMusicEntity):
    """A playlist, album-as-playlist, radio mix or mood category tile.

    Mood category tiles are browse pages keyed by ``browse_id`` plus
    ``params``; their ``id`` joins the two as ``browseId_params`` so tiles
    sharing a browse id stay distinct. For everything else ``browse_id`` is
    unset and ``id`` is what to browse.
    """

    id: str
    title: str = "Unknown Playlist"
    description: str | None = None
    thumbnail_url: str | None = None
    track_count: int | None = None
    author: str | None = None
    browse_id: str | None = None
    params: str | None = None

    @property
    def browse_target(self) -> str:
        """Id to send in a browse request."""
        return self.browse_id or self.id

    @property
    def is_album(self) -> bool:
        """Albums have ``OLAK`` or ``MPRE`` ids."""
        return is_album_id(self.id)

    @property
    def is_radio(self) -> bool:
        return is_radio_id(self.id)

    @property
    def track_count_display(self) -> str:
        if self.track_count is None:
            return ""
        return "1 song" if self.track_count == 1 else f"{self.track_count} songs"

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Playlist | None:
        node = Node(data)
        playlist_id = node["playlistId"].as_str() or node["browseId"].as_str()
        if not playlist_id:
            return None

        track_count = node["trackCount"].as_int()
        if track_count is None and (raw := node["trackCount"].as_str()):
            digits = raw.replace(",", "").strip()
            track_count = int(digits) if digits.isdigit() else None

        author = node.path("authors", 0, "name").as_str() or node["author"].as_str()
        return cls(
            id=playlist_id,
            title=node["title"].as_str() or "Unknown Playlist",
            description=node["description"].as_str(),
            thumbnail_url=pick_widest(node["thumbnails"].as_list() or []),
            track_count=track_count,
            author=author,
        )


class PlaylistDetail(YTMusicEntity):
    """A playlist with its tracks."""

    playlist: Playlist
    tracks: list[Song] = Field(default_factory=list)
    duration: str | None = None

    @property
    def id(self) -> str:
        return self.playlist.id

    @property
    def title(self) -> str:
        return self.playlist.title

    @property
    def is_album(self) -> bool:
        return self.playlist.is_album


class PlaylistContinuation(YTMusicEntity):
    """One further page of playlist tracks."""

    tracks: list[Song] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def has_more(self) -> bool:
        return self.continuation_token is not None
