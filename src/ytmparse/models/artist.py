"""Artist page model."""

from __future__ import annotations

from pydantic import Field

from ytmparse.models.entities import Album, Artist, Song, YTMusicEntity


class ArtistDetail(YTMusicEntity):
    """Everything shown on an artist page.

    Attributes:
        artist: The artist itself.
        description: Biography text.
        songs: Top songs shown on the page.
        albums: Albums from the albums carousel (album ids only).
        thumbnail_url: Header image.
        channel_id: Set only when the artist id is a real ``UC`` channel id.
        is_subscribed: Whether the signed-in user follows the artist.
        subscriber_count: Display text such as ``"34.6M subscribers"``.
        has_more_songs: Whether the full song list lives on another page.
        songs_browse_id: Browse id of the full song list.
        songs_params: Params to send with ``songs_browse_id``.
        mix_playlist_id: Artist radio playlist id (``RDEM...``).
        mix_video_id: Starting video for the radio, when the button has one.
    """

    artist: Artist
    description: str | None = None
    songs: list[Song] = Field(default_factory=list)
    albums: list[Album] = Field(default_factory=list)
    thumbnail_url: str | None = None
    channel_id: str | None = None
    is_subscribed: bool = False
    subscriber_count: str | None = None
    has_more_songs: bool = False
    songs_browse_id: str | None = None
    songs_params: str | None = None
    mix_playlist_id: str | None = None
    mix_video_id: str | None = None

    @property
    def id(self) -> str:
        return self.artist.id

    @property
    def name(self) -> str:
        return self.artist.name
