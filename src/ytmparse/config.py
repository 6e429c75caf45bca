"""Configuration for ytmparse."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class DocumentKind(StrEnum):
    """Response documents the CLI knows how to parse."""

    HOME = "home"
    HOME_CONTINUATION = "home-continuation"
    SONG = "song"
    RADIO = "radio"
    ARTIST = "artist"
    ARTIST_SONGS = "artist-songs"
    PLAYLIST = "playlist"
    PLAYLIST_CONTINUATION = "playlist-continuation"
    LIBRARY = "library"
    LYRICS = "lyrics"
    PODCASTS = "podcasts"
    PODCAST_SHOW = "podcast-show"
    EPISODES_CONTINUATION = "episodes-continuation"
    SEARCH = "search"
    SUGGESTIONS = "suggestions"

    @property
    def needs_id(self) -> bool:
        """Whether parsing this kind requires the requested entity id."""
        return self in (
            DocumentKind.SONG,
            DocumentKind.ARTIST,
            DocumentKind.PLAYLIST,
            DocumentKind.PODCAST_SHOW,
        )


@dataclass(frozen=True)
class APIConfig:
    """YouTube Music API configuration.

    Attributes:
        language: Interface language sent with every request.
        location: Country code for localized results ("" = server default).
        auth_path: Optional browser auth headers file for signed-in requests.
    """

    language: str = "en"
    location: str = ""
    auth_path: Path | None = None
