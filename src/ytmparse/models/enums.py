"""Enumerations for ytmparse domain models."""

from enum import StrEnum


class LikeStatus(StrEnum):
    """Like/dislike status of a song."""

    LIKE = "LIKE"
    DISLIKE = "DISLIKE"
    INDIFFERENT = "INDIFFERENT"

    @classmethod
    def from_raw(cls, value: object) -> "LikeStatus":
        """Map a raw status string, defaulting to INDIFFERENT."""
        match value:
            case "LIKE":
                return cls.LIKE
            case "DISLIKE":
                return cls.DISLIKE
            case _:
                return cls.INDIFFERENT


class MusicVideoType(StrEnum):
    """YouTube Music video types.

    Read from ``watchEndpointMusicConfig.musicVideoType``.
    """

    ATV = "MUSIC_VIDEO_TYPE_ATV"  # Audio Track Video (album version)
    OMV = "MUSIC_VIDEO_TYPE_OMV"  # Official Music Video
    UGC = "MUSIC_VIDEO_TYPE_UGC"  # User Generated Content
    OFFICIAL_SOURCE_MUSIC = "MUSIC_VIDEO_TYPE_OFFICIAL_SOURCE_MUSIC"
    PODCAST_EPISODE = "MUSIC_VIDEO_TYPE_PODCAST_EPISODE"

    @property
    def has_video(self) -> bool:
        """Whether the content has a real video track worth showing."""
        return self in (MusicVideoType.OMV, MusicVideoType.UGC)


class PageType(StrEnum):
    """Browse endpoint page types used as item classification hints."""

    ALBUM = "MUSIC_PAGE_TYPE_ALBUM"
    PLAYLIST = "MUSIC_PAGE_TYPE_PLAYLIST"
    ARTIST = "MUSIC_PAGE_TYPE_ARTIST"
    USER_CHANNEL = "MUSIC_PAGE_TYPE_USER_CHANNEL"
    PODCAST_SHOW = "MUSIC_PAGE_TYPE_PODCAST_SHOW_DETAIL_PAGE"


class ItemKind(StrEnum):
    """Discriminator for section items."""

    SONG = "song"
    ALBUM = "album"
    PLAYLIST = "playlist"
    ARTIST = "artist"
