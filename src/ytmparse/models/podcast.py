"""Podcast models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from ytmparse.models.entities import YTMusicEntity
from ytmparse.utils.durations import format_duration
from ytmparse.utils.ids import is_podcast_show_id

__all__ = [
    "EpisodeItem",
    "PodcastEpisode",
    "PodcastEpisodesContinuation",
    "PodcastSection",
    "PodcastSectionItem",
    "PodcastShow",
    "PodcastShowDetail",
    "ShowItem",
]


class PodcastShow(YTMusicEntity):
    """A podcast show. ``id`` is the ``MPSPP...`` browse id."""

    id: str
    title: str = "Unknown Show"
    author: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    episode_count: int | None = None

    @property
    def has_navigable_id(self) -> bool:
        return is_podcast_show_id(self.id)


class PodcastEpisode(YTMusicEntity):
    """A podcast episode. ``id`` is the episode's video id."""

    id: str
    title: str = "Unknown Episode"
    show_title: str | None = None
    show_browse_id: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    published_date: str | None = None  # "3d ago", "Dec 28, 2025"
    duration: str | None = None  # "36 min", "1:11:19"
    duration_seconds: int | None = None
    playback_progress: float = 0.0  # 0.0-1.0
    is_played: bool = False

    @property
    def formatted_duration(self) -> str | None:
        """``H:MM:SS``/``M:SS`` when seconds are known, else the raw text."""
        if self.duration_seconds is not None:
            return format_duration(self.duration_seconds)
        return self.duration


class ShowItem(YTMusicEntity):
    kind: Literal["show"] = "show"
    show: PodcastShow

    @property
    def id(self) -> str:
        return self.show.id


class EpisodeItem(YTMusicEntity):
    kind: Literal["episode"] = "episode"
    episode: PodcastEpisode

    @property
    def id(self) -> str:
        return self.episode.id


PodcastSectionItem = Annotated[ShowItem | EpisodeItem, Field(discriminator="kind")]


class PodcastSection(YTMusicEntity):
    """A titled row on the podcast discovery page."""

    id: str
    title: str
    items: list[PodcastSectionItem]


class PodcastShowDetail(YTMusicEntity):
    """A show page with its first page of episodes."""

    show: PodcastShow
    episodes: list[PodcastEpisode] = Field(default_factory=list)
    continuation_token: str | None = None
    is_subscribed: bool = False

    @property
    def has_more(self) -> bool:
        return self.continuation_token is not None


class PodcastEpisodesContinuation(YTMusicEntity):
    """A further page of episodes."""

    episodes: list[PodcastEpisode] = Field(default_factory=list)
    continuation_token: str | None = None

    @property
    def has_more(self) -> bool:
        return self.continuation_token is not None
