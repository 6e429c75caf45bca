"""Podcast parser: discovery page, show pages and episode continuations.

The discovery page has the same section layout as the home feed, but its
items are shows (``MPSPP...`` browse ids) and episodes (video ids).
"""

import logging
from dataclasses import dataclass

from ytmparse.document import Document, Node
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
from ytmparse.parsers.helpers import (
    REMOVE_ICONS,
    best_thumbnail,
    browse_id_of,
    continuation_token_of,
    first_run_text,
    section_id,
    subtitle_from_flex_columns,
    text_of,
    title_from_flex_columns,
    video_id_of,
)
from ytmparse.parsers.renderers import Renderer, RendererKind, classify_all
from ytmparse.utils.durations import parse_episode_duration
from ytmparse.utils.ids import is_podcast_show_id

logger = logging.getLogger(__name__)

__all__ = [
    "is_podcast_show",
    "parse_discovery",
    "parse_discovery_continuation",
    "parse_episodes_continuation",
    "parse_show_detail",
]

_SECTION_LIST = ("tabs", 0, "tabRenderer", "content", "sectionListRenderer", "contents")
_PLAYED_PERCENT = 95


def is_podcast_show(browse_id: str | None) -> bool:
    """Whether ``browse_id`` names a podcast show."""
    return is_podcast_show_id(browse_id)


# =============================================================================
# Discovery
# =============================================================================


def parse_discovery(data: Document) -> list[PodcastSection]:
    """Parse the podcasts discovery page into non-empty sections."""
    root = Node(data)
    contents = root.path(
        "contents", "singleColumnBrowseResultsRenderer", *_SECTION_LIST
    )
    if contents.as_list() is None:
        logger.debug("No section list found. Top keys: %s", sorted(root.keys()))
        return []
    return _parse_sections(contents)


def parse_discovery_continuation(data: Document) -> list[PodcastSection]:
    """Parse a further page of the discovery feed.

    Carousel continuations have no header and become a section titled
    "More".
    """
    continuation = Node(data)["continuationContents"]
    sections = _parse_sections(continuation.path("sectionListContinuation", "contents"))

    carousel = continuation["musicCarouselShelfContinuation"]
    if carousel:
        section = _build_section("More", carousel["contents"])
        if section is not None:
            sections.append(section)
    return sections


def _parse_sections(contents: Node) -> list[PodcastSection]:
    sections: list[PodcastSection] = []
    for renderer in classify_all(contents):
        section = _parse_section(renderer)
        if section is not None:
            sections.append(section)
    return sections


def _parse_section(renderer: Renderer) -> PodcastSection | None:
    match renderer.kind:
        case RendererKind.CAROUSEL:
            title = first_run_text(
                renderer.body.path(
                    "header", "musicCarouselShelfBasicHeaderRenderer", "title"
                )
            )
            return _build_section(title or "Podcasts", renderer.contents)
        case RendererKind.SHELF:
            title = first_run_text(renderer.body["title"])
            return _build_section(title or "Podcasts", renderer.contents)
        case RendererKind.ITEM_SECTION:
            for child in classify_all(renderer.contents):
                section = _parse_section(child)
                if section is not None:
                    return section
            return None
        case _:
            return None


def _build_section(title: str, contents: Node) -> PodcastSection | None:
    items: list[PodcastSectionItem] = []
    for renderer in classify_all(contents):
        item = _parse_item(renderer)
        if item is not None:
            items.append(item)
    if not items:
        logger.debug("Dropping empty podcast section %r", title)
        return None
    return PodcastSection(id=section_id(title, items[0].id), title=title, items=items)


# =============================================================================
# Items
# =============================================================================


def _parse_item(renderer: Renderer) -> PodcastSectionItem | None:
    match renderer.kind:
        case RendererKind.TWO_ROW:
            return _item_from_two_row(renderer.body)
        case RendererKind.MULTI_ROW:
            episode = _episode_from_multi_row(renderer.body)
            return EpisodeItem(episode=episode) if episode is not None else None
        case RendererKind.RESPONSIVE_LIST_ITEM:
            return _item_from_list_item(renderer.body)
        case _:
            return None


def _item_from_two_row(node: Node) -> PodcastSectionItem | None:
    title = first_run_text(node["title"])
    if title is None:
        return None
    thumbnail_url = best_thumbnail(node)
    subtitle = text_of(node["subtitle"])

    browse_id = browse_id_of(node)
    if is_podcast_show(browse_id):
        return ShowItem(
            show=PodcastShow(
                id=browse_id,
                title=title,
                author=subtitle,
                thumbnail_url=thumbnail_url,
            )
        )

    video_id = node.path("navigationEndpoint", "watchEndpoint", "videoId").as_str()
    if video_id:
        return EpisodeItem(
            episode=PodcastEpisode(
                id=video_id,
                title=title,
                show_title=subtitle,
                thumbnail_url=thumbnail_url,
            )
        )
    return None


def _item_from_list_item(node: Node) -> PodcastSectionItem | None:
    thumbnail_url = best_thumbnail(node)
    video_id = video_id_of(node)
    if video_id:
        return EpisodeItem(
            episode=PodcastEpisode(
                id=video_id,
                title=title_from_flex_columns(node) or "Unknown Episode",
                show_title=subtitle_from_flex_columns(node),
                thumbnail_url=thumbnail_url,
            )
        )

    browse_id = browse_id_of(node)
    if is_podcast_show(browse_id):
        return ShowItem(
            show=PodcastShow(
                id=browse_id,
                title=title_from_flex_columns(node) or "Unknown Show",
                author=subtitle_from_flex_columns(node),
                thumbnail_url=thumbnail_url,
            )
        )
    return None


def _show_browse_id(subtitle: Node) -> str | None:
    for run in subtitle["runs"].items():
        browse_id = run.path(
            "navigationEndpoint", "browseEndpoint", "browseId"
        ).as_str()
        if is_podcast_show(browse_id):
            return browse_id
    return None


def _episode_from_multi_row(node: Node) -> PodcastEpisode | None:
    """Episode card with playback progress (``musicMultiRowListItemRenderer``)."""
    video_id = node.path("onTap", "watchEndpoint", "videoId").as_str()
    if not video_id:
        return None

    progress = 0.0
    is_played = False
    percent = node.path("playbackProgress", "playbackProgressPercentage").as_float()
    if percent is not None:
        progress = min(max(percent / 100.0, 0.0), 1.0)
        is_played = percent >= _PLAYED_PERCENT

    played_text = first_run_text(node["playedText"])
    if played_text is not None and played_text.casefold() == "played":
        progress = 1.0
        is_played = True

    duration = first_run_text(node["durationText"])
    return PodcastEpisode(
        id=video_id,
        title=first_run_text(node["title"]) or "Unknown Episode",
        show_title=first_run_text(node["subtitle"]),
        show_browse_id=_show_browse_id(node["subtitle"]),
        description=text_of(node["description"]),
        thumbnail_url=best_thumbnail(node),
        published_date=first_run_text(node["publishedTimeText"]),
        duration=duration,
        duration_seconds=parse_episode_duration(duration) if duration else None,
        playback_progress=progress,
        is_played=is_played,
    )


def _episodes_from(contents: Node) -> list[PodcastEpisode]:
    episodes: list[PodcastEpisode] = []
    for renderer in classify_all(contents):
        item = _parse_item(renderer)
        if isinstance(item, EpisodeItem):
            episodes.append(item.episode)
    return episodes


# =============================================================================
# Show detail
# =============================================================================


@dataclass
class _ShowHeader:
    title: str = "Unknown Show"
    author: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    is_subscribed: bool = False


def _read_header(renderer: Node, result: _ShowHeader) -> None:
    result.title = first_run_text(renderer["title"]) or result.title
    result.author = text_of(renderer["subtitle"]) or result.author
    result.description = text_of(renderer["description"]) or result.description
    result.thumbnail_url = best_thumbnail(renderer) or result.thumbnail_url

    for item in renderer.path("menu", "menuRenderer", "items").items():
        icon = item.path("menuServiceItemRenderer", "icon", "iconType").as_str()
        if icon in REMOVE_ICONS:
            result.is_subscribed = True

    for button in renderer["buttons"].items():
        toggled = button.path("toggleButtonRenderer", "isToggled").as_bool()
        if toggled is not None:
            result.is_subscribed = toggled
            break


def parse_show_detail(data: Document, show_id: str) -> PodcastShowDetail:
    """Parse a podcast show page.

    Never fails: an unreadable page yields a placeholder show titled
    "Unknown Show" with no episodes.
    """
    root = Node(data)
    header = _ShowHeader()
    episodes: list[PodcastEpisode] = []
    token: str | None = None

    if detail := root.path("header", "musicDetailHeaderRenderer"):
        _read_header(detail, header)

    two_column = root.path("contents", "twoColumnBrowseResultsRenderer")
    for section in two_column.path(*_SECTION_LIST).items():
        if responsive := section["musicResponsiveHeaderRenderer"]:
            _read_header(responsive, header)

    for shelf in classify_all(
        two_column.path("secondaryContents", "sectionListRenderer", "contents")
    ):
        if shelf.kind is RendererKind.SHELF:
            episodes.extend(_episodes_from(shelf.contents))
            token = continuation_token_of(shelf.body) or token

    if not episodes:
        single = root.path("contents", "singleColumnBrowseResultsRenderer")
        for shelf in classify_all(single.path(*_SECTION_LIST)):
            if shelf.kind is RendererKind.SHELF:
                episodes.extend(_episodes_from(shelf.contents))
                token = token or continuation_token_of(shelf.body)

    show = PodcastShow(
        id=show_id,
        title=header.title,
        author=header.author,
        description=header.description,
        thumbnail_url=header.thumbnail_url,
        episode_count=len(episodes),
    )
    return PodcastShowDetail(
        show=show,
        episodes=episodes,
        continuation_token=token,
        is_subscribed=header.is_subscribed,
    )


def parse_episodes_continuation(data: Document) -> PodcastEpisodesContinuation:
    """Parse a further page of a show's episodes."""
    shelf = Node(data).path("continuationContents", "musicShelfContinuation")
    return PodcastEpisodesContinuation(
        episodes=_episodes_from(shelf["contents"]),
        continuation_token=continuation_token_of(shelf),
    )
