"""Primitive extractors shared by every parser.

Each function takes a ``Node`` positioned on some renderer body and returns
a plain value, or None when the field is absent. None is returned instead of
an empty string so callers can pick their own default.
"""

import logging
from dataclasses import dataclass

from ytmparse.document import Node
from ytmparse.models.entities import Album, Artist, FeedbackTokens, Song
from ytmparse.models.enums import LikeStatus, MusicVideoType, PageType
from ytmparse.utils.durations import parse_accessibility_duration, parse_duration
from ytmparse.utils.ids import artist_id_from_name, is_album_id, stable_id
from ytmparse.utils.thumbnails import normalize_url, pick_widest

logger = logging.getLogger(__name__)

__all__ = [
    "ADD_ICONS",
    "ARTIST_SEPARATORS",
    "CHART_KEYWORDS",
    "REMOVE_ICONS",
    "MenuData",
    "album_from_flex_columns",
    "artists_from_flex_columns",
    "artists_from_runs",
    "best_thumbnail",
    "browse_id_of",
    "continuation_token_of",
    "duration_from_columns",
    "first_run_text",
    "flex_column_runs",
    "is_chart_title",
    "menu_data_of",
    "music_video_type_of",
    "normalize_url",
    "page_type_of",
    "parse_duration",
    "section_id",
    "song_from_list_item",
    "subtitle_from_flex_columns",
    "text_of",
    "title_from_flex_columns",
    "video_id_of",
]

ARTIST_SEPARATORS = frozenset(
    {" • ", " & ", ", ", ",", " · ", " and ", " x ", " X ", " feat. ", " ft. "}
)
CHART_KEYWORDS = ("chart", "top", "trending", "daily", "weekly")
ADD_ICONS = frozenset({"LIBRARY_ADD", "BOOKMARK_BORDER"})
REMOVE_ICONS = frozenset({"LIBRARY_REMOVE", "BOOKMARK"})

_THUMBNAIL_PATHS: tuple[tuple[str, ...], ...] = (
    ("thumbnail", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnail", "croppedSquareThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnail", "thumbnails"),
    ("thumbnailRenderer", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnailRenderer", "croppedSquareThumbnailRenderer", "thumbnail", "thumbnails"),
    ("thumbnails",),
)

_PLAY_BUTTON = ("overlay", "musicItemThumbnailOverlayRenderer", "content")
_MUSIC_CONFIG = (
    "watchEndpoint",
    "watchEndpointMusicSupportedConfigs",
    "watchEndpointMusicConfig",
    "musicVideoType",
)


# =============================================================================
# Text runs
# =============================================================================


def text_of(node: Node) -> str | None:
    """Concatenate every run's text, in order.

    Returns:
        The joined text, or None when the node has no ``runs`` list.
    """
    runs = node["runs"]
    if runs.as_list() is None:
        return None
    return "".join(text for run in runs.items() if (text := run["text"].as_str()))


def first_run_text(node: Node) -> str | None:
    return node.path("runs", 0, "text").as_str()


def artists_from_runs(runs: Node) -> list[Artist]:
    """Build artist credits from a list of text runs.

    Separator runs and blank runs are skipped. A run linking to a browse
    page keeps that browse id, anything else gets a deterministic id
    derived from its name.

    Examples:
        >>> runs = Node([{"text": "Artist"}, {"text": " • "}, {"text": "Song"}])
        >>> [a.name for a in artists_from_runs(runs)]
        ['Artist', 'Song']
    """
    artists: list[Artist] = []
    for run in runs.items():
        text = run["text"].as_str()
        if not text or not text.strip() or text in ARTIST_SEPARATORS:
            continue
        browse_id = run.path("navigationEndpoint", "browseEndpoint", "browseId")
        artists.append(
            Artist(id=browse_id.as_str() or artist_id_from_name(text), name=text)
        )
    return artists


def is_chart_title(title: str) -> bool:
    """Whether a section title looks like a chart (case-insensitive)."""
    lowered = title.casefold()
    return any(keyword in lowered for keyword in CHART_KEYWORDS)


def section_id(title: str, first_item_id: str) -> str:
    """Deterministic id of a section from its title and first item."""
    return stable_id("section", title, first_item_id)


# =============================================================================
# Thumbnails
# =============================================================================


def best_thumbnail(node: Node) -> str | None:
    """URL of the widest thumbnail found in any known thumbnail shape."""
    for path in _THUMBNAIL_PATHS:
        candidates = node.path(*path).as_list()
        if candidates is None:
            continue
        url = pick_widest(candidates)
        if url is not None:
            return url
    return None


# =============================================================================
# Identifiers
# =============================================================================


def video_id_of(node: Node) -> str | None:
    """Video id from item data, the watch endpoint or the play overlay."""
    return (
        node.path("playlistItemData", "videoId").as_str()
        or node.path("navigationEndpoint", "watchEndpoint", "videoId").as_str()
        or node.path(
            *_PLAY_BUTTON,
            "musicPlayButtonRenderer",
            "playNavigationEndpoint",
            "watchEndpoint",
            "videoId",
        ).as_str()
    )


def browse_id_of(node: Node) -> str | None:
    return node.path("navigationEndpoint", "browseEndpoint", "browseId").as_str()


def page_type_of(browse_endpoint: Node) -> PageType | None:
    """Page type hint carried by a browse endpoint, if recognized."""
    raw = browse_endpoint.path(
        "browseEndpointContextSupportedConfigs",
        "browseEndpointContextMusicConfig",
        "pageType",
    ).as_str()
    if raw is None:
        return None
    try:
        return PageType(raw)
    except ValueError:
        logger.debug("Unknown page type: %s", raw)
        return None


def continuation_token_of(node: Node) -> str | None:
    """Token from a ``continuations[0].nextContinuationData`` block."""
    return node.path(
        "continuations", 0, "nextContinuationData", "continuation"
    ).as_str()


# =============================================================================
# Responsive list item columns
# =============================================================================


def flex_column_runs(node: Node, index: int) -> Node:
    return node.path(
        "flexColumns",
        index,
        "musicResponsiveListItemFlexColumnRenderer",
        "text",
        "runs",
    )


def title_from_flex_columns(node: Node) -> str | None:
    return flex_column_runs(node, 0)[0]["text"].as_str()


def subtitle_from_flex_columns(node: Node) -> str | None:
    runs = flex_column_runs(node, 1)
    if runs.as_list() is None:
        return None
    return "".join(text for run in runs.items() if (text := run["text"].as_str()))


def artists_from_flex_columns(node: Node) -> list[Artist]:
    return artists_from_runs(flex_column_runs(node, 1))


def album_from_flex_columns(node: Node) -> Album | None:
    """First run in a secondary column that links to an album page."""
    for index in range(1, len(node["flexColumns"])):
        for run in flex_column_runs(node, index).items():
            browse_id = run.path(
                "navigationEndpoint", "browseEndpoint", "browseId"
            ).as_str()
            title = run["text"].as_str()
            if is_album_id(browse_id) and title:
                return Album(id=browse_id, title=title)
    return None


def duration_from_columns(node: Node) -> float | None:
    """Track length from fixed columns, flex columns or the play button.

    Fixed columns win. Flex columns are scanned last-first since artist
    pages put the length in the final column. The play button's spoken
    label ("4 minutes, 55 seconds") is the last resort.
    """
    for column in node["fixedColumns"].items():
        text = column.path(
            "musicResponsiveListItemFixedColumnRenderer", "text", "runs", 0, "text"
        ).as_str()
        if text is not None:
            return parse_duration(text)

    for index in reversed(range(len(node["flexColumns"]))):
        seconds = parse_duration(flex_column_runs(node, index)[0]["text"].value)
        if seconds is not None:
            return seconds

    label = node.path(
        *_PLAY_BUTTON,
        "musicPlayButtonRenderer",
        "accessibilityPlayData",
        "accessibilityData",
        "label",
    ).as_str()
    if label is not None:
        return parse_accessibility_duration(label)
    return None


# =============================================================================
# Item state and list items
# =============================================================================


@dataclass(frozen=True)
class MenuData:
    """Interactive state recovered from an item's action menu."""

    like_status: LikeStatus = LikeStatus.INDIFFERENT
    is_in_library: bool = False
    feedback_tokens: FeedbackTokens | None = None


def _feedback_token(endpoint: Node) -> str | None:
    return endpoint.path("feedbackEndpoint", "feedbackToken").as_str()


def menu_data_of(node: Node) -> MenuData:
    """Like status, library membership and feedback tokens of an item.

    A plain menu item with an "add" icon means the item is not in the
    library and carries an add token; a "remove" icon means it is and
    carries a remove token. Toggle items carry both tokens at once.
    A missing menu yields the defaults.
    """
    menu = node.path("menu", "menuRenderer")
    is_in_library = False
    tokens: FeedbackTokens | None = None

    for item in menu["items"].items():
        if service := item["menuServiceItemRenderer"]:
            icon = service.path("icon", "iconType").as_str()
            token = _feedback_token(service["serviceEndpoint"])
            if icon in ADD_ICONS:
                if token:
                    tokens = FeedbackTokens(add=token)
            elif icon in REMOVE_ICONS:
                is_in_library = True
                if token:
                    tokens = FeedbackTokens(remove=token)
        elif toggle := item["toggleMenuServiceItemRenderer"]:
            icon = toggle.path("defaultIcon", "iconType").as_str()
            default = _feedback_token(toggle["defaultServiceEndpoint"])
            toggled = _feedback_token(toggle["toggledServiceEndpoint"])
            if icon in ADD_ICONS:
                tokens = FeedbackTokens(add=default, remove=toggled)
            elif icon in REMOVE_ICONS:
                is_in_library = True
                tokens = FeedbackTokens(add=toggled, remove=default)

    like_status = LikeStatus.INDIFFERENT
    for button in menu["topLevelButtons"].items():
        status = button.path("likeButtonRenderer", "likeStatus")
        if status:
            like_status = LikeStatus.from_raw(status.value)

    return MenuData(
        like_status=like_status,
        is_in_library=is_in_library,
        feedback_tokens=tokens,
    )


def music_video_type_of(node: Node) -> MusicVideoType | None:
    """Video type from the item's watch endpoint or its play overlay."""
    raw = (
        node.path("navigationEndpoint", *_MUSIC_CONFIG).as_str()
        or node.path(
            *_PLAY_BUTTON,
            "musicPlayButtonRenderer",
            "playNavigationEndpoint",
            *_MUSIC_CONFIG,
        ).as_str()
    )
    if raw is None:
        return None
    try:
        return MusicVideoType(raw)
    except ValueError:
        logger.debug("Unknown music video type: %s", raw)
        return None


def song_from_list_item(node: Node) -> Song | None:
    """Build a song from a ``musicResponsiveListItemRenderer`` body.

    Returns:
        The song, or None when the item carries no video id.
    """
    video_id = video_id_of(node)
    if not video_id:
        return None

    menu = menu_data_of(node)
    return Song(
        id=video_id,
        title=title_from_flex_columns(node) or "Unknown Title",
        artists=artists_from_flex_columns(node),
        album=album_from_flex_columns(node),
        duration=duration_from_columns(node),
        thumbnail_url=best_thumbnail(node),
        music_video_type=music_video_type_of(node),
        like_status=menu.like_status,
        is_in_library=menu.is_in_library,
        feedback_tokens=menu.feedback_tokens,
    )
