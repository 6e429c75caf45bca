"""Song metadata from "next" (now playing) documents and list items."""

import logging

from ytmparse.document import Document, Node
from ytmparse.exceptions import StructureMismatchError
from ytmparse.models.entities import Artist, Song
from ytmparse.models.enums import MusicVideoType
from ytmparse.parsers.helpers import (
    MenuData,
    artists_from_runs,
    best_thumbnail,
    first_run_text,
    menu_data_of,
    music_video_type_of,
    parse_duration,
    song_from_list_item,
)
from ytmparse.parsers.renderers import RendererKind, classify

logger = logging.getLogger(__name__)

__all__ = [
    "MenuData",
    "extract_panel_video_renderer",
    "parse_artists",
    "parse_duration_text",
    "parse_menu_data",
    "parse_music_video_type",
    "parse_radio_queue",
    "parse_song",
    "parse_song_item",
    "parse_thumbnail",
    "parse_title",
]

_QUEUE_PATH = (
    "contents",
    "singleColumnMusicWatchNextResultsRenderer",
    "tabbedRenderer",
    "watchNextTabbedResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "musicQueueRenderer",
    "content",
    "playlistPanelRenderer",
    "contents",
)


def parse_title(renderer: Document) -> str:
    return first_run_text(Node(renderer)["title"]) or "Unknown"


def parse_artists(renderer: Document) -> list[Artist]:
    """Artists credited in the long byline (``"Artist • Album • 2020"``)."""
    return artists_from_runs(Node(renderer).path("longBylineText", "runs"))


def parse_thumbnail(renderer: Document) -> str | None:
    return best_thumbnail(Node(renderer))


def parse_duration_text(renderer: Document) -> float | None:
    return parse_duration(first_run_text(Node(renderer)["lengthText"]))


def parse_music_video_type(renderer: Document) -> MusicVideoType | None:
    return music_video_type_of(Node(renderer))


def parse_menu_data(renderer: Document) -> MenuData:
    """Like status, library membership and feedback tokens of a renderer."""
    return menu_data_of(Node(renderer))


def parse_song_item(renderer: Document) -> Song | None:
    """Song from a responsive list item, None without a video id."""
    return song_from_list_item(Node(renderer))


def _panel_video(item: Node) -> Node | None:
    renderer = classify(item)
    if renderer is None:
        return None
    match renderer.kind:
        case RendererKind.PANEL_VIDEO:
            return renderer.body
        case RendererKind.PANEL_VIDEO_WRAPPER:
            wrapped = renderer.body.path(
                "primaryRenderer", "playlistPanelVideoRenderer"
            )
            return wrapped or None
        case _:
            return None


def extract_panel_video_renderer(data: Document, video_id: str) -> Node:
    """Return the panel renderer describing ``video_id`` in a "next" document.

    The renderer is the first queue entry, either directly or inside a
    ``playlistPanelVideoWrapperRenderer``.

    Raises:
        StructureMismatchError: If no panel renderer is found, or the one
            found describes a different video.
    """
    first = Node(data).path(*_QUEUE_PATH, 0)
    renderer = _panel_video(first) if first else None
    if renderer is None:
        raise StructureMismatchError(f"Failed to parse song metadata for {video_id}")

    found = renderer["videoId"].as_str()
    if found is not None and found != video_id:
        raise StructureMismatchError(
            f"Now playing document describes {found}, expected {video_id}"
        )
    return renderer


def parse_song(data: Document, video_id: str) -> Song:
    """Build the full song for ``video_id`` from a "next" document.

    Raises:
        StructureMismatchError: See ``extract_panel_video_renderer``.
    """
    renderer = extract_panel_video_renderer(data, video_id)
    menu = menu_data_of(renderer)
    return Song(
        id=video_id,
        title=parse_title(renderer),
        artists=parse_artists(renderer),
        duration=parse_duration_text(renderer),
        thumbnail_url=parse_thumbnail(renderer),
        music_video_type=parse_music_video_type(renderer),
        like_status=menu.like_status,
        is_in_library=menu.is_in_library,
        feedback_tokens=menu.feedback_tokens,
    )


def parse_radio_queue(data: Document) -> list[Song]:
    """Every song in a radio "next" document's queue, in order.

    Entries without a video id are skipped.
    """
    songs: list[Song] = []
    for item in Node(data).path(*_QUEUE_PATH).items():
        renderer = _panel_video(item)
        if renderer is None:
            continue
        video_id = renderer["videoId"].as_str()
        if not video_id:
            logger.debug("Skipping queue entry without videoId")
            continue
        songs.append(
            Song(
                id=video_id,
                title=parse_title(renderer),
                artists=parse_artists(renderer),
                duration=parse_duration_text(renderer),
                thumbnail_url=parse_thumbnail(renderer),
                music_video_type=parse_music_video_type(renderer),
            )
        )
    return songs
