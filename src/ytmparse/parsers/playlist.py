"""Playlist parser: library listings, playlist pages and track continuations."""

import logging
from dataclasses import dataclass

from ytmparse.document import Document, Node
from ytmparse.models.entities import (
    Playlist,
    PlaylistContinuation,
    PlaylistDetail,
    Song,
)
from ytmparse.parsers.helpers import (
    best_thumbnail,
    browse_id_of,
    continuation_token_of,
    first_run_text,
    song_from_list_item,
    subtitle_from_flex_columns,
    text_of,
    title_from_flex_columns,
)
from ytmparse.parsers.renderers import RendererKind, classify, classify_all
from ytmparse.utils.ids import is_playlist_id

logger = logging.getLogger(__name__)

__all__ = [
    "parse_library_playlists",
    "parse_playlist_continuation",
    "parse_playlist_detail",
]

_SECTION_LIST = ("tabs", 0, "tabRenderer", "content", "sectionListRenderer", "contents")
_MAX_SEARCH_DEPTH = 10


@dataclass
class _Header:
    title: str = "Unknown Playlist"
    description: str | None = None
    thumbnail_url: str | None = None
    author: str | None = None
    duration: str | None = None


# =============================================================================
# Library
# =============================================================================


def parse_library_playlists(data: Document) -> list[Playlist]:
    """Playlists listed on the library page, in display order."""
    contents = Node(data).path(
        "contents", "singleColumnBrowseResultsRenderer", *_SECTION_LIST
    )
    playlists: list[Playlist] = []
    for section in classify_all(contents):
        match section.kind:
            case RendererKind.GRID:
                for item in classify_all(section.contents):
                    if item.kind is RendererKind.TWO_ROW:
                        playlist = _playlist_from_two_row(item.body)
                        if playlist is not None:
                            playlists.append(playlist)
            case RendererKind.ITEM_SECTION:
                for shelf in classify_all(section.contents):
                    if shelf.kind is not RendererKind.SHELF:
                        continue
                    for item in classify_all(shelf.contents):
                        if item.kind is RendererKind.RESPONSIVE_LIST_ITEM:
                            playlist = _playlist_from_list_item(item.body)
                            if playlist is not None:
                                playlists.append(playlist)
            case _:
                pass
    return playlists


def _playlist_from_two_row(node: Node) -> Playlist | None:
    browse_id = browse_id_of(node)
    if not browse_id:
        return None
    return Playlist(
        id=browse_id,
        title=first_run_text(node["title"]) or "Unknown Playlist",
        thumbnail_url=best_thumbnail(node),
        author=text_of(node["subtitle"]),
    )


def _playlist_from_list_item(node: Node) -> Playlist | None:
    browse_id = browse_id_of(node)
    if not is_playlist_id(browse_id):
        return None
    return Playlist(
        id=browse_id,
        title=title_from_flex_columns(node) or "Unknown Playlist",
        thumbnail_url=best_thumbnail(node),
        author=subtitle_from_flex_columns(node),
    )


# =============================================================================
# Detail
# =============================================================================


def parse_playlist_detail(data: Document, playlist_id: str) -> PlaylistDetail:
    """Parse a playlist (or album-as-playlist) page.

    Tracks without their own thumbnail get the header's. The track count
    is the number of tracks parsed from this page.
    """
    root = Node(data)
    header = _parse_header(root["header"])
    tracks = _parse_tracks(root["contents"], header.thumbnail_url)

    playlist = Playlist(
        id=playlist_id,
        title=header.title,
        description=header.description,
        thumbnail_url=header.thumbnail_url,
        track_count=len(tracks),
        author=header.author,
    )
    return PlaylistDetail(playlist=playlist, tracks=tracks, duration=header.duration)


def _parse_header(header: Node) -> _Header:
    result = _Header()

    if detail := header["musicDetailHeaderRenderer"]:
        result.title = first_run_text(detail["title"]) or result.title
        result.description = text_of(detail["description"])
        result.thumbnail_url = best_thumbnail(detail)
        result.author = first_run_text(detail["subtitle"])
        result.duration = text_of(detail["secondSubtitle"])

    if result.title == "Unknown Playlist" and (
        immersive := header["musicImmersiveHeaderRenderer"]
    ):
        result.title = first_run_text(immersive["title"]) or result.title
        result.thumbnail_url = best_thumbnail(immersive)
        result.description = text_of(immersive["description"])

    if result.title == "Unknown Playlist" and (
        editable := header.path(
            "musicEditablePlaylistDetailHeaderRenderer",
            "header",
            "musicDetailHeaderRenderer",
        )
    ):
        result.title = first_run_text(editable["title"]) or result.title
        result.thumbnail_url = best_thumbnail(editable)
        result.author = first_run_text(editable["subtitle"])

    return result


def _with_fallback(song: Song, thumbnail_url: str | None) -> Song:
    if song.thumbnail_url is None and thumbnail_url is not None:
        return song.model_copy(update={"thumbnail_url": thumbnail_url})
    return song


def _tracks_from_items(items: Node, fallback: str | None) -> list[Song]:
    tracks: list[Song] = []
    for item in classify_all(items):
        if item.kind is not RendererKind.RESPONSIVE_LIST_ITEM:
            continue
        song = song_from_list_item(item.body)
        if song is not None:
            tracks.append(_with_fallback(song, fallback))
    return tracks


def _tracks_from_sections(sections: Node, fallback: str | None) -> list[Song]:
    tracks: list[Song] = []
    for section in classify_all(sections):
        if section.kind in (RendererKind.SHELF, RendererKind.PLAYLIST_SHELF):
            tracks.extend(_tracks_from_items(section.contents, fallback))
    return tracks


def _parse_tracks(contents: Node, fallback: str | None) -> list[Song]:
    single = contents["singleColumnBrowseResultsRenderer"]
    tracks = _tracks_from_sections(single.path(*_SECTION_LIST), fallback)
    if tracks:
        return tracks

    two_column = contents["twoColumnBrowseResultsRenderer"]
    tracks = _tracks_from_sections(
        two_column.path("secondaryContents", "sectionListRenderer", "contents"),
        fallback,
    )
    if tracks:
        return tracks
    tracks = _tracks_from_sections(two_column.path(*_SECTION_LIST), fallback)
    if tracks:
        return tracks

    logger.debug("No tracks at known paths, searching the document")
    for key in contents.keys():
        tracks = _find_tracks(contents[key], 0, fallback)
        if tracks:
            return tracks
    return []


def _find_tracks(node: Node, depth: int, fallback: str | None) -> list[Song]:
    """Depth-limited search for the first ``contents`` list holding tracks."""
    if depth >= _MAX_SEARCH_DEPTH or node.as_dict() is None:
        return []

    tracks = _tracks_from_items(node["contents"], fallback)
    if tracks:
        return tracks

    for key in node.keys():
        child = node[key]
        children = child.items() if child.as_list() is not None else iter((child,))
        for grandchild in children:
            tracks = _find_tracks(grandchild, depth + 1, fallback)
            if tracks:
                return tracks
    return []


# =============================================================================
# Continuations
# =============================================================================


def parse_playlist_continuation(data: Document) -> PlaylistContinuation:
    """Parse a further page of playlist tracks.

    Two envelopes exist. The older one keeps tracks under
    ``continuationContents.musicPlaylistShelfContinuation`` (or
    ``musicShelfContinuation``) with the token in ``continuations``. The
    newer one appends items through
    ``onResponseReceivedActions[0].appendContinuationItemsAction`` and
    ends the list with a ``continuationItemRenderer`` holding the token.
    No token means this is the last page.
    """
    root = Node(data)
    continuation = root["continuationContents"]
    shelf = continuation["musicPlaylistShelfContinuation"] or continuation[
        "musicShelfContinuation"
    ]
    if shelf:
        return PlaylistContinuation(
            tracks=_tracks_from_items(shelf["contents"], None),
            continuation_token=continuation_token_of(shelf),
        )

    items = root.path(
        "onResponseReceivedActions",
        0,
        "appendContinuationItemsAction",
        "continuationItems",
    )
    token: str | None = None
    marker = classify(items[-1])
    if marker is not None and marker.kind is RendererKind.CONTINUATION_ITEM:
        token = marker.body.path(
            "continuationEndpoint", "continuationCommand", "token"
        ).as_str()
    return PlaylistContinuation(
        tracks=_tracks_from_items(items, None),
        continuation_token=token,
    )
