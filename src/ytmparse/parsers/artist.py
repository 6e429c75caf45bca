"""Artist page parser."""

import logging
from dataclasses import dataclass, field

from ytmparse.document import Document, Node
from ytmparse.models.artist import ArtistDetail
from ytmparse.models.entities import Album, Artist, Song
from ytmparse.parsers.helpers import (
    best_thumbnail,
    first_run_text,
    song_from_list_item,
    text_of,
)
from ytmparse.parsers.renderers import RendererKind, classify_all
from ytmparse.utils.ids import is_album_id, is_channel_id

logger = logging.getLogger(__name__)

__all__ = ["parse_artist_detail", "parse_artist_songs"]

_SECTION_CONTENTS = (
    "contents",
    "singleColumnBrowseResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "sectionListRenderer",
    "contents",
)
_HEADER_KEYS = ("musicImmersiveHeaderRenderer", "musicVisualHeaderRenderer")
_SUBSCRIBED_ICONS = frozenset({"SUBSCRIBED", "NOTIFICATION_ON"})
_UNSUBSCRIBED_ICONS = frozenset({"SUBSCRIBE", "NOTIFICATION_OFF"})


@dataclass
class _Header:
    name: str = "Unknown Artist"
    description: str | None = None
    thumbnail_url: str | None = None
    channel_id: str | None = None
    is_subscribed: bool = False
    subscriber_count: str | None = None
    mix_playlist_id: str | None = None
    mix_video_id: str | None = None


@dataclass
class _Body:
    songs: list[Song] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    has_more_songs: bool = False
    songs_browse_id: str | None = None
    songs_params: str | None = None


def parse_artist_detail(data: Document, artist_id: str) -> ArtistDetail:
    """Parse an artist browse page.

    Args:
        data: The browse response for ``artist_id``.
        artist_id: The id the page was requested with.

    Returns:
        The artist page. Missing parts fall back to defaults.
    """
    root = Node(data)
    header = _parse_header(root["header"], artist_id)
    body = _parse_body(root.path(*_SECTION_CONTENTS))

    return ArtistDetail(
        artist=Artist(
            id=artist_id, name=header.name, thumbnail_url=header.thumbnail_url
        ),
        description=header.description,
        songs=body.songs,
        albums=body.albums,
        thumbnail_url=header.thumbnail_url,
        channel_id=header.channel_id,
        is_subscribed=header.is_subscribed,
        subscriber_count=header.subscriber_count,
        has_more_songs=body.has_more_songs,
        songs_browse_id=body.songs_browse_id,
        songs_params=body.songs_params,
        mix_playlist_id=header.mix_playlist_id,
        mix_video_id=header.mix_video_id,
    )


def parse_artist_songs(data: Document) -> list[Song]:
    """Parse the "all songs" page linked from an artist page.

    Songs come from shelves; playlist shelves are only read when no shelf
    produced any song.
    """
    contents = Node(data).path(*_SECTION_CONTENTS)
    renderers = list(classify_all(contents))

    songs = [
        song
        for renderer in renderers
        if renderer.kind is RendererKind.SHELF
        for song in _songs_from(renderer.contents)
    ]
    if songs:
        return songs
    return [
        song
        for renderer in renderers
        if renderer.kind is RendererKind.PLAYLIST_SHELF
        for song in _songs_from(renderer.contents)
    ]


# =============================================================================
# Header
# =============================================================================


def _parse_header(header: Node, artist_id: str) -> _Header:
    result = _Header(channel_id=artist_id if is_channel_id(artist_id) else None)

    for key in _HEADER_KEYS:
        renderer = header[key]
        if not renderer:
            continue
        name = first_run_text(renderer["title"])
        if name:
            result.name = name
        result.thumbnail_url = best_thumbnail(renderer)
        if key == "musicImmersiveHeaderRenderer":
            result.description = text_of(renderer["description"])
        _parse_subscription(renderer, result)
        _parse_start_radio(renderer, result)
        if result.name != "Unknown Artist":
            break

    return result


def _parse_subscription(renderer: Node, result: _Header) -> None:
    button = renderer.path("subscriptionButton", "subscribeButtonRenderer")
    if button:
        channel_id = button["channelId"].as_str()
        # Only real channel pages may carry a channel id
        if channel_id and result.channel_id is not None:
            result.channel_id = channel_id
        subscribed = button["subscribed"].as_bool()
        if subscribed is not None:
            result.is_subscribed = subscribed
        result.subscriber_count = text_of(button["subscriberCountText"]) or text_of(
            button["shortSubscriberCountText"]
        )

    for item in renderer.path("menu", "menuRenderer", "items").items():
        icon = item.path(
            "toggleMenuServiceItemRenderer", "defaultIcon", "iconType"
        ).as_str()
        if icon in _SUBSCRIBED_ICONS:
            result.is_subscribed = True
        elif icon in _UNSUBSCRIBED_ICONS:
            result.is_subscribed = False


def _parse_start_radio(renderer: Node, result: _Header) -> None:
    endpoint = renderer.path("startRadioButton", "buttonRenderer", "navigationEndpoint")
    if playlist := endpoint["watchPlaylistEndpoint"]:
        result.mix_playlist_id = playlist["playlistId"].as_str()
        return
    if watch := endpoint["watchEndpoint"]:
        result.mix_playlist_id = watch["playlistId"].as_str()
        result.mix_video_id = watch["videoId"].as_str()


# =============================================================================
# Body
# =============================================================================


def _songs_from(contents: Node) -> list[Song]:
    songs: list[Song] = []
    for renderer in classify_all(contents):
        if renderer.kind is not RendererKind.RESPONSIVE_LIST_ITEM:
            continue
        song = song_from_list_item(renderer.body)
        if song is not None:
            songs.append(song)
    return songs


def _album_from_two_row(node: Node) -> Album | None:
    browse_id = node.path("navigationEndpoint", "browseEndpoint", "browseId").as_str()
    if not is_album_id(browse_id):
        logger.debug("Skipping non-album carousel item %s", browse_id)
        return None
    subtitle_runs = node.path("subtitle", "runs").as_list() or []
    year = Node(subtitle_runs[-1])["text"].as_str() if subtitle_runs else None
    return Album(
        id=browse_id,
        title=first_run_text(node["title"]) or "Unknown Album",
        thumbnail_url=best_thumbnail(node),
        year=year,
    )


def _parse_body(contents: Node) -> _Body:
    body = _Body()
    for renderer in classify_all(contents):
        match renderer.kind:
            case RendererKind.SHELF:
                body.songs.extend(_songs_from(renderer.contents))
                more = renderer.body.path("bottomEndpoint", "browseEndpoint")
                if browse_id := more["browseId"].as_str():
                    body.has_more_songs = True
                    body.songs_browse_id = browse_id
                    body.songs_params = more["params"].as_str()
                elif renderer.body["continuations"].as_list():
                    body.has_more_songs = True
            case RendererKind.CAROUSEL:
                for item in classify_all(renderer.contents):
                    if item.kind is not RendererKind.TWO_ROW:
                        continue
                    album = _album_from_two_row(item.body)
                    if album is not None:
                        body.albums.append(album)
            case _:
                pass
    return body
