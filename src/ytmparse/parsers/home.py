"""Home and explore feed parser.

Walks ``tabs[0] -> sectionListRenderer -> contents`` and turns every
recognized container into a ``HomeSection``. Sections left with no items
after parsing are dropped.
"""

import logging

from ytmparse.document import Document, Node
from ytmparse.models.entities import Album, Artist, Playlist, Song
from ytmparse.models.enums import ItemKind, PageType
from ytmparse.models.home import (
    AlbumItem,
    ArtistItem,
    HomeResponse,
    HomeSection,
    HomeSectionItem,
    PlaylistItem,
    SongItem,
)
from ytmparse.parsers.helpers import (
    artists_from_flex_columns,
    artists_from_runs,
    best_thumbnail,
    browse_id_of,
    continuation_token_of,
    first_run_text,
    is_chart_title,
    page_type_of,
    section_id,
    song_from_list_item,
    subtitle_from_flex_columns,
    text_of,
    title_from_flex_columns,
)
from ytmparse.parsers.renderers import Renderer, RendererKind, classify_all
from ytmparse.utils.ids import (
    is_album_id,
    is_channel_id,
    is_mood_category_id,
    is_playlist_id,
    is_radio_id,
)

logger = logging.getLogger(__name__)

__all__ = [
    "continuation_token",
    "continuation_token_from_continuation",
    "parse_home",
    "parse_home_continuation",
    "parse_section",
    "parse_section_item",
]

_SECTION_LIST = (
    "contents",
    "singleColumnBrowseResultsRenderer",
    "tabs",
    0,
    "tabRenderer",
    "content",
    "sectionListRenderer",
)


def parse_home(data: Document) -> HomeResponse:
    """Parse an initial home or explore page."""
    root = Node(data)
    section_list = root.path(*_SECTION_LIST)
    contents = section_list["contents"]
    if contents.as_list() is None:
        logger.debug("No section list found. Top keys: %s", sorted(root.keys()))
        return HomeResponse()

    return HomeResponse(
        sections=_parse_sections(contents),
        continuation_token=continuation_token_of(section_list),
    )


def parse_home_continuation(data: Document) -> HomeResponse:
    """Parse a further page of sections fetched with a continuation token."""
    continuation = Node(data)["continuationContents"]
    sections: list[HomeSection] = []

    if section_list := continuation["sectionListContinuation"]:
        sections.extend(_parse_sections(section_list["contents"]))
    if shelf := continuation["musicShelfContinuation"]:
        section = parse_section(Renderer(RendererKind.SHELF, shelf))
        if section is not None:
            sections.append(section)

    return HomeResponse(
        sections=sections,
        continuation_token=continuation_token_from_continuation(data),
    )


def continuation_token(data: Document) -> str | None:
    """Token for the next page, from an initial page."""
    return continuation_token_of(Node(data).path(*_SECTION_LIST))


def continuation_token_from_continuation(data: Document) -> str | None:
    """Token for the next page, from a continuation page."""
    return continuation_token_of(
        Node(data).path("continuationContents", "sectionListContinuation")
    )


def _parse_sections(contents: Node) -> list[HomeSection]:
    sections: list[HomeSection] = []
    for renderer in classify_all(contents):
        section = parse_section(renderer)
        if section is not None:
            sections.append(section)
    return sections


# =============================================================================
# Sections
# =============================================================================


def _section_title(renderer: Renderer) -> str:
    header = renderer.body["header"]
    match renderer.kind:
        case RendererKind.CAROUSEL:
            title = first_run_text(
                header.path("musicCarouselShelfBasicHeaderRenderer", "title")
            )
            return title or "Unknown Section"
        case RendererKind.IMMERSIVE_CAROUSEL:
            title = first_run_text(
                header.path("musicCarouselShelfBasicHeaderRenderer", "title")
            )
            return title or "Featured"
        case RendererKind.CARD_SHELF:
            title = first_run_text(
                header.path("musicCardShelfHeaderBasicRenderer", "title")
            )
            return title or "Featured"
        case RendererKind.GRID:
            title = first_run_text(header.path("gridHeaderRenderer", "title"))
            return title or "Charts"
        case _:
            return first_run_text(renderer.body["title"]) or "Unknown Section"


def parse_section(renderer: Renderer) -> HomeSection | None:
    """Build a section from a classified container.

    Returns:
        The section, or None when the container is not a section kind or
        none of its items could be parsed.
    """
    match renderer.kind:
        case RendererKind.ITEM_SECTION:
            # Wrapper: the first child that forms a section stands in for it
            for child in classify_all(renderer.contents):
                section = parse_section(child)
                if section is not None:
                    return section
            return None
        case (
            RendererKind.SHELF
            | RendererKind.CAROUSEL
            | RendererKind.IMMERSIVE_CAROUSEL
            | RendererKind.CARD_SHELF
            | RendererKind.GRID
        ):
            pass
        case _:
            logger.debug("Renderer %s is not a feed section", renderer.kind)
            return None

    title = _section_title(renderer)
    items: list[HomeSectionItem] = []
    for child in classify_all(renderer.contents):
        item = parse_section_item(child)
        if item is not None:
            items.append(item)

    if not items:
        logger.debug("Dropping empty section %r", title)
        return None

    return HomeSection(
        id=section_id(title, items[0].id),
        title=title,
        items=items,
        is_chart=is_chart_title(title),
    )


# =============================================================================
# Items
# =============================================================================


def parse_section_item(renderer: Renderer) -> HomeSectionItem | None:
    match renderer.kind:
        case RendererKind.TWO_ROW:
            return _parse_two_row(renderer.body)
        case RendererKind.RESPONSIVE_LIST_ITEM:
            return _parse_responsive_item(renderer.body)
        case RendererKind.NAVIGATION_BUTTON:
            return _parse_navigation_button(renderer.body)
        case _:
            return None


def _browse_item(
    browse_id: str,
    page_type: PageType | None,
    title: str,
    thumbnail_url: str | None,
    subtitle: Node,
) -> HomeSectionItem | None:
    match page_type:
        case PageType.ALBUM:
            kind = ItemKind.ALBUM
        case PageType.PLAYLIST:
            kind = ItemKind.PLAYLIST
        case PageType.ARTIST | PageType.USER_CHANNEL:
            kind = ItemKind.ARTIST
        case _:
            if is_album_id(browse_id):
                kind = ItemKind.ALBUM
            elif is_playlist_id(browse_id) or is_radio_id(browse_id):
                kind = ItemKind.PLAYLIST
            elif is_channel_id(browse_id):
                kind = ItemKind.ARTIST
            else:
                logger.debug("Cannot classify browse id %s", browse_id)
                return None

    match kind:
        case ItemKind.ALBUM:
            return AlbumItem(
                album=Album(
                    id=browse_id,
                    title=title,
                    artists=artists_from_runs(subtitle["runs"]),
                    thumbnail_url=thumbnail_url,
                )
            )
        case ItemKind.PLAYLIST:
            return PlaylistItem(
                playlist=Playlist(
                    id=browse_id,
                    title=title,
                    thumbnail_url=thumbnail_url,
                    author=text_of(subtitle),
                )
            )
        case _:
            return ArtistItem(
                artist=Artist(id=browse_id, name=title, thumbnail_url=thumbnail_url)
            )


def _parse_two_row(node: Node) -> HomeSectionItem | None:
    title = first_run_text(node["title"])
    if title is None:
        return None
    thumbnail_url = best_thumbnail(node)
    endpoint = node["navigationEndpoint"]

    if video_id := endpoint.path("watchEndpoint", "videoId").as_str():
        return SongItem(
            song=Song(
                id=video_id,
                title=title,
                artists=artists_from_runs(node.path("subtitle", "runs")),
                thumbnail_url=thumbnail_url,
            )
        )

    browse = endpoint["browseEndpoint"]
    browse_id = browse["browseId"].as_str()
    if not browse_id:
        return None
    return _browse_item(
        browse_id, page_type_of(browse), title, thumbnail_url, node["subtitle"]
    )


def _parse_responsive_item(node: Node) -> HomeSectionItem | None:
    song = song_from_list_item(node)
    if song is not None:
        return SongItem(song=song)

    browse_id = browse_id_of(node)
    if not browse_id:
        return None

    title = title_from_flex_columns(node) or "Unknown"
    thumbnail_url = best_thumbnail(node)
    if is_album_id(browse_id):
        return AlbumItem(
            album=Album(
                id=browse_id,
                title=title,
                artists=artists_from_flex_columns(node),
                thumbnail_url=thumbnail_url,
            )
        )
    if is_playlist_id(browse_id):
        return PlaylistItem(
            playlist=Playlist(
                id=browse_id,
                title=title,
                thumbnail_url=thumbnail_url,
                author=subtitle_from_flex_columns(node),
            )
        )
    if is_channel_id(browse_id):
        return ArtistItem(
            artist=Artist(id=browse_id, name=title, thumbnail_url=thumbnail_url)
        )
    return None


def _parse_navigation_button(node: Node) -> HomeSectionItem | None:
    """Mood/genre tile: a playlist-like item keyed by browse id and params."""
    title = first_run_text(node["buttonText"])
    browse = node.path("clickCommand", "browseEndpoint")
    browse_id = browse["browseId"].as_str()
    if title is None or not browse_id:
        return None
    if not is_mood_category_id(browse_id):
        logger.debug("Navigation button to non-mood page %s", browse_id)

    params = browse["params"].as_str()
    color = node.path("solid", "leftStripeColor").as_int()
    return PlaylistItem(
        playlist=Playlist(
            id=f"{browse_id}_{params}" if params else browse_id,
            title=title,
            description=f"#{color & 0xFFFFFF:06X}" if color is not None else None,
            thumbnail_url=best_thumbnail(node["iconImage"]),
            browse_id=browse_id,
            params=params,
        )
    )
