"""Search results and search suggestions parsers."""

import logging

from ytmparse.document import Document, Node
from ytmparse.models.entities import Album, Artist, Playlist, Song
from ytmparse.models.search import SearchResponse, SearchSuggestion
from ytmparse.parsers.helpers import (
    best_thumbnail,
    browse_id_of,
    song_from_list_item,
    subtitle_from_flex_columns,
    text_of,
    title_from_flex_columns,
)
from ytmparse.parsers.renderers import RendererKind, classify_all
from ytmparse.utils.ids import is_album_id, is_channel_id, is_playlist_id

logger = logging.getLogger(__name__)

__all__ = ["parse_search", "parse_search_suggestions"]


def parse_search(data: Document) -> SearchResponse:
    """Parse a search response into results grouped by type.

    Items with a video id are songs; the rest are told apart by browse id
    prefix. Items matching no known prefix are dropped.
    """
    root = Node(data)
    contents = root.path(
        "contents",
        "tabbedSearchResultsRenderer",
        "tabs",
        0,
        "tabRenderer",
        "content",
        "sectionListRenderer",
        "contents",
    )
    if contents.as_list() is None:
        logger.debug("No search results found. Top keys: %s", sorted(root.keys()))
        return SearchResponse()

    songs: list[Song] = []
    albums: list[Album] = []
    artists: list[Artist] = []
    playlists: list[Playlist] = []

    for shelf in classify_all(contents):
        if shelf.kind is not RendererKind.SHELF:
            continue
        for item in classify_all(shelf.contents):
            if item.kind is not RendererKind.RESPONSIVE_LIST_ITEM:
                continue
            node = item.body
            if song := song_from_list_item(node):
                songs.append(song)
                continue

            browse_id = browse_id_of(node)
            title = title_from_flex_columns(node) or "Unknown"
            thumbnail_url = best_thumbnail(node)
            if is_album_id(browse_id):
                albums.append(
                    Album(id=browse_id, title=title, thumbnail_url=thumbnail_url)
                )
            elif is_channel_id(browse_id):
                artists.append(
                    Artist(id=browse_id, name=title, thumbnail_url=thumbnail_url)
                )
            elif is_playlist_id(browse_id):
                playlists.append(
                    Playlist(
                        id=browse_id,
                        title=title,
                        thumbnail_url=thumbnail_url,
                        author=subtitle_from_flex_columns(node),
                    )
                )
            else:
                logger.debug("Skipping unclassified search result %s", browse_id)

    return SearchResponse(
        songs=songs, albums=albums, artists=artists, playlists=playlists
    )


def parse_search_suggestions(data: Document) -> list[SearchSuggestion]:
    """Parse a search suggestions response, in display order.

    Both typed completions (``searchSuggestionRenderer``) and past searches
    (``historySuggestionRenderer``) are kept. Suggestions whose text runs
    join to an empty string are dropped.
    """
    root = Node(data)
    contents = root["contents"]
    if contents.as_list() is None:
        logger.debug("No suggestions found. Top keys: %s", sorted(root.keys()))
        return []

    suggestions: list[SearchSuggestion] = []
    for section in contents.items():
        items = section.path("searchSuggestionsSectionRenderer", "contents")
        for item in items.items():
            if renderer := item["searchSuggestionRenderer"]:
                is_history = False
            elif renderer := item["historySuggestionRenderer"]:
                is_history = True
            else:
                continue
            query = text_of(renderer["suggestion"])
            if query:
                suggestions.append(
                    SearchSuggestion(query=query, is_history=is_history)
                )
    return suggestions
