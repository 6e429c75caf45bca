"""Lyrics parser."""

import logging

from ytmparse.document import Document, Node
from ytmparse.models.lyrics import Lyrics
from ytmparse.parsers.helpers import text_of
from ytmparse.parsers.renderers import RendererKind, classify_all
from ytmparse.utils.ids import is_lyrics_id

logger = logging.getLogger(__name__)

__all__ = ["lyrics_browse_id", "parse_lyrics"]


def lyrics_browse_id(data: Document) -> str | None:
    """Find the lyrics tab's browse id in a "next" document.

    Returns:
        The ``MPLYt...`` browse id, or None if the song has no lyrics tab.
    """
    tabs = Node(data).path(
        "contents",
        "singleColumnMusicWatchNextResultsRenderer",
        "tabbedRenderer",
        "watchNextTabbedResultsRenderer",
        "tabs",
    )
    if tabs.as_list() is None:
        logger.debug("No watch-next tabs found")
        return None

    for tab in tabs.items():
        browse_id = tab.path(
            "tabRenderer", "endpoint", "browseEndpoint", "browseId"
        ).as_str()
        if is_lyrics_id(browse_id):
            return browse_id
    return None


def parse_lyrics(data: Document) -> Lyrics:
    """Parse a lyrics browse document.

    The first description shelf holds the lyrics in its description runs
    and the attribution in its footer. Empty text is always unavailable,
    even when an attribution is present.
    """
    contents = Node(data).path("contents", "sectionListRenderer", "contents")
    for renderer in classify_all(contents):
        if renderer.kind is not RendererKind.DESCRIPTION_SHELF:
            continue
        text = text_of(renderer.body["description"])
        if not text:
            return Lyrics.unavailable()
        return Lyrics(text=text, source=text_of(renderer.body["footer"]))
    return Lyrics.unavailable()
