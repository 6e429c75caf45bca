"""Renderer kinds and the one place that tells them apart.

Every container or item in a response is a mapping with exactly one
``...Renderer`` key naming how its body should be read. ``classify`` looks
at the keys once and returns a ``Renderer`` so parsers can ``match`` on the
kind instead of probing keys again.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from ytmparse.document import Node

logger = logging.getLogger(__name__)

__all__ = ["Renderer", "RendererKind", "classify", "classify_all"]


class RendererKind(StrEnum):
    """Renderer wrapper keys understood by the parsers."""

    # Containers
    SHELF = "musicShelfRenderer"
    PLAYLIST_SHELF = "musicPlaylistShelfRenderer"
    CAROUSEL = "musicCarouselShelfRenderer"
    IMMERSIVE_CAROUSEL = "musicImmersiveCarouselShelfRenderer"
    CARD_SHELF = "musicCardShelfRenderer"
    GRID = "gridRenderer"
    ITEM_SECTION = "itemSectionRenderer"
    DESCRIPTION_SHELF = "musicDescriptionShelfRenderer"

    # Items
    TWO_ROW = "musicTwoRowItemRenderer"
    RESPONSIVE_LIST_ITEM = "musicResponsiveListItemRenderer"
    NAVIGATION_BUTTON = "musicNavigationButtonRenderer"
    MULTI_ROW = "musicMultiRowListItemRenderer"
    PANEL_VIDEO = "playlistPanelVideoRenderer"
    PANEL_VIDEO_WRAPPER = "playlistPanelVideoWrapperRenderer"
    CONTINUATION_ITEM = "continuationItemRenderer"


_BY_KEY = {kind.value: kind for kind in RendererKind}


@dataclass(frozen=True)
class Renderer:
    """A classified renderer: its kind and the body under the wrapper key."""

    kind: RendererKind
    body: Node

    @property
    def contents(self) -> Node:
        """Child list of a container (grids keep theirs under ``items``)."""
        if self.kind is RendererKind.GRID:
            return self.body["items"]
        return self.body["contents"]


def classify(node: Node) -> Renderer | None:
    """Identify the renderer wrapped by ``node``.

    Returns:
        The first known renderer key found, or None when the mapping holds
        no renderer this package understands.
    """
    for key in node.keys():
        kind = _BY_KEY.get(key)
        if kind is not None:
            return Renderer(kind, node[key])
    unknown = [key for key in node.keys() if key.endswith("Renderer")]
    if unknown:
        logger.debug("Unrecognized renderer(s): %s", unknown)
    return None


def classify_all(nodes: Node) -> Iterator[Renderer]:
    """Classify every child of a list node, skipping unknown ones."""
    for node in nodes.items():
        renderer = classify(node)
        if renderer is not None:
            yield renderer
