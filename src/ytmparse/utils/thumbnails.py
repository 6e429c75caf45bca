"""Thumbnail candidate selection and URL normalization."""

from collections.abc import Iterable
from typing import Any


def normalize_url(url: str) -> str:
    """Add an ``https:`` scheme to protocol-relative URLs.

    URLs that already carry a scheme are returned unchanged.
    """
    if url.startswith("//"):
        return "https:" + url
    return url


def _width(candidate: dict[str, Any]) -> int:
    width = candidate.get("width")
    if isinstance(width, int | float) and not isinstance(width, bool):
        return int(width)
    return 0


def pick_widest(candidates: Iterable[Any]) -> str | None:
    """Return the normalized URL of the widest thumbnail candidate.

    Candidates without a string ``url`` are ignored and a missing width
    counts as zero. Ties go to the first candidate in list order.

    Args:
        candidates: Thumbnail dicts as found in a ``thumbnails`` list.

    Returns:
        The chosen URL, or None if no candidate has a URL.
    """
    best: dict[str, Any] | None = None
    for candidate in candidates:
        if not isinstance(candidate, dict) or not isinstance(candidate.get("url"), str):
            continue
        if best is None or _width(candidate) > _width(best):
            best = candidate
    if best is None:
        return None
    return normalize_url(best["url"])
