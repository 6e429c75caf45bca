"""Duration parsing and formatting."""

import math
import re

_MINUTES_LABEL = re.compile(r"(\d+)\s*minutes?", re.IGNORECASE)
_SECONDS_LABEL = re.compile(r"(\d+)\s*seconds?", re.IGNORECASE)
_MIN_SUFFIX = re.compile(r"^(\d+)\s*min$")


def parse_duration(value: object) -> float | None:
    """Parse a duration into seconds.

    Accepts a finite, non-negative number of seconds, or a colon-delimited string
    with two or three segments (``M:SS``, ``MM:SS``, ``H:MM:SS``). Each
    segment must be a non-negative integer.

    Args:
        value: Raw value from a response document.

    Returns:
        Total seconds, or None for any other shape.

    Examples:
        >>> parse_duration("1:05:30")
        3930.0
        >>> parse_duration("4:30")
        270.0
        >>> parse_duration("1:2:3:4") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        if not math.isfinite(value) or value < 0:
            return None
        return float(value)
    if not isinstance(value, str):
        return None

    segments = value.strip().split(":")
    if len(segments) not in (2, 3):
        return None
    if not all(segment.isascii() and segment.isdigit() for segment in segments):
        return None

    total = 0
    for position, segment in enumerate(reversed(segments)):
        total += int(segment) * 60**position
    return float(total)


def parse_accessibility_duration(label: str) -> float | None:
    """Parse spoken durations like ``"Play X, 4 minutes, 55 seconds"``."""
    minutes = _MINUTES_LABEL.search(label)
    seconds = _SECONDS_LABEL.search(label)
    total = (int(minutes.group(1)) * 60 if minutes else 0) + (
        int(seconds.group(1)) if seconds else 0
    )
    return float(total) if total > 0 else None


def parse_episode_duration(text: str) -> int | None:
    """Parse podcast episode lengths (``"36 min"`` or a colon string)."""
    if match := _MIN_SUFFIX.match(text.strip()):
        return int(match.group(1)) * 60
    seconds = parse_duration(text)
    return int(seconds) if seconds is not None else None


def format_duration(seconds: float | None) -> str:
    """Format seconds as ``M:SS`` (or ``H:MM:SS``), ``--:--`` when unknown."""
    if seconds is None:
        return "--:--"
    whole = int(seconds)
    hours, remainder = divmod(whole, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
