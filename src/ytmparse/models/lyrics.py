"""Lyrics model."""

from __future__ import annotations

from ytmparse.models.entities import YTMusicEntity


class Lyrics(YTMusicEntity):
    """Plain lyrics with optional attribution.

    Empty text means no lyrics are available; there is no separate flag.
    """

    text: str = ""
    source: str | None = None  # e.g. "Source: LyricFind"

    @property
    def is_available(self) -> bool:
        return bool(self.text)

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @classmethod
    def unavailable(cls) -> Lyrics:
        return cls()
