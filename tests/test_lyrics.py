"""Tests for the lyrics parser."""

from typing import Any

from factories import next_document, panel_video, runs
from ytmparse.parsers.lyrics import lyrics_browse_id, parse_lyrics


def lyrics_document(*shelves: dict[str, Any]) -> dict[str, Any]:
    return {"contents": {"sectionListRenderer": {"contents": list(shelves)}}}


def description_shelf(
    description: dict[str, Any], footer: dict[str, Any] | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {"description": description}
    if footer is not None:
        body["footer"] = footer
    return {"musicDescriptionShelfRenderer": body}


class TestLyricsBrowseId:
    """Tests for lyrics_browse_id."""

    def test_finds_lyrics_tab(self) -> None:
        """Should return the MPLYt browse id from the tabs."""
        tabs = [
            {
                "tabRenderer": {
                    "endpoint": {"browseEndpoint": {"browseId": "MPTRt_related"}}
                }
            },
            {
                "tabRenderer": {
                    "endpoint": {"browseEndpoint": {"browseId": "MPLYt_abc123"}}
                }
            },
        ]
        document = next_document([panel_video("v")], tabs=tabs)
        assert lyrics_browse_id(document) == "MPLYt_abc123"

    def test_no_lyrics_tab(self) -> None:
        """Should return None when no tab links to lyrics."""
        assert lyrics_browse_id(next_document([panel_video("v")])) is None

    def test_unreadable_document(self) -> None:
        """Should return None without tabs."""
        assert lyrics_browse_id({}) is None


class TestParseLyrics:
    """Tests for parse_lyrics."""

    def test_multi_run_text_joined_exactly(self) -> None:
        """Should join description runs without adding separators."""
        document = lyrics_document(
            description_shelf(
                runs("First line\n", "Second line\n", "Third line"),
                footer=runs("Source: LyricFind"),
            )
        )

        lyrics = parse_lyrics(document)

        assert lyrics.text == "First line\nSecond line\nThird line"
        assert lyrics.source == "Source: LyricFind"
        assert lyrics.is_available is True
        assert lyrics.lines == ["First line", "Second line", "Third line"]

    def test_empty_text_is_unavailable_even_with_source(self) -> None:
        """Should treat empty text as unavailable and drop the source."""
        document = lyrics_document(
            description_shelf({"runs": []}, footer=runs("Source: LyricFind"))
        )

        lyrics = parse_lyrics(document)

        assert lyrics.is_available is False
        assert lyrics.text == ""
        assert lyrics.source is None

    def test_first_description_shelf_wins(self) -> None:
        """Should only read the first description shelf."""
        document = lyrics_document(
            {"musicShelfRenderer": {"contents": []}},
            description_shelf(runs("One")),
            description_shelf(runs("Two")),
        )
        assert parse_lyrics(document).text == "One"

    def test_no_shelf(self) -> None:
        """Should be unavailable for an unreadable document."""
        assert parse_lyrics({}).is_available is False
