"""Tests for the search results parser."""

from typing import Any

from factories import runs
from ytmparse.parsers.search import parse_search, parse_search_suggestions


class TestParseSearch:
    """Tests for parse_search."""

    def test_grouped_results(self, search_document: dict[str, Any]) -> None:
        """Should group results by entity type."""
        results = parse_search(search_document)

        assert [s.id for s in results.songs] == ["dwDns8x3Jb4"]
        assert [a.id for a in results.albums] == ["MPREb_homework"]
        assert [a.name for a in results.artists] == ["Daft Punk"]
        assert [p.title for p in results.playlists] == ["French Touch"]
        assert results.playlists[0].author == "Someone"

    def test_unclassified_dropped(self, search_document: dict[str, Any]) -> None:
        """Should drop results with an unknown browse id prefix."""
        results = parse_search(search_document)
        assert "Moods" not in [p.title for p in results.playlists]
        assert len(results.all_items) == 4

    def test_all_items_order(self, search_document: dict[str, Any]) -> None:
        """Should list songs, albums, artists then playlists."""
        kinds = [item.kind for item in parse_search(search_document).all_items]
        assert kinds == ["song", "album", "artist", "playlist"]

    def test_empty(self) -> None:
        """Should return an empty response for an unknown shape."""
        results = parse_search({})
        assert results.is_empty is True
        assert results.all_items == []

    def test_not_empty(self, search_document: dict[str, Any]) -> None:
        """Should not be empty when any group has results."""
        assert parse_search(search_document).is_empty is False


class TestParseSearchSuggestions:
    """Tests for parse_search_suggestions."""

    def test_suggestions_and_history(self) -> None:
        """Should read typed and history suggestions in order."""
        document = {
            "contents": [
                {
                    "searchSuggestionsSectionRenderer": {
                        "contents": [
                            {"historySuggestionRenderer": {"suggestion": runs("daft")}},
                            {
                                "searchSuggestionRenderer": {
                                    "suggestion": runs("daft", " punk")
                                }
                            },
                            {"searchSuggestionRenderer": {"suggestion": runs("")}},
                            {"musicResponsiveListItemRenderer": {}},
                        ]
                    }
                },
                {
                    "searchSuggestionsSectionRenderer": {
                        "contents": [
                            {
                                "searchSuggestionRenderer": {
                                    "suggestion": runs("daft punk one more time")
                                }
                            }
                        ]
                    }
                },
            ]
        }

        suggestions = parse_search_suggestions(document)

        assert [s.query for s in suggestions] == [
            "daft",
            "daft punk",
            "daft punk one more time",
        ]
        assert [s.is_history for s in suggestions] == [True, False, False]

    def test_missing_runs_dropped(self) -> None:
        """Should drop suggestions without text runs."""
        document = {
            "contents": [
                {
                    "searchSuggestionsSectionRenderer": {
                        "contents": [{"searchSuggestionRenderer": {}}]
                    }
                }
            ]
        }
        assert parse_search_suggestions(document) == []

    def test_empty(self) -> None:
        """Should return an empty list without contents."""
        assert parse_search_suggestions({}) == []
