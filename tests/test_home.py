"""Tests for the home and explore feed parser."""

from typing import Any

from factories import (
    browse_endpoint,
    carousel,
    continuations,
    run,
    runs,
    shelf,
    single_column,
    two_row,
)
from ytmparse.models.home import AlbumItem, ArtistItem, PlaylistItem, SongItem
from ytmparse.parsers.helpers import section_id
from ytmparse.parsers.home import (
    continuation_token,
    continuation_token_from_continuation,
    parse_home,
    parse_home_continuation,
)


class TestParseHome:
    """Tests for parse_home."""

    def test_sections_in_order(self, home_document: dict[str, Any]) -> None:
        """Should keep non-empty sections in document order."""
        home = parse_home(home_document)
        assert [s.title for s in home.sections] == [
            "Quick picks",
            "Top songs this week",
            "Mixed for you",
        ]

    def test_empty_section_dropped(self, home_document: dict[str, Any]) -> None:
        """Should drop a carousel with no parseable items."""
        home = parse_home(home_document)
        assert "Nothing here" not in [s.title for s in home.sections]
        assert all(section.items for section in home.sections)

    def test_item_kinds(self, home_document: dict[str, Any]) -> None:
        """Should classify two-row items by endpoint and page type."""
        quick_picks, top_songs, mixed = parse_home(home_document).sections

        song, album = quick_picks.items
        assert isinstance(song, SongItem)
        assert song.song.id == "FGBhQbmPwH8"
        assert song.id == "song-FGBhQbmPwH8"
        assert isinstance(album, AlbumItem)
        assert album.album.id == "MPREb_discovery"
        assert album.subtitle == "Daft Punk"

        assert isinstance(top_songs.items[0], SongItem)
        assert top_songs.items[0].song.album is not None

        playlist, artist = mixed.items
        assert isinstance(playlist, PlaylistItem)
        assert playlist.playlist.author == "YouTube Music"
        assert isinstance(artist, ArtistItem)
        assert artist.subtitle == "Artist"

    def test_chart_detection(self, home_document: dict[str, Any]) -> None:
        """Should flag chart-like section titles."""
        flags = {s.title: s.is_chart for s in parse_home(home_document).sections}
        assert flags == {
            "Quick picks": False,
            "Top songs this week": True,
            "Mixed for you": False,
        }

    def test_section_ids_are_stable(self, home_document: dict[str, Any]) -> None:
        """Should derive the same section id on every parse."""
        first = parse_home(home_document).sections[0]
        second = parse_home(home_document).sections[0]
        assert first.id == second.id == section_id("Quick picks", "song-FGBhQbmPwH8")

    def test_continuation_token(self, home_document: dict[str, Any]) -> None:
        """Should expose the next page token."""
        home = parse_home(home_document)
        assert home.continuation_token == "next_page_token_123"
        assert home.has_more is True
        assert continuation_token(home_document) == "next_page_token_123"

    def test_no_continuation(self) -> None:
        """Should report no more pages without a continuation marker."""
        document = single_column([carousel("Hits", [two_row("x", video_id="v")])])
        home = parse_home(document)
        assert home.continuation_token is None
        assert home.has_more is False

    def test_unreadable_document(self) -> None:
        """Should return an empty response for an unknown shape."""
        home = parse_home({"responseContext": {}})
        assert home.sections == []
        assert home.has_more is False


class TestSectionKinds:
    """Tests for container-specific titles and wrappers."""

    def test_default_titles(self) -> None:
        """Should use per-kind fallback titles."""
        item = two_row("Song", video_id="v")
        document = single_column(
            [
                carousel(None, [item]),
                {"musicImmersiveCarouselShelfRenderer": {"contents": [item]}},
                {"gridRenderer": {"items": [item]}},
                shelf(None, [item]),
            ]
        )
        titles = [s.title for s in parse_home(document).sections]
        assert titles == ["Unknown Section", "Featured", "Charts", "Unknown Section"]

    def test_grid_title_and_items(self) -> None:
        """Should read grid headers and their items list."""
        document = single_column(
            [
                {
                    "gridRenderer": {
                        "header": {"gridHeaderRenderer": {"title": runs("New albums")}},
                        "items": [two_row("LP", browse_id="MPREb_lp")],
                    }
                }
            ]
        )
        (section,) = parse_home(document).sections
        assert section.title == "New albums"
        assert isinstance(section.items[0], AlbumItem)

    def test_item_section_wrapper(self) -> None:
        """Should unwrap an item section holding a shelf."""
        document = single_column(
            [
                {
                    "itemSectionRenderer": {
                        "contents": [carousel("Wrapped", [two_row("x", video_id="v")])]
                    }
                }
            ]
        )
        (section,) = parse_home(document).sections
        assert section.title == "Wrapped"

    def test_id_prefix_classification(self) -> None:
        """Should classify by id prefix when no page type is given."""
        document = single_column(
            [
                carousel(
                    "Mixed",
                    [
                        two_row("Album", browse_id="OLAK5uy_x"),
                        two_row("Radio", browse_id="RDCLAK5uy_x"),
                        two_row("Channel", browse_id="UCx"),
                        two_row("Mystery", browse_id="FEmusic_x"),
                    ],
                )
            ]
        )
        (section,) = parse_home(document).sections
        assert [item.kind for item in section.items] == ["album", "playlist", "artist"]

    def test_navigation_button(self) -> None:
        """Should turn mood tiles into playlist items keyed by params."""
        button = {
            "musicNavigationButtonRenderer": {
                "buttonText": runs("Chill"),
                "solid": {"leftStripeColor": 0xFF112233},
                "clickCommand": browse_endpoint(
                    "FEmusic_moods_and_genres_category", params="ggMPchill"
                ),
            }
        }
        document = single_column([{"gridRenderer": {"items": [button]}}])
        (section,) = parse_home(document).sections
        (item,) = section.items
        assert isinstance(item, PlaylistItem)
        assert item.playlist.id == "FEmusic_moods_and_genres_category_ggMPchill"
        assert item.id == "playlist-FEmusic_moods_and_genres_category_ggMPchill"
        assert item.playlist.description == "#112233"

    def test_navigation_button_keeps_browse_target(self) -> None:
        """Should expose the real browse id and params of a mood tile."""
        buttons = [
            {
                "musicNavigationButtonRenderer": {
                    "buttonText": runs(title),
                    "clickCommand": browse_endpoint(
                        "FEmusic_moods_and_genres_category", params=params
                    ),
                }
            }
            for title, params in [("Chill", "ggMPOg1uX1"), ("Focus", "ggMPOg1uX2")]
        ]
        document = single_column([{"gridRenderer": {"items": buttons}}])
        (section,) = parse_home(document).sections

        assert [item.browse_id for item in section.items] == [
            "FEmusic_moods_and_genres_category",
            "FEmusic_moods_and_genres_category",
        ]
        assert [item.params for item in section.items] == [
            "ggMPOg1uX1",
            "ggMPOg1uX2",
        ]
        assert section.items[0].id != section.items[1].id

    def test_navigation_button_without_params(self) -> None:
        """Should use the bare browse id when the tile has no params."""
        button = {
            "musicNavigationButtonRenderer": {
                "buttonText": runs("Genres"),
                "clickCommand": browse_endpoint("FEmusic_moods_and_genres"),
            }
        }
        document = single_column([{"gridRenderer": {"items": [button]}}])
        (item,) = parse_home(document).sections[0].items
        assert item.playlist.id == "FEmusic_moods_and_genres"
        assert item.browse_id == "FEmusic_moods_and_genres"
        assert item.params is None

    def test_album_artists_from_subtitle(self) -> None:
        """Should keep linked artist credits on album items."""
        document = single_column(
            [
                carousel(
                    "Albums",
                    [
                        two_row(
                            "LP",
                            subtitle=[
                                run("A", "UCa"),
                                {"text": " & "},
                                run("B", "UCb"),
                            ],
                            browse_id="MPREb_lp",
                        )
                    ],
                )
            ]
        )
        (section,) = parse_home(document).sections
        (item,) = section.items
        assert isinstance(item, AlbumItem)
        assert [a.id for a in item.album.artists or []] == ["UCa", "UCb"]


class TestParseHomeContinuation:
    """Tests for parse_home_continuation."""

    def test_section_list_continuation(self) -> None:
        """Should parse sections and the next token."""
        document = {
            "continuationContents": {
                "sectionListContinuation": {
                    "contents": [carousel("More hits", [two_row("x", video_id="v")])],
                    "continuations": continuations("tok2"),
                }
            }
        }
        home = parse_home_continuation(document)
        assert [s.title for s in home.sections] == ["More hits"]
        assert home.continuation_token == "tok2"
        assert continuation_token_from_continuation(document) == "tok2"

    def test_shelf_continuation(self, sample_song_item: dict[str, Any]) -> None:
        """Should treat a bare shelf continuation as one section."""
        document = {
            "continuationContents": {
                "musicShelfContinuation": {"contents": [sample_song_item]}
            }
        }
        home = parse_home_continuation(document)
        assert len(home.sections) == 1
        assert home.sections[0].title == "Unknown Section"
        assert home.has_more is False

    def test_last_page(self) -> None:
        """Should return nothing for an empty continuation."""
        home = parse_home_continuation({})
        assert home.sections == []
        assert home.continuation_token is None

