"""Tests for utility functions."""

import pytest
from ytmparse.utils.durations import (
    format_duration,
    parse_accessibility_duration,
    parse_duration,
    parse_episode_duration,
)
from ytmparse.utils.ids import (
    album_id_from_name,
    artist_id_from_name,
    is_album_id,
    is_channel_id,
    is_lyrics_id,
    is_mood_category_id,
    is_playlist_id,
    is_podcast_show_id,
    is_radio_id,
    normalize_name,
    parse_mood_category_id,
    stable_id,
)
from ytmparse.utils.thumbnails import normalize_url, pick_widest

# ============================================================================
# Durations
# ============================================================================


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1:05:30", 3930.0),
            ("4:30", 270.0),
            ("3:45", 225.0),
            ("0:00", 0.0),
            ("12:05", 725.0),
            (" 4:30 ", 270.0),
            (225, 225.0),
            (12.5, 12.5),
        ],
    )
    def test_valid(self, value: object, expected: float) -> None:
        """Should convert supported shapes to seconds."""
        assert parse_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "180",
            "1:2:3:4",
            "abc:def",
            "",
            "4:3a",
            "-1:30",
            -5,
            True,
            None,
            ["4:30"],
            float("inf"),
            float("nan"),
        ],
        ids=[
            "single_segment",
            "four_segments",
            "letters",
            "empty",
            "partial_digits",
            "negative_segment",
            "negative_number",
            "bool",
            "none",
            "list",
            "infinity",
            "nan",
        ],
    )
    def test_invalid(self, value: object) -> None:
        """Should return None for anything else."""
        assert parse_duration(value) is None


class TestAccessibilityDuration:
    """Tests for spoken duration labels."""

    def test_minutes_and_seconds(self) -> None:
        """Should read minutes and seconds from a play button label."""
        label = "Play Around the World, 4 minutes, 55 seconds"
        assert parse_accessibility_duration(label) == 295.0

    def test_minutes_only(self) -> None:
        """Should accept a label with only minutes."""
        assert parse_accessibility_duration("1 minute") == 60.0

    def test_no_numbers(self) -> None:
        """Should return None when there is no duration."""
        assert parse_accessibility_duration("Play") is None


class TestEpisodeDuration:
    """Tests for podcast episode durations."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("36 min", 2160), ("1:11:19", 4279), ("45:00", 2700), ("soon", None)],
    )
    def test_parse(self, text: str, expected: int | None) -> None:
        """Should parse "N min" and colon strings."""
        assert parse_episode_duration(text) == expected


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (None, "--:--"),
            (0, "0:00"),
            (65, "1:05"),
            (225.9, "3:45"),
            (3930, "1:05:30"),
        ],
    )
    def test_format(self, seconds: float | None, expected: str) -> None:
        """Should format as M:SS or H:MM:SS."""
        assert format_duration(seconds) == expected


# ============================================================================
# Identifiers
# ============================================================================


class TestIdPrefixes:
    """Tests for identifier prefix predicates."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("MPREb_abc", True),
            ("OLAK5uy_abc", True),
            ("PLabc", False),
            ("VLPLabc", False),
            ("UCabc", False),
            ("", False),
            (None, False),
        ],
    )
    def test_is_album_id(self, value: str | None, expected: bool) -> None:
        """Should recognize MPRE and OLAK ids as albums."""
        assert is_album_id(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("MPSPP12345", True),
            ("VLPL123", False),
            ("UC123", False),
            ("MPREb_123", False),
            (None, False),
        ],
    )
    def test_is_podcast_show_id(self, value: str | None, expected: bool) -> None:
        """Should recognize MPSPP ids as podcast shows."""
        assert is_podcast_show_id(value) is expected

    def test_other_prefixes(self) -> None:
        """Should recognize channel, playlist, radio and lyrics ids."""
        assert is_channel_id("UCabc") is True
        assert is_channel_id("abc") is False
        assert is_playlist_id("VLPLabc") is True
        assert is_playlist_id("PLabc") is True
        assert is_playlist_id("RDAMVMabc") is False
        assert is_radio_id("RDAMVMabc") is True
        assert is_lyrics_id("MPLYt_abc") is True
        assert is_lyrics_id("MPREb_abc") is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (
                "FEmusic_moods_and_genres_category_ggMPOg1uX1",
                ("FEmusic_moods_and_genres_category", "ggMPOg1uX1"),
            ),
            (
                "FEmusic_moods_and_genres_category",
                ("FEmusic_moods_and_genres_category", None),
            ),
            ("FEmusic_moods_and_genres", ("FEmusic_moods_and_genres", None)),
            ("VLPLabc", None),
        ],
        ids=["with_params", "bare_category", "other_base", "not_mood"],
    )
    def test_parse_mood_category_id(
        self, value: str, expected: tuple[str, str | None] | None
    ) -> None:
        """Should split a joined mood tile id into browse id and params."""
        assert parse_mood_category_id(value) == expected
        assert is_mood_category_id(value) is (expected is not None)


class TestStableId:
    """Tests for deterministic identifiers."""

    def test_deterministic(self) -> None:
        """Should produce the same id for the same input."""
        assert stable_id("artist", "daft punk") == stable_id("artist", "daft punk")

    def test_shape(self) -> None:
        """Should be 32 lowercase hex characters."""
        value = stable_id("section", "Quick picks", "song-abc")
        assert len(value) == 32
        assert all(c in "0123456789abcdef" for c in value)

    def test_namespace_separates_kinds(self) -> None:
        """Should not collide across namespaces."""
        assert stable_id("artist", "x") != stable_id("album", "x")

    def test_components_are_delimited(self) -> None:
        """Should not collide when components are split differently."""
        assert stable_id("section", "ab", "c") != stable_id("section", "a", "bc")

    def test_artist_id_ignores_case_and_spacing(self) -> None:
        """Should normalize names before hashing."""
        assert artist_id_from_name("  Daft   Punk ") == artist_id_from_name("daft punk")
        assert artist_id_from_name("Daft Punk") != artist_id_from_name("Justice")

    def test_artist_and_album_ids_differ(self) -> None:
        """Should keep artist and album hashes apart for the same name."""
        assert artist_id_from_name("Homework") != album_id_from_name("Homework")

    def test_hashed_ids_are_not_navigable(self) -> None:
        """Should never produce something that looks like a channel id."""
        assert is_channel_id(artist_id_from_name("Unknown Singer")) is False

    def test_normalize_name(self) -> None:
        """Should trim, collapse whitespace and casefold."""
        assert normalize_name("  Sigur\tRÓS  ") == "sigur rós"


# ============================================================================
# Thumbnails
# ============================================================================


class TestThumbnails:
    """Tests for thumbnail selection."""

    def test_widest_wins(self) -> None:
        """Should pick the widest candidate regardless of order."""
        candidates = [
            {"url": "https://x/small", "width": 60},
            {"url": "https://x/large", "width": 544},
            {"url": "https://x/medium", "width": 226},
        ]
        assert pick_widest(candidates) == "https://x/large"

    def test_missing_width_counts_as_zero(self) -> None:
        """Should prefer any sized candidate over an unsized one."""
        candidates = [
            {"url": "https://x/unsized"},
            {"url": "https://x/sized", "width": 1},
        ]
        assert pick_widest(candidates) == "https://x/sized"

    def test_tie_goes_to_first(self) -> None:
        """Should keep list order on equal widths."""
        candidates = [
            {"url": "https://x/first", "width": 100},
            {"url": "https://x/second", "width": 100},
        ]
        assert pick_widest(candidates) == "https://x/first"

    def test_skips_candidates_without_url(self) -> None:
        """Should ignore malformed candidates."""
        candidates = [{"width": 900}, "junk", {"url": "https://x/ok", "width": 10}]
        assert pick_widest(candidates) == "https://x/ok"

    def test_empty(self) -> None:
        """Should return None when nothing qualifies."""
        assert pick_widest([]) is None

    def test_protocol_relative_url_normalized(self) -> None:
        """Should add https to protocol-relative URLs."""
        assert pick_widest([{"url": "//host/path", "width": 1}]) == "https://host/path"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("//host/path", "https://host/path"),
            ("https://host/path", "https://host/path"),
            ("http://host/path", "http://host/path"),
        ],
    )
    def test_normalize_url(self, url: str, expected: str) -> None:
        """Should only touch protocol-relative URLs."""
        assert normalize_url(url) == expected
