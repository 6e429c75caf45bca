"""Test fixtures and configuration."""

from typing import Any

import pytest
from factories import (
    browse_endpoint,
    carousel,
    continuations,
    list_item,
    menu,
    run,
    runs,
    service_item,
    shelf,
    single_column,
    thumbnail,
    two_row,
)

ALBUM_PAGE = "MUSIC_PAGE_TYPE_ALBUM"
ARTIST_CHANNEL = "UCmMUZbaYdNH0bEd1PAlAqsA"


@pytest.fixture
def sample_song_item() -> dict[str, Any]:
    """Create a sample responsive list item for a song."""
    return list_item(
        title="Around the World",
        video_id="dwDns8x3Jb4",
        subtitle=[
            run("Daft Punk", browse_id=ARTIST_CHANNEL),
            {"text": " & "},
            run("Guest"),
        ],
        extra_columns=[[run("Homework", browse_id="MPREb_homework")]],
        duration="7:09",
        thumb=thumbnail(
            ("https://lh3.example.com/small", 60),
            ("https://lh3.example.com/large", 544),
            ("https://lh3.example.com/medium", 226),
        ),
        menu=menu(
            service_item("LIBRARY_ADD", "add-token"),
            like_status="LIKE",
        ),
    )


@pytest.fixture
def home_document(sample_song_item: dict[str, Any]) -> dict[str, Any]:
    """Create a sample home page with mixed sections."""
    return single_column(
        [
            carousel(
                "Quick picks",
                [
                    two_row(
                        "One More Time",
                        subtitle=[run("Daft Punk", browse_id=ARTIST_CHANNEL)],
                        video_id="FGBhQbmPwH8",
                    ),
                    two_row(
                        "Discovery",
                        subtitle=[run("Daft Punk", browse_id=ARTIST_CHANNEL)],
                        browse_id="MPREb_discovery",
                        page_type=ALBUM_PAGE,
                    ),
                ],
            ),
            carousel("Nothing here", []),
            shelf("Top songs this week", [sample_song_item]),
            carousel(
                "Mixed for you",
                [
                    two_row(
                        "Chill Mix",
                        subtitle=[run("YouTube Music")],
                        browse_id="VLRDTMAK5uy",
                    ),
                    two_row("Daft Punk", browse_id=ARTIST_CHANNEL),
                ],
            ),
        ],
        token="next_page_token_123",
    )


@pytest.fixture
def artist_document(sample_song_item: dict[str, Any]) -> dict[str, Any]:
    """Create a sample artist page."""
    document = single_column(
        [
            {
                "musicShelfRenderer": {
                    "title": runs("Top songs"),
                    "contents": [sample_song_item],
                    "bottomEndpoint": browse_endpoint(
                        "VLOLAK5uy_songs", params="ggMPOg1uX"
                    ),
                }
            },
            carousel(
                "Albums",
                [
                    two_row(
                        "Discovery",
                        subtitle=[run("Album"), {"text": " • "}, run("2001")],
                        browse_id="MPREb_discovery",
                    ),
                    two_row("Live Playlist", browse_id="VLPLlive"),
                ],
            ),
        ]
    )
    document["header"] = {
        "musicImmersiveHeaderRenderer": {
            "title": runs("Daft Punk"),
            "description": runs("French electronic duo."),
            "thumbnail": thumbnail(("https://lh3.example.com/artist", 1200)),
            "subscriptionButton": {
                "subscribeButtonRenderer": {
                    "channelId": ARTIST_CHANNEL,
                    "subscribed": True,
                    "subscriberCountText": runs("9.6M subscribers"),
                }
            },
            "startRadioButton": {
                "buttonRenderer": {
                    "navigationEndpoint": {
                        "watchPlaylistEndpoint": {"playlistId": "RDEMdaftpunk"}
                    }
                }
            },
        }
    }
    return document


@pytest.fixture
def playlist_document() -> dict[str, Any]:
    """Create a sample playlist page with a detail header."""
    document = single_column(
        [
            {
                "musicPlaylistShelfRenderer": {
                    "contents": [
                        list_item(
                            title="Track One",
                            video_id="vid00000001",
                            subtitle=[run("Artist A")],
                            duration="3:45",
                        ),
                        list_item(
                            title="Track Two",
                            video_id="vid00000002",
                            subtitle=[run("Artist B")],
                            duration="4:30",
                            thumb=thumbnail(("https://lh3.example.com/own", 120)),
                        ),
                        list_item(title="Deleted video"),
                    ]
                }
            }
        ]
    )
    document["header"] = {
        "musicDetailHeaderRenderer": {
            "title": runs("Road Trip"),
            "description": runs("Songs for the ", "highway"),
            "subtitle": runs("Jane", " • ", "2024"),
            "secondSubtitle": runs("2 songs", " • ", "8 minutes"),
            "thumbnail": {
                "croppedSquareThumbnailRenderer": {
                    "thumbnail": {
                        "thumbnails": [
                            {"url": "//lh3.example.com/cover", "width": 544}
                        ]
                    }
                }
            },
        }
    }
    return document


@pytest.fixture
def search_document(sample_song_item: dict[str, Any]) -> dict[str, Any]:
    """Create a sample search response."""
    return {
        "contents": {
            "tabbedSearchResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": [
                                        shelf("Songs", [sample_song_item]),
                                        shelf(
                                            "Albums",
                                            [
                                                list_item(
                                                    title="Homework",
                                                    browse_id="MPREb_homework",
                                                )
                                            ],
                                        ),
                                        shelf(
                                            "Artists",
                                            [
                                                list_item(
                                                    title="Daft Punk",
                                                    browse_id=ARTIST_CHANNEL,
                                                )
                                            ],
                                        ),
                                        shelf(
                                            "Community playlists",
                                            [
                                                list_item(
                                                    title="French Touch",
                                                    browse_id="VLPLfrench",
                                                    subtitle=[run("Someone")],
                                                ),
                                                list_item(
                                                    title="Moods",
                                                    browse_id="FEmusic_moods",
                                                ),
                                            ],
                                        ),
                                    ]
                                }
                            }
                        }
                    }
                ]
            }
        }
    }


@pytest.fixture
def continuation_marker() -> dict[str, Any]:
    """Create a trailing continuation item for action-style continuations."""
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {
                "continuationCommand": {"token": "next_page_token_123"}
            }
        }
    }


@pytest.fixture
def shelf_continuation() -> list[dict[str, Any]]:
    """Create a ``continuations`` block with a next page token."""
    return continuations("next_page_token_123")
