"""Raw YouTube Music document fetcher.

The parsers never perform I/O. This client exists so a developer can pull a
live document and hand it to a parser; it returns the decoded response
untouched.
"""

import logging
from typing import Any, Protocol

from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError, YTMusicServerError, YTMusicUserError

from ytmparse.config import APIConfig
from ytmparse.exceptions import APIError

logger = logging.getLogger(__name__)

RawDocument = dict[str, Any]


class YTMusicRawProtocol(Protocol):
    """Protocol for raw document clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock clients for testing.
    """

    def browse(self, browse_id: str, params: str | None = None) -> RawDocument:
        """Fetch a browse page (home, artist, playlist, show, lyrics...)."""
        ...

    def next(self, video_id: str, playlist_id: str | None = None) -> RawDocument:
        """Fetch the now-playing document for a video."""
        ...

    def search(self, query: str) -> RawDocument:
        """Fetch search results."""
        ...

    def search_suggestions(self, query: str) -> RawDocument:
        """Fetch search suggestions for partial input."""
        ...

    def continuation(self, token: str, endpoint: str = "browse") -> RawDocument:
        """Fetch the next page of a paginated listing."""
        ...


class YTMusicRawClient:
    """Production raw document client backed by ytmusicapi.

    Implements YTMusicRawProtocol for type safety.
    """

    def __init__(
        self,
        ytmusic: YTMusic | None = None,
        config: APIConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            ytmusic: Optional YTMusic instance. Creates one if not provided.
            config: Optional API configuration. Uses defaults if not provided.
        """
        self._config = config or APIConfig()
        self._ytm = ytmusic or self._create_ytmusic(self._config)

    def _create_ytmusic(self, config: APIConfig) -> YTMusic:
        if config.auth_path is not None:
            logger.info("Using auth headers from %s", config.auth_path)
            return YTMusic(
                auth=str(config.auth_path),
                language=config.language,
                location=config.location,
            )
        logger.info("No auth configured for ytmusicapi requests")
        return YTMusic(language=config.language, location=config.location)

    def _send(self, endpoint: str, body: dict[str, Any], what: str) -> RawDocument:
        logger.debug("Requesting %s: %s", endpoint, what)
        try:
            return self._ytm._send_request(endpoint, body)
        except (YTMusicServerError, YTMusicUserError) as e:
            logger.warning("YTMusic API error for %s: %s", what, e)
            raise APIError(f"Failed to fetch {what}: {e}") from e
        except YTMusicError as e:
            logger.warning("YTMusic error for %s: %s", what, e)
            raise APIError(f"Failed to fetch {what}: {e}") from e

    def browse(self, browse_id: str, params: str | None = None) -> RawDocument:
        """Fetch a browse page.

        Raises:
            ValueError: If browse_id is empty.
            APIError: If API request fails.
        """
        if not browse_id or not browse_id.strip():
            raise ValueError("browse_id cannot be empty")
        body: dict[str, Any] = {"browseId": browse_id}
        if params:
            body["params"] = params
        return self._send("browse", body, browse_id)

    def next(self, video_id: str, playlist_id: str | None = None) -> RawDocument:
        """Fetch the now-playing document (queue, lyrics tab) for a video.

        Raises:
            ValueError: If video_id is empty.
            APIError: If API request fails.
        """
        if not video_id or not video_id.strip():
            raise ValueError("video_id cannot be empty")
        body: dict[str, Any] = {
            "videoId": video_id,
            "enablePersistentPlaylistPanel": True,
            "isAudioOnly": True,
            "tunerSettingValue": "AUTOMIX_SETTING_NORMAL",
        }
        if playlist_id:
            body["playlistId"] = playlist_id
        return self._send("next", body, video_id)

    def search(self, query: str) -> RawDocument:
        """Fetch unfiltered search results.

        Raises:
            APIError: If API request fails.
        """
        return self._send("search", {"query": query}, f"search '{query}'")

    def search_suggestions(self, query: str) -> RawDocument:
        """Fetch search suggestions (and history, when signed in) for input.

        Raises:
            APIError: If API request fails.
        """
        return self._send(
            "music/get_search_suggestions",
            {"input": query},
            f"suggestions for '{query}'",
        )

    def continuation(self, token: str, endpoint: str = "browse") -> RawDocument:
        """Fetch the next page for a continuation token.

        Raises:
            ValueError: If token is empty.
            APIError: If API request fails.
        """
        if not token:
            raise ValueError("token cannot be empty")
        return self._send(endpoint, {"continuation": token}, "continuation")
