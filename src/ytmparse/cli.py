#!/usr/bin/env python3
"""Command-line interface for ytmparse.

This CLI is primarily for debugging and development: parse a saved response
document, or fetch a live one and parse it in the same step.
For production use, import ytmparse as a library.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytmparse.client import YTMusicRawClient, YTMusicRawProtocol
from ytmparse.config import APIConfig, DocumentKind
from ytmparse.exceptions import DocumentLoadError, YTMParseError
from ytmparse.models import (
    ArtistDetail,
    HomeResponse,
    Lyrics,
    Playlist,
    PlaylistContinuation,
    PlaylistDetail,
    PodcastEpisode,
    PodcastEpisodesContinuation,
    PodcastSection,
    PodcastShowDetail,
    SearchResponse,
    SearchSuggestion,
    Song,
)
from ytmparse.parsers import (
    lyrics_browse_id,
    parse_artist_detail,
    parse_artist_songs,
    parse_discovery,
    parse_episodes_continuation,
    parse_home,
    parse_home_continuation,
    parse_library_playlists,
    parse_lyrics,
    parse_playlist_continuation,
    parse_playlist_detail,
    parse_radio_queue,
    parse_search,
    parse_search_suggestions,
    parse_show_detail,
    parse_song,
)
from ytmparse.utils.ids import parse_mood_category_id

logger = logging.getLogger("ytmparse")

ParseResult = BaseModel | list[BaseModel]

HOME_BROWSE_ID = "FEmusic_home"
LIBRARY_BROWSE_ID = "FEmusic_liked_playlists"
PODCASTS_BROWSE_ID = "FEmusic_non_music_audio"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    # Clear existing handlers to allow reconfiguration
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


# =============================================================================
# Loading and dispatch
# =============================================================================


def load_document(path: Path) -> dict[str, Any]:
    """Read a saved response document.

    Raises:
        DocumentLoadError: If the file cannot be read, is not JSON, or does
            not hold a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentLoadError(f"Cannot load {path}: {e}") from e
    if not isinstance(data, dict):
        raise DocumentLoadError(f"{path} does not contain a JSON object")
    return data


def parse_document(
    kind: DocumentKind, data: dict[str, Any], entity_id: str | None = None
) -> ParseResult:
    """Run the parser for ``kind`` over a decoded document.

    Raises:
        ValueError: If ``kind`` needs an entity id and none was given.
        StructureMismatchError: If a song document lacks the requested song.
    """
    if kind.needs_id and not entity_id:
        raise ValueError(f"Parsing a {kind} document requires an id")

    match kind:
        case DocumentKind.HOME:
            return parse_home(data)
        case DocumentKind.HOME_CONTINUATION:
            return parse_home_continuation(data)
        case DocumentKind.SONG:
            return parse_song(data, entity_id)
        case DocumentKind.RADIO:
            return parse_radio_queue(data)
        case DocumentKind.ARTIST:
            return parse_artist_detail(data, entity_id)
        case DocumentKind.ARTIST_SONGS:
            return parse_artist_songs(data)
        case DocumentKind.PLAYLIST:
            return parse_playlist_detail(data, entity_id)
        case DocumentKind.PLAYLIST_CONTINUATION:
            return parse_playlist_continuation(data)
        case DocumentKind.LIBRARY:
            return parse_library_playlists(data)
        case DocumentKind.LYRICS:
            return parse_lyrics(data)
        case DocumentKind.PODCASTS:
            return parse_discovery(data)
        case DocumentKind.PODCAST_SHOW:
            return parse_show_detail(data, entity_id)
        case DocumentKind.EPISODES_CONTINUATION:
            return parse_episodes_continuation(data)
        case DocumentKind.SEARCH:
            return parse_search(data)
        case DocumentKind.SUGGESTIONS:
            return parse_search_suggestions(data)


def _playlist_browse_id(playlist_id: str) -> str:
    if playlist_id.startswith(("VL", "MPRE")):
        return playlist_id
    return f"VL{playlist_id}"


def fetch_document(
    client: YTMusicRawProtocol, kind: DocumentKind, entity_id: str | None
) -> dict[str, Any] | None:
    """Fetch the raw document a ``kind`` parser expects.

    ``entity_id`` is a video id, browse id, continuation token or search
    query depending on the kind.

    Returns:
        The document, or None for lyrics when the song has no lyrics tab.

    Raises:
        ValueError: If ``kind`` needs an id and none was given.
        APIError: If the request fails.
    """
    match kind:
        case DocumentKind.HOME:
            # Mood and genre pages share the home page layout
            if entity_id and (mood := parse_mood_category_id(entity_id)):
                browse_id, params = mood
                return client.browse(browse_id, params=params)
            return client.browse(HOME_BROWSE_ID)
        case DocumentKind.LIBRARY:
            return client.browse(LIBRARY_BROWSE_ID)
        case DocumentKind.PODCASTS:
            return client.browse(PODCASTS_BROWSE_ID)

    if not entity_id:
        raise ValueError(f"Fetching a {kind} document requires an id")

    match kind:
        case DocumentKind.SONG:
            return client.next(entity_id)
        case DocumentKind.RADIO:
            return client.next(entity_id, playlist_id=f"RDAMVM{entity_id}")
        case DocumentKind.LYRICS:
            browse_id = lyrics_browse_id(client.next(entity_id))
            if browse_id is None:
                logger.info("No lyrics tab for %s", entity_id)
                return None
            return client.browse(browse_id)
        case DocumentKind.PLAYLIST:
            return client.browse(_playlist_browse_id(entity_id))
        case DocumentKind.SEARCH:
            return client.search(entity_id)
        case DocumentKind.SUGGESTIONS:
            return client.search_suggestions(entity_id)
        case (
            DocumentKind.HOME_CONTINUATION
            | DocumentKind.PLAYLIST_CONTINUATION
            | DocumentKind.EPISODES_CONTINUATION
        ):
            return client.continuation(entity_id)
        case _:
            return client.browse(entity_id)


# =============================================================================
# Output
# =============================================================================


def _dump(result: ParseResult) -> Any:
    if isinstance(result, list):
        return [item.model_dump(mode="json") for item in result]
    return result.model_dump(mode="json")


def print_songs(console: Console, songs: list[Song], title: str = "Songs") -> None:
    """Print songs as a table."""
    table = Table(title=f"[bold]{title}[/bold] ({len(songs)})", title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Artists")
    table.add_column("Album", style="dim")
    table.add_column("Duration", justify="right")
    table.add_column("Video ID", style="cyan")

    for index, song in enumerate(songs, 1):
        table.add_row(
            str(index),
            song.title,
            song.artists_display,
            song.album.title if song.album else "",
            song.duration_display,
            song.id,
        )
    console.print()
    console.print(table)


def print_card(
    console: Console, title: str, rows: list[tuple[str, str | None]]
) -> None:
    """Print key/value rows as a vertical card, skipping empty values."""
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{title}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=14)
    table.add_column("Value", overflow="fold")
    for field_name, value in rows:
        if value:
            table.add_row(field_name, value)
    console.print()
    console.print(table)


def print_playlists(console: Console, playlists: list[Playlist]) -> None:
    table = Table(
        title=f"[bold]Playlists[/bold] ({len(playlists)})", title_justify="left"
    )
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ID", style="cyan")
    for playlist in playlists:
        table.add_row(playlist.title, playlist.author or "", playlist.id)
    console.print()
    console.print(table)


def print_episodes(console: Console, episodes: list[PodcastEpisode]) -> None:
    table = Table(
        title=f"[bold]Episodes[/bold] ({len(episodes)})", title_justify="left"
    )
    table.add_column("Title", style="bold")
    table.add_column("Published", style="dim")
    table.add_column("Duration", justify="right")
    table.add_column("Played", justify="center")
    table.add_column("Video ID", style="cyan")
    for episode in episodes:
        table.add_row(
            episode.title,
            episode.published_date or "",
            episode.formatted_duration or "",
            "✓" if episode.is_played else "",
            episode.id,
        )
    console.print()
    console.print(table)


def _print_more(console: Console, token: str | None) -> None:
    if token:
        console.print(f"[dim]More available, continuation: {token}[/dim]")


def print_result(console: Console, result: ParseResult) -> None:
    """Render any parse result in a human-readable form."""
    match result:
        case HomeResponse():
            for section in result.sections:
                chart = "  [magenta](chart)[/magenta]" if section.is_chart else ""
                table = Table(
                    title=f"[bold]{section.title}[/bold]{chart}", title_justify="left"
                )
                table.add_column("Kind", style="dim")
                table.add_column("Title", style="bold")
                table.add_column("Subtitle")
                table.add_column("ID", style="cyan")
                for item in section.items:
                    table.add_row(
                        item.kind,
                        item.title,
                        item.subtitle or "",
                        item.video_id or item.browse_id or "",
                    )
                console.print()
                console.print(table)
            _print_more(console, result.continuation_token)
        case Song():
            video_type = result.music_video_type
            has_video = video_type is not None and video_type.has_video
            print_card(
                console,
                result.title,
                [
                    ("Artists", result.artists_display),
                    ("Duration", result.duration_display),
                    ("Video type", result.music_video_type),
                    ("Has video", "yes" if has_video else None),
                    ("Like status", result.like_status),
                    ("In library", "yes" if result.is_in_library else "no"),
                    ("Thumbnail", result.thumbnail_url),
                ],
            )
        case ArtistDetail():
            print_card(
                console,
                result.name,
                [
                    ("ID", result.id),
                    ("Channel", result.channel_id),
                    ("Subscribers", result.subscriber_count),
                    ("Subscribed", "yes" if result.is_subscribed else "no"),
                    ("Radio", result.mix_playlist_id),
                    ("Description", result.description),
                ],
            )
            print_songs(console, result.songs)
            if result.albums:
                table = Table(title="[bold]Albums[/bold]", title_justify="left")
                table.add_column("Title", style="bold")
                table.add_column("Year", style="dim")
                table.add_column("ID", style="cyan")
                for album in result.albums:
                    table.add_row(album.title, album.year or "", album.id)
                console.print()
                console.print(table)
        case PlaylistDetail():
            print_card(
                console,
                result.title,
                [
                    ("ID", result.id),
                    ("Author", result.playlist.author),
                    ("Tracks", result.playlist.track_count_display),
                    ("Duration", result.duration),
                    ("Description", result.playlist.description),
                ],
            )
            print_songs(console, result.tracks, title="Tracks")
        case PlaylistContinuation():
            print_songs(console, result.tracks, title="Tracks")
            _print_more(console, result.continuation_token)
        case Lyrics():
            if not result.is_available:
                console.print("[yellow]No lyrics available[/yellow]")
                return
            console.print(result.text)
            if result.source:
                console.print(f"\n[dim]{result.source}[/dim]")
        case PodcastShowDetail():
            print_card(
                console,
                result.show.title,
                [
                    ("ID", result.show.id),
                    ("Author", result.show.author),
                    ("Subscribed", "yes" if result.is_subscribed else "no"),
                    ("Description", result.show.description),
                ],
            )
            print_episodes(console, result.episodes)
            _print_more(console, result.continuation_token)
        case PodcastEpisodesContinuation():
            print_episodes(console, result.episodes)
            _print_more(console, result.continuation_token)
        case SearchResponse():
            if result.is_empty:
                console.print("[yellow]No results[/yellow]")
                return
            table = Table(title="[bold]Results[/bold]", title_justify="left")
            table.add_column("Kind", style="dim")
            table.add_column("Title", style="bold")
            table.add_column("Subtitle")
            table.add_column("ID", style="cyan")
            for item in result.all_items:
                table.add_row(
                    item.kind,
                    item.title,
                    item.subtitle or "",
                    item.video_id or item.browse_id or "",
                )
            console.print()
            console.print(table)
        case list() if not result:
            console.print("[yellow]Nothing found[/yellow]")
        case [Song(), *_]:
            print_songs(console, result)
        case [Playlist(), *_]:
            print_playlists(console, result)
        case [SearchSuggestion(), *_]:
            for suggestion in result:
                marker = "[dim](history)[/dim] " if suggestion.is_history else ""
                console.print(f"{marker}{suggestion.query}")
        case [PodcastSection(), *_]:
            for section in result:
                table = Table(
                    title=f"[bold]{section.title}[/bold]", title_justify="left"
                )
                table.add_column("Kind", style="dim")
                table.add_column("Title", style="bold")
                table.add_column("ID", style="cyan")
                for item in section.items:
                    title = (
                        item.show.title if item.kind == "show" else item.episode.title
                    )
                    table.add_row(item.kind, title, item.id)
                console.print()
                console.print(table)
        case _:
            console.print_json(json.dumps(_dump(result), default=str))


def emit(console: Console, result: ParseResult, as_json: bool) -> None:
    if as_json:
        json.dump(_dump(result), sys.stdout, indent=2, ensure_ascii=False, default=str)
        sys.stdout.write("\n")
    else:
        print_result(console, result)


# =============================================================================
# Commands
# =============================================================================

KIND_CHOICE = click.Choice([kind.value for kind in DocumentKind])


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Parse YouTube Music web responses into normalized entities."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="parse")
@click.argument("kind", type=KIND_CHOICE, metavar="KIND")
@click.argument("file", type=click.Path(path_type=Path), metavar="FILE")
@click.option("--id", "entity_id", help="Requested id (song, artist, playlist, show).")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def parse_cmd(kind: str, file: Path, entity_id: str | None, as_json: bool) -> None:
    """Parse a saved response document.

    \b
    Examples:
      ytmparse parse home home.json
      ytmparse parse song next.json --id dQw4w9WgXcQ
      ytmparse parse playlist playlist.json --id VLPLxxx --json
    """
    console = Console()
    document_kind = DocumentKind(kind)
    try:
        data = load_document(file)
        result = parse_document(document_kind, data, entity_id)
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    except YTMParseError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    emit(console, result, as_json)


@main.command(name="fetch")
@click.argument("kind", type=KIND_CHOICE, metavar="KIND")
@click.argument("entity_id", required=False, metavar="[ID]")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--auth",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a browser auth headers file for signed-in requests.",
)
@click.option("--language", default="en", show_default=True, help="Interface language.")
@click.option(
    "--save", type=click.Path(path_type=Path), help="Also save the raw document."
)
def fetch_cmd(
    kind: str,
    entity_id: str | None,
    as_json: bool,
    auth: Path | None,
    language: str,
    save: Path | None,
) -> None:
    """Fetch a live document and parse it.

    ID is a video id, browse id, continuation token, search query or
    (for home) a mood tile id, depending on KIND.

    \b
    Examples:
      ytmparse fetch home
      ytmparse fetch artist UCxxxxxxxxxxxxxxxxxxxxxx
      ytmparse fetch search "daft punk" --json
    """
    console = Console()
    document_kind = DocumentKind(kind)
    try:
        client = YTMusicRawClient(config=APIConfig(language=language, auth_path=auth))
        data = fetch_document(client, document_kind, entity_id)
        if data is None:
            emit(console, Lyrics.unavailable(), as_json)
            return
        if save is not None:
            save.write_text(
                json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            logger.info("Saved raw document to %s", save)
        result = parse_document(document_kind, data, entity_id)
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    except YTMParseError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    emit(console, result, as_json)


if __name__ == "__main__":
    main()
