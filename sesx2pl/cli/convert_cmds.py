"""Session conversion commands (convert, info)."""

from __future__ import annotations
import click
import logging
from pathlib import Path

from .helpers import cli, get_config
from ..config_types import parse_track_list
from ..errors import SesxError
from ..export import RENDERERS
from ..services.convert_service import ConvertOptions, load_session, prepare_playlist, write_playlist
from ..services.info_service import report_info
from ..utils.output import section_header, success, error, info, file_path, count_badge

logger = logging.getLogger(__name__)

SESSION_EXTENSION = ".sesx"


def _parse_tracks(ctx: click.Context, param: click.Parameter, value: str | None):
    if value is None:
        return None
    try:
        return parse_track_list(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


def _check_session_path(source: str) -> None:
    if Path(source).suffix.lower() != SESSION_EXTENSION:
        raise click.UsageError(f"SOURCE must be a {SESSION_EXTENSION} file: {source}")


def _print_info(ctx: click.Context, source: str) -> None:
    cfg = get_config(ctx)
    try:
        _, session = load_session(source, cfg.convert.encoding)
    except SesxError as e:
        click.echo(error(str(e)))
        ctx.exit(1)
    click.echo(report_info(session.tracks))
    click.echo()


@cli.command(name="convert")
@click.argument('source', type=click.Path(dir_okay=False))
@click.argument('destination', type=click.Path(dir_okay=False))
@click.option('-t', '--track', 'tracks', callback=_parse_tracks, default=None,
              help='Include track(s) using comma separated index list (0-base). Default: 0.')
@click.option('-s', '--source', 'audio_source', default=None,
              help='Path to source audio for CUE file, substitute path for m3u.')
@click.option('-d', '--delta', type=float, default=None,
              help='Add delta (seconds) to the start point of each CUE track.')
@click.option('-i', '--info', 'info_only', is_flag=True, help='List key information about the sesx file.')
@click.pass_context
def convert_cmd(ctx: click.Context, source: str, destination: str, tracks, audio_source: str | None,
                delta: float | None, info_only: bool):
    """Convert an Audition .sesx session to a .cue or .m3u playlist.

    The destination extension selects the format. Clips of all selected
    tracks are merged and ordered by their start time.

    \b
    Examples:
        sesx2pl convert mix.sesx mix.cue -s "mix.mp3" -d 2
        sesx2pl convert mix.sesx mix.m3u -t 0,1 -s "D:/Music"
    """
    _check_session_path(source)
    if Path(destination).suffix.lower() not in RENDERERS:
        raise click.UsageError(f"DESTINATION must be a .cue or .m3u file: {destination}")

    if info_only:
        _print_info(ctx, source)
        return

    cfg = get_config(ctx)
    try:
        options = ConvertOptions.from_config(cfg)
    except ValueError as e:
        raise click.UsageError(f"Invalid convert.tracks setting: {e}") from None
    if tracks is not None:
        options.tracks = tracks
    if delta is not None:
        options.delta = delta
    options.source = audio_source
    logger.debug(f"Options: tracks={options.tracks} source={options.source} delta={options.delta}")

    click.echo(section_header(f"Converting {Path(source).name}"))
    try:
        result, data = prepare_playlist(source, destination, options, cfg)
    except SesxError as e:
        click.echo(error(str(e)))
        ctx.exit(1)

    click.echo(info(count_badge(len(result.entries), "entries")))
    click.echo(file_path(destination, "Saving to"))
    write_playlist(result, data, cfg)
    if result.write_error:
        click.echo(error("Error: Could not write to out file!"))
    click.echo(success("Done."))

    if result.write_error and cfg.export.fail_on_write_error:
        ctx.exit(1)


@cli.command(name="info")
@click.argument('source', type=click.Path(dir_okay=False))
@click.pass_context
def info_cmd(ctx: click.Context, source: str):
    """List key information about a .sesx session (tracks and clip counts)."""
    _check_session_path(source)
    _print_info(ctx, source)


__all__ = ["convert_cmd", "info_cmd"]
