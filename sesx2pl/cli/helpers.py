from __future__ import annotations
import click

from ..config import load_typed_config, _configure_logging
from ..config_types import AppConfig
from ..version import __version__


def get_config(ctx: click.Context) -> AppConfig:
    """Typed view of the config dict stored on the context."""
    return AppConfig.from_dict(ctx.obj)


@click.group()
@click.version_option(version=__version__, prog_name="sesx2pl")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level.')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Convert Adobe Audition session files (.sesx) to CUE sheets or M3U playlists.

    \b
    TYPICAL WORKFLOWS:

    \b
    Inspect a session:
      sesx2pl info mix.sesx                  # Track names and clip counts

    \b
    Create playlists:
      sesx2pl convert mix.sesx mix.cue -s mix.mp3
      sesx2pl convert mix.sesx mix.m3u -t 0,2 -s D:/Music

    \b
    Configuration:
      sesx2pl config                         # Show effective settings
      SESX2PL__CUE__PERFORMER="DJ X"         # Override via environment or .env
    """
    if not isinstance(ctx.obj, dict):
        ctx.obj = load_typed_config().to_dict()

    if log_level is not None:
        ctx.obj['log_level'] = log_level.upper()
        _configure_logging(log_level)


__all__ = ["cli", "get_config"]
