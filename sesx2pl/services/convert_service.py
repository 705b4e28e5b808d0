"""Convert service: turn an Audition session file into a CUE or M3U playlist.

This service handles reading and validating the session, scanning it,
building the playlist for the selected tracks and dispatching to the
renderer chosen by the destination extension.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from ..config_types import AppConfig
from ..errors import SesxReadError, InvalidSesxError
from ..export import playlist_format
from ..export.cue import render_cue
from ..export.m3u import render_m3u
from ..playlist.builder import build_playlist
from ..playlist.models import PlaylistEntry
from ..sesx.scanner import scan, ScanResult

logger = logging.getLogger(__name__)

XML_SIGNATURE = "<?xml"
DOCTYPE_SIGNATURE = "<!DOCTYPE sesx>"


@dataclass
class ConvertOptions:
    """Per-run options (from CLI flags, falling back to config)."""
    tracks: Tuple[int, ...] = (0,)
    source: str | None = None
    delta: float = 0.0

    @classmethod
    def from_config(cls, config: AppConfig) -> ConvertOptions:
        return cls(tracks=config.convert.track_indexes(), delta=float(config.convert.delta))


class ConvertResult:
    """Results from a conversion."""

    def __init__(self):
        self.destination: str | None = None
        self.playlist_format: str | None = None
        self.entries: List[PlaylistEntry] = []
        self.missing_tracks: List[int] = []
        self.written = False
        self.write_error: str | None = None


def read_session(path: str | Path, encoding: str = "utf-8-sig") -> List[str]:
    """Read a session file and split it into lines.

    Lines are split on "\\n" only; trailing "\\r" is removed later by the
    scanner's strip.

    Raises:
        SesxReadError: If the file cannot be opened or decoded
    """
    try:
        text = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Reading {path} failed: {e}")
        raise SesxReadError() from e
    return text.split("\n")


def validate_signature(lines: Sequence[str]) -> None:
    """Check the first two lines for the XML declaration and sesx doctype.

    Raises:
        InvalidSesxError: If either signature line is missing
    """
    if len(lines) < 2:
        raise InvalidSesxError()
    if not lines[0].strip().lower().startswith(XML_SIGNATURE):
        raise InvalidSesxError()
    if not lines[1].strip().startswith(DOCTYPE_SIGNATURE):
        raise InvalidSesxError()


def load_session(path: str | Path, encoding: str = "utf-8-sig") -> Tuple[List[str], ScanResult]:
    """Read, validate and scan a session file.

    Returns:
        (lines, scan result)

    Raises:
        SesxError: Read, signature or sample rate failure
    """
    lines = read_session(path, encoding)
    validate_signature(lines)
    return lines, scan(lines)


def render_playlist(
    entries: Sequence[PlaylistEntry],
    fmt: str,
    options: ConvertOptions,
    config: AppConfig,
) -> str:
    """Render entries in ``fmt`` ("cue" or "m3u")."""
    if fmt == "cue":
        return render_cue(
            entries,
            source=options.source,
            delta=options.delta,
            performer=config.cue.performer,
            title=config.cue.title,
            placeholder_source=config.cue.placeholder_source,
        )
    return render_m3u(entries, source=options.source)


def prepare_playlist(
    source: str | Path,
    destination: str | Path,
    options: ConvertOptions | None = None,
    config: AppConfig | None = None,
) -> Tuple[ConvertResult, str]:
    """Read, build and render a playlist without writing it.

    Returns:
        (result, rendered document)

    Raises:
        SesxError: If the session cannot be read, validated, scanned or built
        ValueError: If the destination extension is not supported
    """
    config = config or AppConfig()
    options = options or ConvertOptions.from_config(config)
    result = ConvertResult()
    result.destination = str(destination)
    result.playlist_format = playlist_format(destination)

    lines, session = load_session(source, config.convert.encoding)
    result.missing_tracks = [t for t in options.tracks if not 0 <= t < len(session.tracks)]
    result.entries = build_playlist(session, lines, options.tracks, options.delta)
    return result, render_playlist(result.entries, result.playlist_format, options, config)


def write_playlist(result: ConvertResult, data: str, config: AppConfig | None = None) -> ConvertResult:
    """Write a rendered document to ``result.destination``.

    Failures are logged and stored in ``result.write_error``.
    """
    config = config or AppConfig()
    try:
        Path(result.destination).write_text(data, encoding=config.export.encoding, newline="")
        result.written = True
        logger.debug(f"[exported] {result.playlist_format} entries={len(result.entries)} file={result.destination}")
    except (OSError, UnicodeEncodeError) as e:
        result.write_error = str(e)
        logger.warning(f"Writing {result.destination} failed: {e}")
    return result


def convert(
    source: str | Path,
    destination: str | Path,
    options: ConvertOptions | None = None,
    config: AppConfig | None = None,
) -> ConvertResult:
    """Convert a session file into a playlist file.

    Input problems abort before anything is written. A failed write is
    logged and reported through ``result.write_error``; it does not raise.

    Args:
        source: Path to the .sesx file
        destination: Path to the .cue or .m3u file to create
        options: Track selection, source substitution and delta
        config: Application config (header values, encodings)

    Returns:
        ConvertResult

    Raises:
        SesxError: If the session cannot be read, validated, scanned or built
        ValueError: If the destination extension is not supported
    """
    result, data = prepare_playlist(source, destination, options, config)
    return write_playlist(result, data, config)


__all__ = [
    "ConvertOptions",
    "ConvertResult",
    "read_session",
    "validate_signature",
    "load_session",
    "render_playlist",
    "prepare_playlist",
    "write_playlist",
    "convert",
    "XML_SIGNATURE",
    "DOCTYPE_SIGNATURE",
]
