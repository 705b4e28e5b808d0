"""CUE sheet rendering."""

from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Iterable

from ..playlist.models import PlaylistEntry

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "INSERT-FILENAME-TO-SOURCE.mp3"


def cue_timestamp(seconds: float) -> str:
    """Format seconds as MM:SS:00.

    Minutes and seconds are truncated toward zero; frames are always 00.
    """
    minutes = int(seconds / 60)
    secs = int(math.fmod(seconds, 60))
    return f"{minutes:02d}:{secs:02d}:00"


def render_cue(
    entries: Iterable[PlaylistEntry],
    source: str | None = None,
    delta: float = 0.0,
    performer: str = "sesx2pl",
    title: str = "Playlist",
    placeholder_source: str = DEFAULT_SOURCE,
) -> str:
    """Render entries as a CUE sheet indexing into one source audio file.

    Args:
        entries: Time ordered playlist entries
        source: Path of the source audio; only its basename is written
        delta: Seconds added to every entry's start point
        performer: Sheet-level PERFORMER
        title: Sheet-level TITLE
        placeholder_source: File name used when ``source`` is not given

    Returns:
        CRLF joined document ending with a line break
    """
    src = Path(source or placeholder_source).name
    file_type = Path(src).suffix[1:].upper()

    lines = [f'PERFORMER "{performer}"', f'TITLE "{title}"', f'FILE "{src}" {file_type}']
    count = 0
    for count, entry in enumerate(entries, start=1):
        artist, track_title = entry.artist_title()
        lines.extend([
            f"  TRACK {count:02d} AUDIO",
            f'    TITLE "{track_title}"',
            f'    PERFORMER "{artist}"',
            f"    INDEX 01 {cue_timestamp(entry.start + delta)}",
        ])
    logger.debug(f"Rendered CUE sheet: {count} tracks, source={src}, delta={delta}")

    lines.append("")
    return "\r\n".join(lines)


__all__ = ["render_cue", "cue_timestamp", "DEFAULT_SOURCE"]
