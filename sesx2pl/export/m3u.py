from __future__ import annotations
import logging
import ntpath
import os
from typing import Iterable

from ..playlist.models import PlaylistEntry

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
MISSING_PREFIX = "!MISSING - "


def _extinf_line(entry: PlaylistEntry) -> str:
    return f"#EXTINF:{int(entry.duration)},{entry.name}"


def entry_path(entry: PlaylistEntry, source: str | None = None) -> str:
    """Path line for an entry.

    With ``source`` the file's basename is joined onto that directory. The
    basename is taken Windows-style since Audition records backslash paths
    on every platform.
    """
    if entry.path is None:
        return f"{MISSING_PREFIX}{entry.name}"
    if source:
        return os.path.join(source, ntpath.basename(entry.path))
    return entry.path


def render_m3u(entries: Iterable[PlaylistEntry], source: str | None = None) -> str:
    """Render entries as an extended M3U playlist.

    Durations are truncated to whole seconds. Entries whose file could not
    be resolved get a '!MISSING - <name>' placeholder path so every #EXTINF
    keeps its path line.

    Args:
        entries: Time ordered playlist entries
        source: Optional directory substituted for each file's directory

    Returns:
        CRLF joined document ending with a line break
    """
    lines = [HEADER]
    missing = 0
    for entry in entries:
        if entry.path is None:
            missing += 1
            logger.warning(f"No audio file found for '{entry.name}', writing placeholder")
        lines.append(_extinf_line(entry))
        lines.append(entry_path(entry, source))
    if missing:
        logger.debug(f"[m3u] {missing} entries without file reference")

    lines.append("")
    return "\r\n".join(lines)


__all__ = ["render_m3u", "entry_path", "HEADER", "MISSING_PREFIX"]
