"""Playlist builder: turn the clips of selected tracks into timed entries."""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Sequence

from ..errors import ClipFormatError
from ..sesx import fields
from ..sesx.fields import extract, parse_number
from ..sesx.models import ClipRecord
from ..sesx.scanner import ScanResult
from .models import PlaylistEntry

logger = logging.getLogger(__name__)


def parse_clip(line: str, line_number: int) -> ClipRecord:
    """Read fileID, startPoint, endPoint and name back from a clip line.

    Args:
        line: Raw clip line
        line_number: 1-based line number (for error messages)

    Raises:
        ClipFormatError: If startPoint or endPoint is missing or not numeric
    """
    values = {}
    for label, pattern in (("startPoint", fields.START_POINT), ("endPoint", fields.END_POINT)):
        raw = extract(pattern, line)
        try:
            value = parse_number(raw)
        except ValueError:
            detail = f"missing {label}" if raw is None else f"{label}={raw!r} is not a number"
            raise ClipFormatError(line_number, detail) from None
        if not math.isfinite(value):
            raise ClipFormatError(line_number, f"{label}={raw!r} is not a number")
        values[label] = value
    return ClipRecord(
        file_id=extract(fields.FILE_ID, line),
        raw_start=values["startPoint"],
        raw_end=values["endPoint"],
        name=extract(fields.NAME, line) or "",
    )


def build_playlist(
    scan: ScanResult,
    lines: Sequence[str],
    selected: Iterable[int],
    delta: float = 0.0,
) -> List[PlaylistEntry]:
    """Build the time ordered playlist for the selected tracks.

    Args:
        scan: Result of scanning ``lines``
        lines: The session lines the scan was run on
        selected: 0-based track indexes, in selection order
        delta: Accepted for symmetry with the renderers; not applied here.
            Only the CUE renderer shifts start points.

    Returns:
        Entries sorted by start time. Ties keep track-then-clip order.
    """
    entries: List[PlaylistEntry] = []
    rate = scan.sample_rate

    for index in selected:
        if index < 0 or index >= len(scan.tracks):
            logger.warning(f"Project has no track {index}")
            continue
        track = scan.tracks[index]
        for line_index in track.clips:
            clip = parse_clip(lines[line_index], line_index + 1)
            path = scan.find_file_path(clip.file_id)
            if path is None:
                logger.debug(f"No file reference for fileID={clip.file_id!r} (line {line_index + 1})")
            entries.append(PlaylistEntry(
                start=clip.raw_start / rate,
                duration=(clip.raw_end - clip.raw_start) / rate,
                path=path,
                name=clip.name,
            ))
        logger.debug(f"Track {index} '{track.name}': {track.clip_count} clips")

    # list.sort is stable
    entries.sort(key=lambda e: e.start)
    return entries


__all__ = ["build_playlist", "parse_clip"]
