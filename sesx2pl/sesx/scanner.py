"""Single pass record scanner for sesx sessions.

The scanner does not parse XML. It relies on Audition writing one element
per line and recognizes five line shapes by their prefix:

    <audioTrack ...>      opens a track
    <name>...</name>      first one after a track header names the track
    <audioClip ...>       clip belonging to the open track
    <file ...>            file reference (absolutePath + id)
    <session ...>         carries the sample rate
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from ..errors import SampleRateNotFoundError
from . import fields
from .fields import extract, parse_number
from .models import Track, FileReference

logger = logging.getLogger(__name__)


class ScannerState(Enum):
    NO_TRACK = "no_track"
    AWAITING_NAME = "awaiting_name"
    NAMED = "named"


@dataclass
class ScanResult:
    """Tracks, file references and sample rate of one session."""
    tracks: List[Track] = field(default_factory=list)
    files: List[FileReference] = field(default_factory=list)
    sample_rate: int | float = 0

    def find_file_path(self, file_id: str | None) -> str | None:
        """Return the path of the first file reference with ``file_id``."""
        if file_id is None:
            return None
        for ref in self.files:
            if ref.id == file_id:
                return ref.path
        return None


class SessionScanner:
    """Line-by-line state machine collecting a ScanResult.

    Feed lines in order with :meth:`feed`, then call :meth:`finish`.
    """

    def __init__(self):
        self.state = ScannerState.NO_TRACK
        self.result = ScanResult()
        self._track: Track | None = None

    @property
    def current_track(self) -> Track | None:
        return self._track

    def feed(self, index: int, raw_line: str) -> None:
        line = raw_line.strip()
        if line.startswith(fields.TRACK_MARKER):
            self._open_track(index)
        elif self.state is ScannerState.AWAITING_NAME and line.startswith(fields.NAME_MARKER):
            self._track.name = extract(fields.DISPLAY_NAME, line) or ""  # type: ignore[union-attr]
            self.state = ScannerState.NAMED
        elif self._track is not None and line.startswith(fields.CLIP_MARKER):
            self._track.clips.append(index)
        elif line.startswith(fields.FILE_MARKER):
            self._add_file(index, line)
        elif line.startswith(fields.SESSION_MARKER):
            self.result.sample_rate = _sample_rate(line)

    def finish(self) -> ScanResult:
        """Return the collected records.

        Raises:
            SampleRateNotFoundError: If no positive sample rate was seen
        """
        rate = self.result.sample_rate
        if not rate or not math.isfinite(rate) or rate <= 0:
            raise SampleRateNotFoundError()
        logger.debug(
            f"Scanned {len(self.result.tracks)} tracks, {len(self.result.files)} files, "
            f"sample rate {self.result.sample_rate}"
        )
        return self.result

    def _open_track(self, index: int) -> None:
        self._track = Track(name="", line=index)
        self.result.tracks.append(self._track)
        self.state = ScannerState.AWAITING_NAME

    def _add_file(self, index: int, line: str) -> None:
        path = extract(fields.ABSOLUTE_PATH, line)
        if not path:
            logger.debug(f"Skipping file reference without absolutePath on line {index + 1}")
            return
        file_id = extract(fields.ID, line) or None
        self.result.files.append(FileReference(path=path, id=file_id))


def _sample_rate(line: str) -> int | float:
    try:
        return parse_number(extract(fields.SAMPLE_RATE, line))
    except ValueError:
        return 0


def scan(lines: Iterable[str]) -> ScanResult:
    """Scan session lines once and collect tracks, files and sample rate.

    Args:
        lines: All lines of the session document, in order

    Returns:
        ScanResult

    Raises:
        SampleRateNotFoundError: If the session header has no usable sample rate
    """
    scanner = SessionScanner()
    for index, line in enumerate(lines):
        scanner.feed(index, line)
    return scanner.finish()


__all__ = ["scan", "ScanResult", "ScannerState", "SessionScanner"]
