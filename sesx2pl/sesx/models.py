"""Records collected while scanning a session."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Track:
    """One audio track lane.

    ``clips`` holds the (0-based) line indexes of the track's clip lines in
    scan order; the lines themselves are re-read when building the playlist.
    """
    name: str = ""
    line: int = 0
    clips: List[int] = field(default_factory=list)

    @property
    def clip_count(self) -> int:
        return len(self.clips)


@dataclass(frozen=True)
class FileReference:
    """External audio file referenced by clips through ``id``."""
    path: str
    id: str | None = None


@dataclass(frozen=True)
class ClipRecord:
    """Values read back from one clip line (sample counts, not seconds)."""
    file_id: str | None
    raw_start: int | float
    raw_end: int | float
    name: str = ""


__all__ = ["Track", "FileReference", "ClipRecord"]
