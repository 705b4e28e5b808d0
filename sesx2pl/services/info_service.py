"""Info service: summarize the tracks of a session without building a playlist."""

from __future__ import annotations
from typing import Sequence

from ..sesx.models import Track


def report_info(tracks: Sequence[Track]) -> str:
    """Return the track summary shown by ``--info``.

    Example:
        Audition sesx information:

        Number of tracks: 2 - (Music, Voice)
          # of entries in track 0: 12
          # of entries in track 1: 3
    """
    names = ", ".join(t.name for t in tracks)
    lines = [
        "Audition sesx information:",
        "",
        f"Number of tracks: {len(tracks)} - ({names})",
    ]
    for i, track in enumerate(tracks):
        lines.append(f"  # of entries in track {i}: {track.clip_count}")
    return "\n".join(lines)


__all__ = ["report_info"]
