"""Playlist renderers (CUE sheet, extended M3U)."""

from __future__ import annotations
from pathlib import Path

from .cue import render_cue
from .m3u import render_m3u

RENDERERS = {
    ".cue": "cue",
    ".m3u": "m3u",
}


def playlist_format(destination: str | Path) -> str:
    """Return "cue" or "m3u" for a destination path (case-insensitive).

    Raises:
        ValueError: If the extension is neither .cue nor .m3u
    """
    ext = Path(destination).suffix.lower()
    try:
        return RENDERERS[ext]
    except KeyError:
        raise ValueError(f"Unsupported playlist extension '{ext}' (expected .cue or .m3u)") from None


__all__ = ["render_cue", "render_m3u", "playlist_format", "RENDERERS"]
