"""Playlist entries built from scanned sessions."""

from .models import PlaylistEntry
from .builder import build_playlist, parse_clip

__all__ = ["PlaylistEntry", "build_playlist", "parse_clip"]
