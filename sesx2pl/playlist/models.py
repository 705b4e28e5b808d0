from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

NAME_SEPARATOR = " - "


def unescape_amp(text: str) -> str:
    return text.replace("&amp;", "&")


@dataclass(frozen=True)
class PlaylistEntry:
    """Renderer-ready clip: times in seconds, resolved file path, display name.

    ``path`` is None when the clip's file id matched no file reference.
    """
    start: float
    duration: float
    path: str | None
    name: str = ""

    @property
    def end(self) -> float:
        return self.start + self.duration

    def artist_title(self) -> Tuple[str, str]:
        """Split ``name`` on " - " into (performer, title).

        Only the first two segments are used; a missing side is "".
        """
        parts = [p.strip() for p in self.name.split(NAME_SEPARATOR)]
        artist = parts[0] if parts else ""
        title = parts[1] if len(parts) > 1 else ""
        return unescape_amp(artist), unescape_amp(title)


__all__ = ["PlaylistEntry", "unescape_amp", "NAME_SEPARATOR"]
