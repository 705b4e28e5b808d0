"""Typed configuration dataclasses for sesx2pl.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Tuple

DEFAULT_TRACKS: Tuple[int, ...] = (0,)


@dataclass
class ConvertConfig:
    """Defaults for the session-to-playlist conversion."""
    tracks: str = "0"  # comma separated, 0-based
    delta: float = 0.0  # seconds, CUE only
    encoding: str = "utf-8-sig"

    def track_indexes(self) -> Tuple[int, ...]:
        """Parse ``tracks`` into an ordered tuple of unique indexes."""
        return parse_track_list(str(self.tracks))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class CueConfig:
    """CUE sheet header values."""
    performer: str = "sesx2pl"
    title: str = "Playlist"
    placeholder_source: str = "INSERT-FILENAME-TO-SOURCE.mp3"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class ExportConfig:
    """Playlist file output configuration."""
    encoding: str = "utf-8"
    fail_on_write_error: bool = False  # False keeps the historical "Done." exit 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for backward compatibility."""
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    convert: ConvertConfig = field(default_factory=ConvertConfig)
    cue: CueConfig = field(default_factory=CueConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "convert": self.convert.to_dict(),
            "cue": self.cue.to_dict(),
            "export": self.export.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            convert=ConvertConfig(**data.get("convert", {})),
            cue=CueConfig(**data.get("cue", {})),
            export=ExportConfig(**data.get("export", {})),
        )


def parse_track_list(text: str) -> Tuple[int, ...]:
    """Parse a comma separated list of track indexes.

    Duplicates are dropped, first occurrence keeps its position. A list
    without any index selects track 0.

    Raises:
        ValueError: If an item is not an integer
    """
    indexes = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            indexes.append(int(part))
        except ValueError:
            raise ValueError(f"'{part}' is not a track index") from None
    return tuple(dict.fromkeys(indexes)) or DEFAULT_TRACKS


__all__ = [
    "AppConfig",
    "DEFAULT_TRACKS",
    "ConvertConfig",
    "CueConfig",
    "ExportConfig",
    "parse_track_list",
]
