"""Top-level package for sesx2pl (Audition session to playlist converter).

Version identifier is defined in :mod:`sesx2pl.version` to keep a single
source of truth that can be imported without pulling heavier submodules.
"""

from .version import __version__  # re-export

__all__ = ["__version__"]
