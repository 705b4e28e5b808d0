"""Central version declaration for sesx2pl.

Update this file when cutting a new release tag. Keep semantic versioning.
The CLI --version option imports from here.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
