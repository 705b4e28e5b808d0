"""Module entry point for `python -m sesx2pl.cli`."""
import sys

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    from sesx2pl.cli import cli

    cli()
