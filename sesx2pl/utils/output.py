"""Output formatting utilities for consistent CLI reporting."""

import click
from pathlib import Path


def section_header(text: str) -> str:
    """Format a section header with color.

    Args:
        text: Header text

    Returns:
        Formatted header string
    """
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def success(text: str, prefix: str = "✓") -> str:
    """Format a success message.

    Args:
        text: Message text
        prefix: Prefix character (default: ✓)

    Returns:
        Formatted success string
    """
    return f"{click.style(prefix, fg='green')} {text}"


def error(text: str, prefix: str = "✗") -> str:
    """Format an error message.

    Args:
        text: Message text
        prefix: Prefix character (default: ✗)

    Returns:
        Formatted error string
    """
    return f"{click.style(prefix, fg='red')} {click.style(text, fg='red')}"


def info(text: str) -> str:
    """Format an info message."""
    return f"  {click.style('•', fg='blue')} {text}"


def file_path(path: Path | str, label: str | None = None) -> str:
    """Format a file path with optional label.

    Args:
        path: File path to format
        label: Optional label to show before path

    Returns:
        Formatted path string
    """
    path_str = str(path)
    if label:
        return f"{label}: {click.style(path_str, fg='yellow')}"
    return click.style(path_str, fg='yellow')


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    """Format a count badge.

    Args:
        count: Count to display
        label: Label for the count
        color: Color for the count (default: cyan)

    Returns:
        Formatted count badge
    """
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


__all__ = [
    "section_header",
    "success",
    "error",
    "info",
    "file_path",
    "count_badge",
]
