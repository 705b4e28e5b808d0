"""Field patterns for sesx lines.

Each pattern has exactly one capture group. Matching always goes through
``re.search`` so no position state survives between calls.
"""

from __future__ import annotations
import re
from typing import Pattern

SAMPLE_RATE = re.compile(r'\bsampleRate="(.*?)"')
DISPLAY_NAME = re.compile(r'>(.*?)<')
ABSOLUTE_PATH = re.compile(r'\babsolutePath="(.*?)"')
NAME = re.compile(r'\bname="(.*?)"')
ID = re.compile(r'\bid="(.*?)"')
START_POINT = re.compile(r'\bstartPoint="(.*?)"')
END_POINT = re.compile(r'\bendPoint="(.*?)"')
FILE_ID = re.compile(r'\bfileID="(.*?)"')

# Line markers (checked against the stripped line)
TRACK_MARKER = '<audioTrack '
NAME_MARKER = '<name>'
CLIP_MARKER = '<audioClip '
FILE_MARKER = '<file '
SESSION_MARKER = '<session '


def extract(pattern: Pattern[str], line: str) -> str | None:
    """Return the first capture group of ``pattern`` in ``line`` or None."""
    match = pattern.search(line)
    if match is None:
        return None
    return match.group(1)


def parse_number(text: str | None) -> int | float:
    """Coerce captured numeric text, preferring int.

    Raises:
        ValueError: If text is None or not numeric
    """
    if text is None:
        raise ValueError("missing value")
    txt = text.strip()
    try:
        return int(txt)
    except ValueError:
        return float(txt)


__all__ = [
    "SAMPLE_RATE",
    "DISPLAY_NAME",
    "ABSOLUTE_PATH",
    "NAME",
    "ID",
    "START_POINT",
    "END_POINT",
    "FILE_ID",
    "extract",
    "parse_number",
]
