"""Error types raised while reading and converting sesx sessions.

All of them are ``ValueError`` subclasses so callers that only care about
"bad input" can catch that. Messages are the one-line texts shown to users.
"""

from __future__ import annotations


class SesxError(ValueError):
    """Base class for session input errors."""


class SesxReadError(SesxError):
    """The session file could not be read."""

    def __init__(self, message: str = "Could not open sesx infile."):
        super().__init__(message)


class InvalidSesxError(SesxError):
    """The file does not carry the sesx signature lines."""

    def __init__(self, message: str = "Not a valid Audition sesx file."):
        super().__init__(message)


class SampleRateNotFoundError(SesxError):
    """No usable session sample rate was found."""

    def __init__(self, message: str = "Could not detect sample rate."):
        super().__init__(message)


class ClipFormatError(SesxError):
    """A clip line lacks numeric start/end points."""

    def __init__(self, line_number: int, detail: str):
        self.line_number = line_number
        super().__init__(f"Invalid clip on line {line_number}: {detail}")


__all__ = [
    "SesxError",
    "SesxReadError",
    "InvalidSesxError",
    "SampleRateNotFoundError",
    "ClipFormatError",
]
