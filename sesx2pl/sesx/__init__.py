"""Line-based extraction of sesx session records."""

from .fields import extract, parse_number
from .models import Track, FileReference, ClipRecord
from .scanner import scan, ScanResult, ScannerState, SessionScanner

__all__ = [
    "extract",
    "parse_number",
    "Track",
    "FileReference",
    "ClipRecord",
    "scan",
    "ScanResult",
    "ScannerState",
    "SessionScanner",
]
