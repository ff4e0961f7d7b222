"""Display helpers."""
from __future__ import annotations


def format_clock(seconds: int) -> str:
    """Render seconds as ``MM:SS``. Minutes are not wrapped into hours.

    >>> format_clock(75)
    '01:15'
    >>> format_clock(6000)
    '100:00'
    """
    if seconds < 0:
        raise ValueError(f"seconds must be >= 0, got {seconds}")
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"
