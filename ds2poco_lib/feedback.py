"""
Timestamped progress messages delivered to an optional caller callback.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from .constants import FEEDBACK_TIMESTAMP_FORMAT


def format_timestamp(moment: datetime) -> str:
    """Format a moment as yyyy.MM.dd HH:mm:ss.fff (milliseconds truncated)."""
    return f"{moment.strftime(FEEDBACK_TIMESTAMP_FORMAT)}.{moment.microsecond // 1000:03d}"


class Feedback:
    """Progress channel of one processing run."""

    def __init__(self, callback: Optional[Callable[[str], None]] = None,
                 clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)):
        self.callback = callback
        self.clock = clock

    def __call__(self, message: str):
        if self.callback is None:
            return
        self.callback(f"{format_timestamp(self.clock())} - {message}")
