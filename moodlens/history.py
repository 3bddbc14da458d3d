"""
Helpers for presenting a mood history.
"""

from collections import Counter
from collections.abc import Iterable

from .models import Mood, MoodStat, MoodType

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_relative(timestamp: int, now: int) -> str:
    """
    Describe how long ago a timestamp was, in minutes, hours or days.

    Args:
        timestamp: The past instant in milliseconds since epoch
        now: The current instant in milliseconds since epoch

    Returns:
        A phrase like "5 minutes ago", "1 hour ago" or "3 days ago"
    """
    elapsed = now - timestamp
    hours = elapsed // HOUR_MS
    if hours < 1:
        return _plural(elapsed // MINUTE_MS, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    return _plural(hours // 24, "day")


def mood_stats(history: Iterable[Mood]) -> list[MoodStat]:
    """Count moods per type, most frequent first, ignoring types never seen."""
    counts = Counter(mood.type for mood in history)
    # sorted() is stable, so ties keep MoodType declaration order
    ordered = sorted(
        (mood_type for mood_type in MoodType if counts[mood_type]),
        key=lambda mood_type: counts[mood_type],
        reverse=True,
    )
    return [MoodStat(type=mood_type, count=counts[mood_type]) for mood_type in ordered]
