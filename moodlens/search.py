"""
Mood-tinted placeholder search.

A query is decorated with adjectives that fit the current mood. The results
are placeholders: image addresses are built for display but never fetched.
"""

import random
from urllib.parse import quote

from .config import Settings, get_settings
from .errors import EmptySearchQueryError
from .logger import get_logger
from .models import Mood, MoodType, SearchResult

logger = get_logger(__name__)

MOOD_MODIFIERS: dict[MoodType, tuple[str, str, str, str, str]] = {
    MoodType.HAPPY: ("bright", "cheerful", "sunny", "vibrant", "joyful"),
    MoodType.SAD: ("melancholic", "moody", "dark", "somber", "gray"),
    MoodType.ANGRY: ("intense", "dramatic", "stormy", "powerful", "fiery"),
    MoodType.ANXIOUS: ("calm", "peaceful", "soft", "gentle", "serene"),
    MoodType.LOVE: ("romantic", "warm", "soft", "beautiful", "dreamy"),
    MoodType.EXCITED: ("dynamic", "energetic", "bold", "colorful", "vibrant"),
    MoodType.CALM: ("peaceful", "tranquil", "zen", "minimalist", "serene"),
    MoodType.NEUTRAL: ("aesthetic", "clean", "modern", "simple", "natural"),
}

MOOD_MESSAGES: dict[MoodType, str] = {
    MoodType.HAPPY: "Let's find content that matches your positive energy!",
    MoodType.SAD: "We'll find content that resonates with your current feelings.",
    MoodType.ANGRY: "Searching for content that matches your intensity.",
    MoodType.ANXIOUS: "Finding content that might bring you peace.",
    MoodType.LOVE: "Let's discover beautiful content for your loving mood.",
    MoodType.EXCITED: "Searching for dynamic content to match your excitement!",
    MoodType.CALM: "Finding peaceful content to maintain your serenity.",
    MoodType.NEUTRAL: "Let's explore content that interests you.",
}

SUGGESTIONS = (
    "rain",
    "sunset",
    "coffee",
    "ocean",
    "mountains",
    "forest",
    "city",
    "flowers",
)


def mood_query(query: str, mood_type: MoodType, rng: random.Random) -> str:
    """Prefix a query with a randomly chosen modifier for the mood."""
    return f"{rng.choice(MOOD_MODIFIERS[mood_type])} {query}"


def query_variations(query: str, mood_type: MoodType, rng: random.Random) -> list[str]:
    m = MOOD_MODIFIERS[mood_type]
    return [
        mood_query(query, mood_type, rng),
        f"{m[0]} {query}",
        f"{m[1]} {query}",
        f"{m[2]} {query}",
        f"{query} {m[3]}",
        f"{query} {m[4]}",
    ]


def image_url(title: str, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    base = settings.image_base_url.rstrip("/")
    return f"{base}/{settings.image_size}/?{quote(title, safe='')}"


def search(
    query: str,
    mood: Mood,
    *,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> list[SearchResult]:
    """
    Build placeholder results for a query seen through a mood.

    Args:
        query: What the user is searching for
        mood: The mood that tints the results
        rng: Source of randomness for the first variation
        settings: Overrides the global settings

    Returns:
        Up to six SearchResult objects

    Raises:
        EmptySearchQueryError: if the query is blank
    """
    if not query.strip():
        raise EmptySearchQueryError()

    settings = settings or get_settings()
    if rng is None:
        rng = random.Random(settings.seed)

    variations = query_variations(query, mood.type, rng)
    results = [
        SearchResult(
            id=f"result-{i}",
            title=title,
            description=f"{title} - A {mood.type.value} interpretation",
            image_url=image_url(title, settings),
        )
        for i, title in enumerate(variations[: settings.search_result_count])
    ]

    logger.debug("Built %d %s results for %r", len(results), mood.type.value, query)
    return results
