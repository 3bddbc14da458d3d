"""
Keyword-based mood classification.

Text is matched case-insensitively against an ordered rule table. The first
rule whose pattern occurs anywhere in the text wins and later rules are not
tried. Text that matches nothing is neutral.
"""

import re
import time

from .errors import EmptyMoodInputError, UnknownMoodTypeError
from .models import Gradient, Mood, MoodPreset, MoodType

GRADIENTS: dict[MoodType, Gradient] = {
    MoodType.HAPPY: ("#fbbf24", "#f59e0b", "#fb923c"),
    MoodType.SAD: ("#60a5fa", "#3b82f6", "#2563eb"),
    MoodType.ANGRY: ("#f87171", "#ef4444", "#dc2626"),
    MoodType.ANXIOUS: ("#a78bfa", "#8b5cf6", "#7c3aed"),
    MoodType.LOVE: ("#ec4899", "#db2777", "#be185d"),
    MoodType.EXCITED: ("#34d399", "#10b981", "#059669"),
    MoodType.CALM: ("#67e8f9", "#22d3ee", "#06b6d4"),
    MoodType.NEUTRAL: ("#9ca3af", "#6b7280", "#4b5563"),
}

# Shown on the input screen until a preset is picked.
DEFAULT_GRADIENT: Gradient = ("#6366f1", "#8b5cf6", "#ec4899")

# Order matters: "love" and "excited" also appear in the happy rule.
RULES: list[tuple[re.Pattern[str], MoodType]] = [
    (
        re.compile(r"happy|joy|great|wonderful|amazing|excited|fantastic|love|awesome"),
        MoodType.HAPPY,
    ),
    (re.compile(r"sad|down|depressed|lonely|blue|unhappy|crying"), MoodType.SAD),
    (re.compile(r"angry|mad|furious|annoyed|irritated|rage"), MoodType.ANGRY),
    (
        re.compile(r"anxious|nervous|worried|stressed|afraid|scared|panic"),
        MoodType.ANXIOUS,
    ),
    (re.compile(r"love|adore|romantic|passion|affection"), MoodType.LOVE),
    (re.compile(r"excited|energetic|pumped|hyped|enthusiastic"), MoodType.EXCITED),
    (re.compile(r"calm|peaceful|relaxed|serene|tranquil|zen"), MoodType.CALM),
]

PRESETS: tuple[MoodPreset, ...] = tuple(
    MoodPreset(type=mood_type, label=mood_type.value.capitalize(), gradient=gradient)
    for mood_type, gradient in GRADIENTS.items()
)


def gradient_for(mood_type: MoodType) -> Gradient:
    """Return the fixed gradient of a mood type."""
    return GRADIENTS[mood_type]


def get_preset(mood_type: MoodType) -> MoodPreset:
    for preset in PRESETS:
        if preset.type == mood_type:
            return preset
    raise UnknownMoodTypeError(str(mood_type))


def parse_mood_type(value: str) -> MoodType:
    """
    Resolve a mood type from user input.

    Accepts a type value or a preset label, ignoring case and surrounding
    whitespace.

    Raises:
        UnknownMoodTypeError: if the value names no mood
    """
    try:
        return MoodType(value.strip().lower())
    except ValueError:
        raise UnknownMoodTypeError(value) from None


def detect_mood_from_text(text: str) -> MoodType:
    """Return the mood type of the first rule matching the text."""
    lowered = text.lower()
    for pattern, mood_type in RULES:
        if pattern.search(lowered):
            return mood_type
    return MoodType.NEUTRAL


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def classify(
    text: str, preset: MoodType | None = None, *, timestamp: int | None = None
) -> Mood:
    """
    Classify a mood from free text or an explicitly picked preset.

    A preset always wins over the text. Without one, the text is run through
    the rule table.

    Args:
        text: What the user wrote; may be empty when a preset is given
        preset: Mood type the user picked directly, if any
        timestamp: Classification time in milliseconds, defaults to now

    Returns:
        The classified Mood

    Raises:
        EmptyMoodInputError: if the text is blank and no preset was picked
    """
    if preset is None and not text.strip():
        raise EmptyMoodInputError()

    if timestamp is None:
        timestamp = now_ms()

    if preset is not None:
        picked = get_preset(MoodType(preset))
        return Mood(
            type=picked.type,
            text=text or f"Feeling {picked.label.lower()}",
            timestamp=timestamp,
            gradient=picked.gradient,
        )

    mood_type = detect_mood_from_text(text)
    return Mood(
        type=mood_type,
        text=text,
        timestamp=timestamp,
        gradient=gradient_for(mood_type),
    )
