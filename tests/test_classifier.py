"""
Tests for the keyword mood classifier.

These tests verify rule priority, preset precedence, input validation and the
fixed gradient attached to each mood type.
"""

import pytest

from moodlens.classifier import (
    GRADIENTS,
    PRESETS,
    RULES,
    classify,
    detect_mood_from_text,
    gradient_for,
    parse_mood_type,
)
from moodlens.errors import EmptyMoodInputError, MoodInputError, UnknownMoodTypeError
from moodlens.models import MoodType


class TestDetectMoodFromText:
    """Test suite for the ordered rule table."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("What a great day", MoodType.HAPPY),
            ("This is AMAZING", MoodType.HAPPY),
            ("I feel so lonely", MoodType.SAD),
            ("I am furious with them", MoodType.ANGRY),
            ("Really stressed about exams", MoodType.ANXIOUS),
            ("I adore this place", MoodType.LOVE),
            ("Totally pumped for tonight", MoodType.EXCITED),
            ("Peaceful evening at home", MoodType.CALM),
            ("Just another Tuesday", MoodType.NEUTRAL),
        ],
    )
    def test_single_keyword(self, text, expected):
        """Test that each rule picks up one of its keywords."""
        assert detect_mood_from_text(text) == expected

    def test_happy_beats_sad(self):
        """Test that the earlier rule wins when two rules match."""
        assert detect_mood_from_text("I feel great but sad") == MoodType.HAPPY
        assert detect_mood_from_text("sad but great") == MoodType.HAPPY

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("crying and furious", MoodType.SAD),
            ("irritated and nervous", MoodType.ANGRY),
            ("worried yet romantic", MoodType.ANXIOUS),
            ("passion makes me hyped", MoodType.LOVE),
            ("energetic and zen", MoodType.EXCITED),
        ],
    )
    def test_priority_between_neighbours(self, text, expected):
        """Test the tie-break between each pair of adjacent rules."""
        assert detect_mood_from_text(text) == expected

    def test_love_and_excited_fall_into_happy(self):
        """Test that keywords shared with the happy rule classify as happy."""
        assert detect_mood_from_text("I love you") == MoodType.HAPPY
        assert detect_mood_from_text("so excited") == MoodType.HAPPY

    def test_substring_matching(self):
        """Test that keywords match inside longer words."""
        assert detect_mood_from_text("sadness") == MoodType.SAD
        assert detect_mood_from_text("I made dinner") == MoodType.ANGRY

    def test_empty_text_is_neutral(self):
        """Test that the bare rule lookup never fails."""
        assert detect_mood_from_text("") == MoodType.NEUTRAL

    def test_rule_order(self):
        """Test that the rules are evaluated in the fixed priority order."""
        assert [mood_type for _, mood_type in RULES] == [
            MoodType.HAPPY,
            MoodType.SAD,
            MoodType.ANGRY,
            MoodType.ANXIOUS,
            MoodType.LOVE,
            MoodType.EXCITED,
            MoodType.CALM,
        ]


class TestClassify:
    """Test suite for building Mood objects."""

    def test_text_classification(self):
        """Test that free text is classified and kept as typed."""
        mood = classify("Wonderful Morning", timestamp=1_000)
        assert mood.type == MoodType.HAPPY
        assert mood.text == "Wonderful Morning"
        assert mood.timestamp == 1_000
        assert mood.gradient == ("#fbbf24", "#f59e0b", "#fb923c")

    def test_unmatched_text_is_neutral(self):
        """Test that unmatched text degrades to neutral."""
        mood = classify("the bus was late")
        assert mood.type == MoodType.NEUTRAL
        assert mood.gradient == ("#9ca3af", "#6b7280", "#4b5563")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_without_preset_is_rejected(self, text):
        """Test that there is nothing to classify without text or a preset."""
        with pytest.raises(EmptyMoodInputError) as excinfo:
            classify(text)
        assert str(excinfo.value) == "Please describe your mood or select one"
        assert isinstance(excinfo.value, MoodInputError)

    def test_preset_without_text(self):
        """Test that a preset alone produces a synthesized phrase."""
        mood = classify("", MoodType.LOVE)
        assert mood.type == MoodType.LOVE
        assert mood.text == "Feeling love"
        assert mood.gradient == ("#ec4899", "#db2777", "#be185d")

    def test_preset_wins_over_text(self):
        """Test that a picked preset overrides what the text says."""
        mood = classify("I am so happy", MoodType.SAD)
        assert mood.type == MoodType.SAD
        assert mood.text == "I am so happy"
        assert mood.gradient == GRADIENTS[MoodType.SAD]

    def test_timestamp_defaults_to_now(self):
        """Test that the timestamp is wall-clock milliseconds."""
        mood = classify("calm")
        assert mood.timestamp > 1_600_000_000_000

    def test_gradient_is_stable_per_type(self):
        """Test that moods of the same type share one gradient."""
        first = classify("joy")
        second = classify("awesome")
        third = classify("", MoodType.HAPPY)
        assert first.gradient == second.gradient == third.gradient
        assert first.gradient == gradient_for(MoodType.HAPPY)

    def test_mood_is_immutable(self):
        """Test that a classified mood cannot be changed."""
        mood = classify("sad")
        with pytest.raises(Exception):
            mood.type = MoodType.HAPPY


class TestPresets:
    """Test suite for preset lookup and parsing."""

    def test_one_preset_per_type(self):
        """Test that presets cover every mood type in order."""
        assert [p.type for p in PRESETS] == list(MoodType)
        assert PRESETS[0].label == "Happy"
        assert all(p.gradient == GRADIENTS[p.type] for p in PRESETS)

    def test_parse_mood_type(self):
        """Test that type values and labels are accepted regardless of case."""
        assert parse_mood_type("Anxious") == MoodType.ANXIOUS
        assert parse_mood_type("  calm ") == MoodType.CALM

    def test_parse_unknown_mood_type(self):
        """Test that unknown names are rejected with a user-facing error."""
        with pytest.raises(UnknownMoodTypeError):
            parse_mood_type("grumpy")
