"""
Shared data models for MoodLens.

This module defines the core domain models used across multiple layers
of the application (classifier, session controller, search, CLI).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

Gradient = tuple[str, str, str]


class MoodType(str, Enum):
    """The eight mood categories, in preset display order."""

    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    LOVE = "love"
    EXCITED = "excited"
    CALM = "calm"
    NEUTRAL = "neutral"


class Screen(str, Enum):
    """Screens of an interactive session."""

    SPLASH = "splash"
    INPUT = "input"
    RESULTS = "results"
    HISTORY = "history"


class Mood(BaseModel):
    """Represents a classified mood."""

    model_config = ConfigDict(frozen=True)

    type: MoodType = Field(..., description="The detected mood category")
    text: str = Field(..., description="What the user wrote, or a default phrase")
    timestamp: int = Field(
        ..., description="Milliseconds since epoch when the mood was classified"
    )
    gradient: Gradient = Field(..., description="Display colors for the mood type")


class MoodPreset(BaseModel):
    """A mood the user can pick directly instead of typing."""

    model_config = ConfigDict(frozen=True)

    type: MoodType
    label: str
    gradient: Gradient


class SearchResult(BaseModel):
    """A placeholder search result tinted by the current mood."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(..., description="The mood-modified search query")
    description: str
    image_url: str = Field(..., description="Image address, built but never fetched")


class MoodStat(BaseModel):
    """Number of history entries for one mood type."""

    model_config = ConfigDict(frozen=True)

    type: MoodType
    count: int
