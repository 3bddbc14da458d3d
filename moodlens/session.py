"""
Session state for an interactive MoodLens run.

This module provides an in-memory session controller that owns the current
screen, the most recent mood and the mood history. Screens never change the
state themselves: they call the controller's transition handles and read
its snapshots.
"""

from pydantic import BaseModel, ConfigDict, Field

from .classifier import classify
from .errors import InvalidTransitionError
from .history import mood_stats
from .logger import get_logger
from .models import Mood, MoodStat, MoodType, Screen

logger = get_logger(__name__)

# (screen, event) -> next screen. "mood_detected" is handled separately since
# it also carries the new mood.
TRANSITIONS: dict[tuple[Screen, str], Screen] = {
    (Screen.SPLASH, "start"): Screen.INPUT,
    (Screen.INPUT, "mood_detected"): Screen.RESULTS,
    (Screen.INPUT, "view_history"): Screen.HISTORY,
    (Screen.RESULTS, "back"): Screen.INPUT,
    (Screen.RESULTS, "view_history"): Screen.HISTORY,
    (Screen.HISTORY, "back"): Screen.INPUT,
}


class SessionState(BaseModel):
    """An immutable snapshot of the session."""

    model_config = ConfigDict(frozen=True)

    current_screen: Screen = Screen.SPLASH
    current_mood: Mood | None = None
    mood_history: tuple[Mood, ...] = Field(
        default=(), description="Moods of this session, newest first"
    )


class SessionController:
    """
    Owns the session state and mediates transitions between screens.

    Every transition swaps in a new SessionState snapshot, so the screen,
    the current mood and the history always change together.
    """

    def __init__(self) -> None:
        self._state = SessionState()

    # MARK: - Views

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_screen(self) -> Screen:
        return self._state.current_screen

    @property
    def current_mood(self) -> Mood | None:
        return self._state.current_mood

    @property
    def mood_history(self) -> tuple[Mood, ...]:
        return self._state.mood_history

    def stats(self) -> list[MoodStat]:
        return mood_stats(self._state.mood_history)

    # MARK: - Transitions

    def on_start(self) -> None:
        """Leave the splash screen for mood input."""
        self._move("start")

    def on_view_history(self) -> None:
        """Show the mood history from the input or results screen."""
        self._move("view_history")

    def on_back(self) -> None:
        """Return to mood input from the results or history screen."""
        self._move("back")

    def on_mood_detected(self, mood: Mood) -> None:
        """
        Record a classified mood and show its results.

        Args:
            mood: The mood produced by the classifier

        Raises:
            TypeError: if mood is not a Mood
            InvalidTransitionError: if the input screen is not showing
        """
        if not isinstance(mood, Mood):
            raise TypeError(f"Expected a Mood, got {type(mood).__name__}")

        next_screen = self._next_screen("mood_detected")
        self._state = SessionState(
            current_screen=next_screen,
            current_mood=mood,
            mood_history=(mood, *self._state.mood_history),
        )
        logger.debug(
            "Mood detected: %s (%d in history)",
            mood.type.value,
            len(self._state.mood_history),
        )

    def submit(self, text: str, preset: MoodType | None = None) -> Mood:
        """
        Classify the user's input and move to the results screen.

        Args:
            text: What the user wrote
            preset: Mood type picked directly, if any

        Returns:
            The recorded Mood

        Raises:
            InvalidTransitionError: if the input screen is not showing
            EmptyMoodInputError: if there is neither text nor a preset
        """
        self._next_screen("mood_detected")
        mood = classify(text, preset)
        self.on_mood_detected(mood)
        return mood

    # MARK: - Private Helpers

    def _next_screen(self, event: str) -> Screen:
        screen = self._state.current_screen
        try:
            return TRANSITIONS[(screen, event)]
        except KeyError:
            raise InvalidTransitionError(screen.value, event) from None

    def _move(self, event: str) -> None:
        previous = self._state.current_screen
        next_screen = self._next_screen(event)
        self._state = self._state.model_copy(update={"current_screen": next_screen})
        logger.debug("Screen %s -> %s on %s", previous.value, next_screen.value, event)
