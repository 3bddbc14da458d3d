"""
Exceptions raised by MoodLens.

Input errors are user mistakes: they are raised before any state changes and
their message is meant to be shown to the user as-is.
"""


class MoodLensError(Exception):
    """Base class for all MoodLens errors."""


class MoodInputError(MoodLensError, ValueError):
    """The user supplied input that cannot be acted on."""


class EmptyMoodInputError(MoodInputError):
    def __init__(self) -> None:
        super().__init__("Please describe your mood or select one")


class UnknownMoodTypeError(MoodInputError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown mood: {value!r}")
        self.value = value


class EmptySearchQueryError(MoodInputError):
    def __init__(self) -> None:
        super().__init__("Please enter a search term")


class InvalidTransitionError(MoodLensError):
    """An event was sent to the session while on a screen that does not accept it."""

    def __init__(self, screen: str, event: str) -> None:
        super().__init__(f"Cannot handle {event!r} on the {screen} screen")
        self.screen = screen
        self.event = event
