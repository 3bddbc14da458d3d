"""
Command-line interface for MoodLens.

`moodlens run` drives an interactive session through the splash, input,
results and history screens. The other commands are one-shot helpers around
the classifier and the placeholder search.
"""

import json
import random
from collections.abc import Callable

import typer

from .classifier import DEFAULT_GRADIENT, PRESETS, classify, now_ms, parse_mood_type
from .config import Settings, get_settings
from .errors import MoodInputError
from .history import format_relative
from .logger import get_logger, setup_logging
from .models import Mood, MoodType, Screen, SearchResult
from .search import MOOD_MESSAGES, SUGGESTIONS, search
from .session import SessionController

logger = get_logger(__name__)

VOICE_NOTICE = "Voice input is a demo feature. Please use text input instead."

INPUT_HELP = (
    "Type how you feel and press Enter. Commands: "
    ":preset <mood>, :voice, :history, :quit"
)
RESULTS_HELP = "Type something to search. Commands: :back, :history, :quit"
HISTORY_HELP = "Commands: :back, :quit"

app = typer.Typer(help="MoodLens: see the world through your mood")


# MARK: - CLI Entry Points


def main() -> None:
    """Entry point for the moodlens console script."""
    app()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging("DEBUG" if verbose else get_settings().log_level)


# MARK: - Commands


@app.command()
def run(
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for the search modifier picks"
    ),
) -> None:
    """Start an interactive MoodLens session."""
    settings = get_settings()
    rng = random.Random(seed if seed is not None else settings.seed)
    session = SessionController()

    def _session() -> None:
        screens: dict[Screen, Callable[[SessionController], bool]] = {
            Screen.SPLASH: _splash_screen,
            Screen.INPUT: _input_screen,
            Screen.RESULTS: lambda s: _results_screen(s, rng, settings),
            Screen.HISTORY: _history_screen,
        }
        while screens[session.current_screen](session):
            pass
        print("Goodbye!")

    _run_with_error_handling(_session)


@app.command()
def detect(
    text: str = typer.Argument("", help="How you are feeling"),
    preset: str | None = typer.Option(
        None, "--preset", "-p", help="Pick a mood directly instead of detecting it"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Detect the mood of a piece of text."""

    def _detect() -> None:
        mood_type = parse_mood_type(preset) if preset is not None else None
        mood = classify(text, mood_type)

        if json_output:
            print(json.dumps(mood.model_dump(mode="json"), indent=2))
            return

        print(mood.type.value)

    _run_with_error_handling(_detect)


@app.command("search")
def search_command(
    query: str = typer.Argument(..., help="What to search for"),
    mood: str = typer.Option(..., "--mood", "-m", help="Mood that tints the results"),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for the search modifier picks"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show placeholder results for a query seen through a mood."""

    def _search() -> None:
        settings = get_settings()
        rng = random.Random(seed if seed is not None else settings.seed)
        current = classify("", parse_mood_type(mood))
        results = search(query, current, rng=rng, settings=settings)

        if json_output:
            print(json.dumps([r.model_dump() for r in results], indent=2))
            return

        _print_results(query, current, results)

    _run_with_error_handling(_search)


@app.command()
def presets() -> None:
    """List the moods that can be picked directly."""
    for preset in PRESETS:
        typer.echo(f"{_swatch(preset.gradient)} {preset.label:<8} {preset.type.value}")


# MARK: - Screens


def _splash_screen(session: SessionController) -> bool:
    typer.echo(_swatch(DEFAULT_GRADIENT))
    print("MoodLens")
    print("Discover content that matches how you feel.")
    answer = typer.prompt(
        "Press Enter to begin (:quit to leave)", default="", show_default=False
    )
    if answer.strip() == ":quit":
        return False
    session.on_start()
    return True


def _input_screen(session: SessionController) -> bool:
    selected: MoodType | None = None
    print()
    print("How are you feeling today?")
    print("Moods: " + ", ".join(p.label for p in PRESETS))
    print(INPUT_HELP)

    while True:
        line = typer.prompt("mood", default="", show_default=False)
        command, _, argument = line.strip().partition(" ")

        if command == ":quit":
            return False
        if command == ":history":
            session.on_view_history()
            return True
        if command == ":voice":
            print(VOICE_NOTICE)
            continue
        if command == ":preset":
            try:
                selected = parse_mood_type(argument)
            except MoodInputError as e:
                print(f"Error: {e}")
                continue
            print(f"Selected mood: {selected.value.capitalize()}")
            continue

        try:
            mood = session.submit(line, selected)
        except MoodInputError as e:
            print(f"Error: {e}")
            continue

        print(f"Mood detected: {mood.type.value}")
        return True


def _results_screen(
    session: SessionController, rng: random.Random, settings: Settings
) -> bool:
    mood = session.current_mood
    assert mood is not None
    print()
    typer.echo(_swatch(mood.gradient))
    print(f"You're feeling {mood.type.value}")
    print(MOOD_MESSAGES[mood.type])
    if mood.text:
        print(f'"{mood.text}"')
    print(f"Your {mood.type.value} mood will influence the results you see")
    print("Popular searches: " + ", ".join(SUGGESTIONS))
    print(RESULTS_HELP)

    while True:
        query = typer.prompt("search", default="", show_default=False).strip()

        if query == ":quit":
            return False
        if query == ":back":
            session.on_back()
            return True
        if query == ":history":
            session.on_view_history()
            return True

        try:
            results = search(query, mood, rng=rng, settings=settings)
        except MoodInputError as e:
            print(f"Error: {e}")
            continue

        _print_results(query, mood, results)


def _history_screen(session: SessionController) -> bool:
    print()
    print("Your Mood Journey")
    history = session.mood_history

    if not history:
        print("No moods recorded yet. Go back and tell us how you feel.")
    else:
        now = now_ms()
        print(
            "  ".join(f"{stat.type.value}: {stat.count}" for stat in session.stats())
        )
        for mood in history:
            typer.echo(
                f"{_swatch(mood.gradient[:2])} {mood.type.value:<8} "
                f"{format_relative(mood.timestamp, now):>16}  {mood.text}"
            )
    print(HISTORY_HELP)

    while True:
        command = typer.prompt("history", default="", show_default=False).strip()
        if command == ":quit":
            return False
        if command == ":back":
            session.on_back()
            return True
        print(HISTORY_HELP)


# MARK: - Private Helpers


def _swatch(gradient: tuple[str, ...]) -> str:
    """Render gradient colors as a row of colored blocks."""
    return "".join(typer.style("██", fg=_hex_to_rgb(color)) for color in gradient)


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _print_results(query: str, mood: Mood, results: list[SearchResult]) -> None:
    print(f'Results for "{query}" ({mood.type.value} mood)')
    for result in results:
        print(f"  {result.description}")
        print(f"    {result.image_url}")
    print(f"Found {len(results)} results matching your {mood.type.value} mood")


def _run_with_error_handling(func: Callable[[], None]) -> None:
    """Run a command body with standardized error handling."""
    try:
        func()
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except typer.Abort:
        print("\nStopped")
        raise typer.Exit(0)
    except MoodInputError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    main()
