"""Checking exercises in order and reporting progress."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from rich.console import Console
from rich.text import Text

from .exercise import (
    CompiledExercise,
    Exercise,
    ExerciseError,
    ExerciseOutput,
    Mode,
)
from .ui import no_emoji, success, warn

_BAR_WIDTH = 60


class VerifyError(Exception):
    """An exercise failed or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


class RunMode(Enum):
    """Whether a passing exercise should prompt about its marker."""

    INTERACTIVE = auto()
    NON_INTERACTIVE = auto()


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _bar(position: int, total: int, message: str) -> Text:
    if total and position < total:
        filled = position * _BAR_WIDTH // total
        done, rest = "#" * filled + ">", "-" * (_BAR_WIDTH - filled - 1)
    else:
        done, rest = "#" * _BAR_WIDTH, ""
    text = Text("Progress: [")
    text.append(done, style="green")
    text.append(rest, style="red")
    text.append(f"] {position}/{total} {message}")
    return text


def verify(exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False) -> None:
    """Check exercises in order; raise VerifyError at the first that is not finished."""
    done, total = progress
    console = _console()
    console.print(_bar(done, total, f"({0.0:.1f} %)"))
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise)
        else:
            passed = _compile_only(exercise)
        if not passed:
            raise VerifyError(exercise)
        done += 1
        console.print(_bar(done, total, f"({done / total * 100:.1f} %)"))


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's tests without prompting."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise, status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseError as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerifyError(exercise) from err


def _run(compiled: CompiledExercise) -> tuple[bool, ExerciseOutput]:
    try:
        return True, compiled.run()
    except ExerciseError as err:
        return False, err.output


def _compile_only(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            ok, output = _run(compiled)
    if not ok:
        warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        raise VerifyError(exercise)
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    with _console().status(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            ok, output = _run(compiled)
    if not ok:
        warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(output.stdout)
        raise VerifyError(exercise)
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> Text:
    return Text("====================", style="bold")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done, otherwise show where its marker is."""
    state = exercise.state()
    if state.is_done():
        return True

    verbs = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    success(f"Successfully {verbs[exercise.mode]} {exercise}!")

    emoji_free = no_emoji()
    clippy_msg = (
        "The code is compiling, and Clippy is happy!"
        if emoji_free
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_msg = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_msg,
    }[exercise.mode]

    console = _console()
    print()
    print(f"~*~ {success_msg} ~*~" if emoji_free else f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        print()

    print("You can keep working on this exercise,")
    console.print(Text.assemble(
        "or jump into the next one by removing the ",
        ("`I AM NOT DONE`", "bold"),
        " comment:",
    ))
    print()
    for context_line in state.context:
        console.print(Text.assemble(
            (f"{context_line.number:>2}", "bold blue"),
            " ",
            ("|", "blue"),
            "  ",
            (context_line.line, "bold" if context_line.important else ""),
        ))
    return False