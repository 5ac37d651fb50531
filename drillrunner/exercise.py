"""Exercises: loading the list, compiling, running and completion state."""

from __future__ import annotations

import contextlib
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


def clean() -> None:
    """Remove the temporary binary of the current thread, if any."""
    _remove(temp_file())


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
            stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        )


class ExerciseError(Exception):
    """A compile or run step failed; ``output`` holds what it printed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class CompiledExercise:
    """A built exercise binary, removed again on close."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self._binary = binary
        self._finalizer = weakref.finalize(self, _remove, binary)

    def run(self) -> ExerciseOutput:
        return self.exercise._execute(self._binary)

    def close(self) -> None:
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseError if the build fails."""
        binary = temp_file()
        source = str(self.path)
        if self.mode is Mode.CLIPPY:
            result = self._clippy(binary)
        else:
            test_flag = ["--test"] if self.mode is Mode.TEST else []
            result = subprocess.run(
                ["rustc", *test_flag, source, "-o", binary,
                 *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
                capture_output=True,
            )
        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise ExerciseError(ExerciseOutput._from_process(result))

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            f'[package]\nname = "{self.name}"\nversion = "0.0.1"\n'
            f'edition = "2021"\n[[bin]]\nname = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise RuntimeError(message) from err
        # Build a binary too so the exercise can be run; failures show up in clippy.
        subprocess.run(
            ["rustc", str(self.path), "-o", binary, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
            capture_output=True,
        )
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
             *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp"],
            capture_output=True,
        )

    def _execute(self, binary: str) -> ExerciseOutput:
        args = ["--show-output"] if self.mode is Mode.TEST else []
        result = subprocess.run([binary, *args], capture_output=True)
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the pending marker remains."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        index = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if index is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        low = max(index - CONTEXT, 0)
        context = tuple(
            ContextLine(line=line, number=i + 1, important=i == index)
            for i, line in enumerate(lines[low:index + CONTEXT + 1], start=low)
        )
        return State(context)

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().is_done()


def load_exercises(path) -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(name=entry["name"], path=Path(entry["path"]),
                     mode=Mode(entry["mode"]), hint=entry["hint"])
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"exercise list is missing field {err}") from err