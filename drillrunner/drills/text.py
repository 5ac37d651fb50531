"""String and list drills, including a small command machine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """True for "green", "blue" and "red"."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


class CommandKind(Enum):
    """What a command does to its string."""

    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """A command; ``count`` is how many times APPEND adds "bar"."""

    kind: CommandKind
    count: int = 0

    def apply(self, text: str) -> str:
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.count


def transformer(pairs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the order."""
    return [command.apply(text) for text, command in pairs]


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return the same four numbers as a fixed tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]