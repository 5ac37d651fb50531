"""Dictionary and iterator drills: fruit baskets, score tables and counting."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto

_SCORE = re.compile(r"\+?[0-9]+")
_SCORE_MAX = 255
_NEW_FRUIT_COUNT = 5


class Fruit(Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 3, "mango": 1}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit missing from ``basket``, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


@dataclass
class Team:
    """A team and the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_score(text: str) -> int:
    if not _SCORE.fullmatch(text):
        raise ValueError(f"invalid score: {text!r}")
    value = int(text)
    if value > _SCORE_MAX:
        raise ValueError(f"score out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        first_name, second_name = fields[0], fields[1]
        first_goals = _parse_score(fields[2])
        second_goals = _parse_score(fields[3])
        first = scores.setdefault(first_name, Team(first_name))
        first.goals_scored += first_goals
        first.goals_conceded += second_goals
        second = scores.setdefault(second_name, Team(second_name))
        second.goals_scored += second_goals
        second.goals_conceded += first_goals
    return scores


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest as it is."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize every word and join them without separators."""
    return "".join(capitalize_words_vector(words))


def factorial(num: int) -> int:
    """Return ``num``!; negative numbers raise ValueError."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    """How far an exercise has got."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count matching entries across several maps using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count matching entries across several maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)