"""Record drills: plain records, a message machine, wrappers and cons lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


@dataclass
class ColorClassic:
    """A colour with named channels."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """A colour whose channels are reached by position."""

    red: int
    green: int
    blue: int


class UnitLike:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitLike"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLike)

    def __hash__(self) -> int:
        return hash(UnitLike)


@dataclass
class Order:
    """An order placed through one or more channels."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order every new order starts from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    """A position on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Message: set the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Message: print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                print(text)
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class Cons:
    """A cons cell; ``None`` as the tail marks the end of the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a cons list of two elements."""
    return Cons(1, Cons(2))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input is returned unchanged when nothing is negative."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]