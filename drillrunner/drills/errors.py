"""Error handling drills: validation, parsing and division results."""

from __future__ import annotations

from dataclasses import dataclass

_NOON_CUTOFF = 22
_LAST_HOUR = 23
_ICECREAM_LEFT = 5
_COST_PER_ITEM = 5
_PROCESSING_FEE = 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer that must fit in ``bits`` bits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def afford(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if too expensive."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A value cannot become a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; construction checks the value."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text did not parse, or parsed to a value that is not positive."""

    def __init__(self, source: Exception) -> None:
        super().__init__(str(source))
        self.source = source


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and check that it is positive."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour; None for hours past 23."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day > _LAST_HOUR:
        return None
    return _ICECREAM_LEFT if time_of_day < _NOON_CUTOFF else 0


class DivisionError(ArithmeticError):
    """A division could not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when the result is whole; raise otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list() -> list[int]:
    """Divide every number by 27; the first failure is raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each result or error in place."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]