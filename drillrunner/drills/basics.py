"""Small arithmetic and branching drills."""

from __future__ import annotations

_BULK_THRESHOLD = 40


def calculate_price_of_apples(apple_count: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if apple_count > _BULK_THRESHOLD:
        return apple_count
    return apple_count * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """True when ``num`` is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` multiplied by itself."""
    return num * num