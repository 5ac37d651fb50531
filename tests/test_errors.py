import pytest

from drillrunner.drills.errors import (
    CreationError,
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    afford,
    divide,
    generate_nametag_text,
    list_of_results,
    maybe_icecream,
    parse_pos_nonzero,
    result_with_list,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "cannot parse integer from empty string"),
        ("-", "invalid digit found in string"),
        ("3000000000", "number too large to fit in target type"),
    ],
)
def test_total_cost_parse_errors(text, message):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == message


def test_afford_spends_tokens():
    assert afford(100, "8") == 59


def test_afford_refuses_too_many():
    with pytest.raises(ValueError, match="can't afford"):
        afford(100, "20")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value == CreationError(CreationError.NEGATIVE)
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value == CreationError(CreationError.ZERO)


def test_creation_error_messages():
    assert str(CreationError(CreationError.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.source, CreationError)
    assert str(info.value.source) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.source == CreationError(CreationError.NEGATIVE)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.source == CreationError(CreationError.ZERO)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_division_errors_share_base():
    with pytest.raises(DivisionError):
        divide(5, 2)


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]