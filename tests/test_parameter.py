from decimal import Decimal

import pytest

from cmdbench.parameter import ParameterScanError, ParameterValue, RangeStep, tokenize


def test_integer_range():
    values = list(RangeStep(0, 10, 3))
    assert len(values) == 4
    assert values[0] == 0
    assert values[3] == 9


def test_decimal_range():
    values = list(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))
    assert len(values) == 11
    assert values[0] == Decimal(0)
    assert values[10] == Decimal(1)


def test_range_len_matches_iteration():
    rng = RangeStep(0, 10, 3)
    assert len(rng) == len(list(rng)) == 4
    drng = RangeStep(Decimal(0), Decimal(1), Decimal("0.1"))
    assert len(drng) == 11


def test_range_step_validate_ok():
    assert list(RangeStep(0, 10, 3)) == [0, 3, 6, 9]
    assert str(list(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))[-1]) == "1.0"


@pytest.mark.parametrize(
    "args, message",
    [
        ((11, 10, 1), "Empty parameter range"),
        ((0, 10, 0), "Zero is not a valid parameter step"),
        ((0, 100_001, 1), "Parameter range is too large"),
    ],
)
def test_range_step_validate_errors(args, message):
    with pytest.raises(ParameterScanError) as info:
        RangeStep(*args)
    assert str(info.value) == message


def test_parameter_value_str():
    assert str(ParameterValue("hello")) == "hello"
    assert str(ParameterValue(42)) == "42"
    assert str(ParameterValue(Decimal("0.3"))) == "0.3"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", [""]),
        ("foo", ["foo"]),
        (" ", [" "]),
        (r"hello\, world!", ["hello, world!"]),
        (r"\,", [","]),
        (r"\,\,\,", [",,,"]),
        (r"\n", [r"\n"]),
        ("\\\\", ["\\"]),
        ("\\\\\\,", ["\\,"]),
    ],
)
def test_tokenize_single_value(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo,bar,baz", ["foo", "bar", "baz"]),
        ("hello world,foo", ["hello world", "foo"]),
        (r"hello\,world!,baz", ["hello,world!", "baz"]),
    ],
)
def test_tokenize_multiple_values(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo,,bar", ["foo", "", "bar"]),
        (",bar", ["", "bar"]),
        ("bar,", ["bar", ""]),
        (",,", ["", "", ""]),
    ],
)
def test_tokenize_empty_values(text, expected):
    assert tokenize(text) == expected


def test_tokenize_trailing_backslash():
    assert tokenize("a\\") == ["a\\"]