import pytest

from cmdbench.units import (
    Unit,
    format_duration,
    format_duration_unit,
    format_duration_value,
)


def test_unit_short_name():
    assert Unit.SECOND.short_name() == "s"
    assert Unit.MILLISECOND.short_name() == "ms"
    assert Unit.MICROSECOND.short_name() == "µs"


def test_unit_format():
    value = 123.456789
    assert Unit.SECOND.format(value) == "123.457"
    assert Unit.MILLISECOND.format(value) == "123456.8"
    assert Unit.MICROSECOND.format(0.00123456) == "1234.6"


@pytest.mark.parametrize(
    "duration, text, unit",
    [
        (1.3, "1.300 s", Unit.SECOND),
        (1.0, "1.000 s", Unit.SECOND),
        (0.999, "999.0 ms", Unit.MILLISECOND),
        (0.0005, "500.0 µs", Unit.MICROSECOND),
        (0.0, "0.0 µs", Unit.MICROSECOND),
        (1000.0, "1000.000 s", Unit.SECOND),
    ],
)
def test_format_duration_unit_basic(duration, text, unit):
    assert format_duration_unit(duration, None) == (text, unit)


@pytest.mark.parametrize(
    "unit, text",
    [
        (Unit.SECOND, "1.300 s"),
        (Unit.MILLISECOND, "1300.0 ms"),
        (Unit.MICROSECOND, "1300000.0 µs"),
    ],
)
def test_format_duration_unit_with_unit(unit, text):
    assert format_duration_unit(1.3, unit) == (text, unit)


def test_format_duration_value_has_no_suffix():
    assert format_duration_value(0.1057, None) == ("105.7", Unit.MILLISECOND)
    assert format_duration_value(2.005, Unit.MILLISECOND) == ("2005.0", Unit.MILLISECOND)


def test_format_duration_returns_text_only():
    assert format_duration(0.5) == "500.0 ms"
    assert format_duration(0.5, Unit.SECOND) == "0.500 s"