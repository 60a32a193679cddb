"""Unit tests for date helpers"""

import pytest
from datetime import date, datetime
from mela_calculator.utils.date_utils import generate_date_range, inclusive_day_count, parse_iso_date


def test_parse_iso_date_string():
    assert parse_iso_date(" 2024-02-29 ") == date(2024, 2, 29)


def test_parse_iso_date_passes_dates_through():
    assert parse_iso_date(date(2024, 3, 1)) == date(2024, 3, 1)


def test_parse_iso_date_drops_time_of_datetime():
    parsed = parse_iso_date(datetime(2024, 3, 1, 23, 59))

    assert parsed == date(2024, 3, 1)
    assert type(parsed) is date


@pytest.mark.parametrize("value", ["20240101", "2024-W01-1", "2024-1-1", "2024-02-30", "", 20240101])
def test_parse_iso_date_rejects_other_forms(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_inclusive_day_count_same_day():
    assert inclusive_day_count(date(2024, 1, 1), date(2024, 1, 1)) == 1


def test_generate_date_range_reaches_last_calendar_day():
    assert generate_date_range(date(9999, 12, 30), 2) == [date(9999, 12, 30), date(9999, 12, 31)]
