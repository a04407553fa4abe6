from datetime import datetime

import pytest

from workshifts.core.exceptions import FormatError
from workshifts.shifts.interval import (
    ClockInterval,
    contains,
    crosses_midnight,
    format_minutes,
    format_range,
    format_time_from_date,
    minute_of_day,
    overlaps,
    to_minutes,
)


def iv(start: str, end: str) -> ClockInterval:
    return ClockInterval.from_strings(start, end)


def test_to_minutes_parses_clock_strings():
    assert to_minutes("00:00") == 0
    assert to_minutes("08:30") == 510
    assert to_minutes("23:59") == 1439


@pytest.mark.parametrize("value", ["24:00", "12:60", "9:5", "ab:cd", "08:00:00", " 08:00", "08:00\n", "", None])
def test_to_minutes_rejects_malformed(value):
    with pytest.raises(FormatError):
        to_minutes(value)


def test_format_minutes_inverts_to_minutes_for_every_minute():
    for minute in range(1440):
        assert to_minutes(format_minutes(minute)) == minute
    assert format_minutes(to_minutes("07:05")) == "07:05"


def test_clock_interval_rejects_minutes_outside_day():
    with pytest.raises(FormatError):
        ClockInterval(start=0, end=1440)
    with pytest.raises(FormatError):
        ClockInterval(start=-1, end=10)


def test_contains_day_interval_has_inclusive_start_exclusive_end():
    day = iv("08:00", "16:00")
    assert contains(day, to_minutes("08:00"))
    assert contains(day, to_minutes("15:59"))
    assert not contains(day, to_minutes("16:00"))
    assert not contains(day, to_minutes("07:59"))


def test_contains_overnight_interval():
    night = iv("22:00", "02:00")
    assert contains(night, to_minutes("22:00"))
    assert contains(night, to_minutes("23:45"))
    assert contains(night, to_minutes("00:00"))
    assert contains(night, to_minutes("01:59"))
    assert not contains(night, to_minutes("02:00"))
    assert not contains(night, to_minutes("10:00"))


def test_interval_ending_at_midnight_wraps():
    evening = iv("16:00", "00:00")
    assert crosses_midnight(evening)
    assert contains(evening, to_minutes("23:59"))
    assert not contains(evening, to_minutes("00:00"))
    assert not crosses_midnight(iv("08:00", "16:00"))


def test_touching_intervals_do_not_overlap():
    assert not overlaps(iv("08:00", "16:00"), iv("16:00", "22:00"))
    assert not overlaps(iv("16:00", "22:00"), iv("08:00", "16:00"))
    assert not overlaps(iv("22:00", "02:00"), iv("02:00", "22:00"))


def test_disjoint_day_intervals_do_not_overlap():
    assert not overlaps(iv("06:00", "08:00"), iv("12:00", "14:00"))


def test_overlapping_day_intervals():
    assert overlaps(iv("08:00", "16:00"), iv("15:00", "20:00"))
    assert overlaps(iv("08:00", "16:00"), iv("10:00", "11:00"))


def test_overnight_overlaps_early_morning_shift():
    assert overlaps(iv("22:00", "02:00"), iv("01:00", "05:00"))
    assert overlaps(iv("01:00", "05:00"), iv("22:00", "02:00"))


def test_overnight_overlaps_late_evening_shift():
    assert overlaps(iv("22:00", "02:00"), iv("20:00", "22:30"))


def test_two_overnight_intervals_always_overlap_at_midnight():
    assert overlaps(iv("23:00", "01:00"), iv("22:00", "00:30"))
    assert overlaps(iv("23:30", "00:15"), iv("20:00", "04:00"))


def test_overnight_and_daytime_gap():
    assert not overlaps(iv("22:00", "02:00"), iv("08:00", "16:00"))


def test_overlaps_matches_brute_force_on_sample_grid():
    points = ["00:00", "01:00", "02:00", "08:00", "12:00", "16:00", "22:00", "23:00"]
    intervals = [iv(a, b) for a in points for b in points if a != b]

    covered = {i: {m for m in range(1440) if contains(i, m)} for i in intervals}

    for a in intervals:
        for b in intervals:
            assert overlaps(a, b) == bool(covered[a] & covered[b]), (a, b)


def test_helpers_over_datetimes():
    moment = datetime(2025, 12, 21, 10, 30, 45)
    assert minute_of_day(moment) == 630
    assert format_time_from_date(moment) == "10:30"
    assert format_range(iv("08:00", "16:00")) == "08:00 - 16:00"
