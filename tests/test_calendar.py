import datetime as dt

from piggy_core.services.calendar import clamp_day, days_in_month, next_occurrence, previous_occurrence


def test_days_in_month_handles_leap_years_and_december():
    assert days_in_month(2021, 2) == 28
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2020, 12) == 31
    assert days_in_month(2020, 4) == 30


def test_clamp_day_uses_last_day_of_short_month():
    assert clamp_day(2021, 2, 31) == dt.date(2021, 2, 28)
    assert clamp_day(2024, 2, 30) == dt.date(2024, 2, 29)
    assert clamp_day(2021, 3, 15) == dt.date(2021, 3, 15)


def test_previous_occurrence_steps_back_and_reclamps():
    assert previous_occurrence(31, dt.date(2021, 2, 15)) == dt.date(2021, 1, 31)
    assert previous_occurrence(31, dt.date(2021, 3, 15)) == dt.date(2021, 2, 28)
    assert previous_occurrence(10, dt.date(2021, 1, 5)) == dt.date(2020, 12, 10)


def test_previous_occurrence_includes_reference_day():
    assert previous_occurrence(15, dt.date(2021, 6, 15)) == dt.date(2021, 6, 15)
    # February 28th is the clamped 31st in a non-leap year
    assert previous_occurrence(31, dt.date(2021, 2, 28)) == dt.date(2021, 2, 28)


def test_next_occurrence_clamps_in_current_month():
    assert next_occurrence(31, dt.date(2021, 2, 15)) == dt.date(2021, 2, 28)
    assert next_occurrence(31, dt.date(2024, 2, 15)) == dt.date(2024, 2, 29)


def test_next_occurrence_is_strictly_after_reference():
    assert next_occurrence(15, dt.date(2021, 6, 15)) == dt.date(2021, 7, 15)
    assert next_occurrence(1, dt.date(2020, 12, 31)) == dt.date(2021, 1, 1)
    assert next_occurrence(31, dt.date(2021, 1, 31)) == dt.date(2021, 2, 28)


def test_occurrences_bound_every_reference_date():
    start = dt.date(2023, 12, 1)
    for offset in range(0, 500, 7):
        reference = start + dt.timedelta(days=offset)
        for day in range(1, 32):
            prev_day = previous_occurrence(day, reference)
            next_day = next_occurrence(day, reference)
            assert prev_day <= reference < next_day
