from datetime import date, datetime

from src.gym_checkin.gym_checkin.common.datetime_utils import add_months, day_window, days_until


def test_day_window_bounds():
    start, end = day_window(date(2026, 3, 14))
    assert start == datetime(2026, 3, 14, 0, 0, 0)
    assert end == datetime(2026, 3, 14, 23, 59, 59)


def test_add_months_plain_and_year_rollover():
    assert add_months(date(2026, 1, 15), 1) == date(2026, 2, 15)
    assert add_months(date(2026, 10, 5), 6) == date(2027, 4, 5)


def test_add_months_clamps_to_month_end():
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2028, 1, 31), 1) == date(2028, 2, 29)


def test_days_until():
    assert days_until(date(2026, 2, 8), date(2026, 2, 1)) == 7
    assert days_until(date(2026, 1, 30), date(2026, 2, 1)) == -2
