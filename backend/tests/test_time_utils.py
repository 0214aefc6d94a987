# backend/tests/test_time_utils.py

import datetime as dt

from famapp.utils.time_utils import days_until, local_today


def test_days_until_counts_whole_days():
    assert days_until(dt.date(2025, 7, 10), today=dt.date(2025, 6, 10)) == 30
    assert days_until(dt.date(2025, 7, 10), today=dt.date(2025, 7, 10)) == 0


def test_past_start_date_is_zero():
    assert days_until(dt.date(2025, 1, 1), today=dt.date(2025, 3, 1)) == 0


def test_local_today_is_a_date_near_utc_today():
    today = local_today("Pacific/Auckland")
    utc_today = dt.datetime.now(dt.timezone.utc).date()
    assert isinstance(today, dt.date)
    assert abs((today - utc_today).days) <= 1
