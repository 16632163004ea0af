from datetime import datetime, timedelta

from versionfox.timeutil import begin_of_today, is_before_today, timestamp


def test_timestamp_is_non_zero():
    assert timestamp() != 0
    assert timestamp() > 0


def test_is_before_today():
    yesterday = int((datetime.now() - timedelta(days=1)).timestamp())
    assert is_before_today(yesterday) is True

    tomorrow = int((datetime.now() + timedelta(days=1)).timestamp())
    assert is_before_today(tomorrow) is False


def test_begin_of_today_bounds():
    start = begin_of_today()
    assert start <= timestamp()
    assert is_before_today(start) is False
    assert is_before_today(start - 1) is True