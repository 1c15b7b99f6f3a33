from datetime import datetime

from function_composition.examples.work_hours import (
    get_hour,
    is_hour_between,
    is_work_hour,
    make_work_hour_check,
)


def test_get_hour():
    assert get_hour(datetime(2017, 1, 1, 13, 45)) == 13


def test_is_hour_between_is_inclusive():
    assert is_hour_between(9, 9, 17)
    assert is_hour_between(17, 9, 17)
    assert not is_hour_between(8, 9, 17)
    assert not is_hour_between(18, 9, 17)


def test_is_work_hour():
    assert is_work_hour(datetime(2017, 1, 2, 9, 0))
    assert is_work_hour(datetime(2017, 1, 2, 17, 59))
    assert not is_work_hour(datetime(2017, 1, 2, 6, 30))


def test_custom_range():
    night_shift = make_work_hour_check(0, 5)
    assert night_shift(datetime(2017, 1, 2, 3))
    assert not night_shift(datetime(2017, 1, 2, 12))
