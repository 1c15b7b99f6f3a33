"""
Checking whether a moment falls in working hours.

`is_hour_between` takes three arguments; closing over the range turns it
into a one-argument step that can follow `get_hour` in a chain.
"""

from datetime import datetime
from typing import Callable

from function_composition.core import compose


def get_hour(moment: datetime) -> int:
    return moment.hour


def is_hour_between(hour: int, start_hour: int, end_hour: int) -> bool:
    """Inclusive on both ends."""
    return start_hour <= hour <= end_hour


def make_work_hour_check(start_hour: int = 9, end_hour: int = 17) -> Callable[[datetime], bool]:
    return compose(get_hour, lambda hour: is_hour_between(hour, start_hour, end_hour))


is_work_hour = make_work_hour_check()
