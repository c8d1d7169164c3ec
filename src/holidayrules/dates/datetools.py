import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta
from multimethod import multimethod

# Weekday indices used by rule data: 0=Sunday ... 6=Saturday.
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

DEFAULT_WEEKENDS: frozenset[int] = frozenset({SUNDAY, SATURDAY})


def as_date(d: date) -> date:
    '''Calendar day of a date or datetime.'''
    if isinstance(d, datetime):
        return d.date()
    return d

def day_of_week(d: date) -> int:
    return d.isoweekday() % 7

def weekday_name(weekday: int) -> str:
    return calendar.day_name[(weekday - 1) % 7]

def month_name(month: int) -> str:
    return calendar.month_name[month]

def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, 1) + relativedelta(day=31)

def month_days(year: int, month: int) -> list[date]:
    return list(iter_days(date(year, month, 1), last_day_of_month(year, month)))

def iter_days(start: date, end: date) -> Iterator[date]:
    '''Consecutive days from start to end, both inclusive.'''
    current = start
    while as_date(current) <= as_date(end):
        yield current
        current += timedelta(days=1)


@multimethod
def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)

@multimethod
def add_days(ds: list, days: int) -> list:
    return [d + timedelta(days=days) for d in ds]


def julian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083

def jdn_to_gregorian(jdn: int) -> date:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return date(year, month, day)
