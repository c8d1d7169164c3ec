from datetime import date, timedelta

from .datetools import julian_to_jdn, jdn_to_gregorian

GREGORIAN_REFORM_YEAR = 1583


def _julian_easter_month_day(year: int) -> tuple[int, int]:
    '''Easter Sunday as (month, day) in the Julian calendar.'''
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return month, day

def _gregorian_easter(year: int) -> date:
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)

def easter_sunday(year: int) -> date:
    '''
    Western Easter Sunday. Years before the Gregorian reform use the Julian
    computus, converted to the proleptic Gregorian calendar.
    '''
    if year < GREGORIAN_REFORM_YEAR:
        month, day = _julian_easter_month_day(year)
        return jdn_to_gregorian(julian_to_jdn(year, month, day))
    return _gregorian_easter(year)

def julian_gregorian_difference(year: int) -> int:
    if year < GREGORIAN_REFORM_YEAR:
        return 0
    centuries = year // 100
    return centuries - centuries // 4 - 2

def orthodox_easter(year: int) -> date:
    month, day = _julian_easter_month_day(year)
    return date(year, month, day) + timedelta(days=julian_gregorian_difference(year))
