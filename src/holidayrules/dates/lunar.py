'''
Approximate lunar and lunisolar calendar conversions.

These converters are deliberately simple: the Islamic converter uses the
tabular 30-year leap cycle, the others add average month lengths to a fixed
Gregorian anchor (new year). They are good enough to place recurring holidays
near the right date but are not astronomically exact and must not be used
where the authoritative date matters.
'''
import math
from abc import ABC, abstractmethod
from datetime import date, timedelta

from ..exceptions import UnknownLunarCalendar
from .datetools import jdn_to_gregorian


class LunarConverter(ABC):
    @abstractmethod
    def lunar_year(self, gregorian_year: int) -> int:
        pass

    @abstractmethod
    def to_gregorian(self, year: int, month: int, day: int) -> date:
        pass


class IslamicConverter(LunarConverter):
    EPOCH_JDN = 1948084
    MEAN_YEAR_DAYS = 354.36667
    MONTH_LENGTHS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return (year * 11 + 14) % 30 < 11

    def month_length(self, month: int, year: int) -> int:
        if month == 12 and self.is_leap_year(year):
            return 30
        return self.MONTH_LENGTHS[month - 1]

    def days_before_month(self, month: int, year: int) -> int:
        return sum(self.month_length(m, year) for m in range(1, month))

    def lunar_year(self, gregorian_year: int) -> int:
        # round half up
        return int(math.floor((gregorian_year - 622) * 1.030684 + 0.5))

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        total_days = (year - 1) * self.MEAN_YEAR_DAYS + self.days_before_month(month, year) + day - 1
        return jdn_to_gregorian(math.floor(self.EPOCH_JDN + total_days))


class ChineseConverter(LunarConverter):
    EPOCH_YEAR = 2637
    MEAN_MONTH_DAYS = 29.5

    def lunar_year(self, gregorian_year: int) -> int:
        return gregorian_year - self.EPOCH_YEAR

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        gregorian_year = year + self.EPOCH_YEAR
        # New year drifts between Jan 21 and Feb 19 over an 11-day cycle
        new_year = date(gregorian_year, 1, 1) + timedelta(days=20 + (gregorian_year * 11) % 30)
        offset = math.floor((month - 1) * self.MEAN_MONTH_DAYS + day - 1)
        return new_year + timedelta(days=offset)


class HebrewConverter(LunarConverter):
    EPOCH_OFFSET = 3761
    MEAN_MONTH_DAYS = 29.5

    def lunar_year(self, gregorian_year: int) -> int:
        return gregorian_year + self.EPOCH_OFFSET

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        # Months counted from Tishrei, anchored at Sep 15
        new_year = date(year - self.EPOCH_OFFSET, 9, 15)
        offset = math.floor((month - 1) * self.MEAN_MONTH_DAYS + day - 1)
        return new_year + timedelta(days=offset)


class PersianConverter(LunarConverter):
    EPOCH_YEAR = 622
    MONTH_DAYS = 30

    def lunar_year(self, gregorian_year: int) -> int:
        return gregorian_year - self.EPOCH_YEAR

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        # Nowruz
        new_year = date(year + self.EPOCH_YEAR, 3, 21)
        return new_year + timedelta(days=(month - 1) * self.MONTH_DAYS + day - 1)


LUNAR_CONVERTERS: dict[str, LunarConverter] = {
    'islamic': IslamicConverter(),
    'chinese': ChineseConverter(),
    'hebrew': HebrewConverter(),
    'persian': PersianConverter(),
}

def get_converter(calendar: str) -> LunarConverter:
    try:
        return LUNAR_CONVERTERS[calendar]
    except KeyError:
        raise UnknownLunarCalendar(calendar) from None
