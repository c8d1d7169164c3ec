from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from ..dates.datetools import add_days, as_date, day_of_week, last_day_of_month, month_name, weekday_name
from ..dates.easter import easter_sunday, orthodox_easter
from ..dates.lunar import LUNAR_CONVERTERS, get_converter
from ..exceptions import (
    BaseHolidayNotFound,
    CircularDependency,
    CustomRuleError,
    InvalidCustomResult,
    InvalidRule,
    NoSuchOccurrence,
    UnsupportedBaseType,
)

if TYPE_CHECKING:
    from .models import CalculationContext

logger = logging.getLogger(__name__)


class HolidayType(Enum):
    FIXED = 'fixed'
    NTH_WEEKDAY = 'nth-weekday'
    RELATIVE = 'relative'
    LUNAR = 'lunar'
    EASTER_BASED = 'easter-based'
    CUSTOM = 'custom'


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _check_range(errors: list[str], label: str, value: Any, low: int, high: int) -> None:
    if not _is_int(value) or not low <= value <= high:
        errors.append(f'{label} must be {low}-{high}')

def _ordinal(n: int) -> str:
    suffix = 'th'
    if not 11 <= n % 100 <= 13:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f'{n}{suffix}'


class DateRule(ABC):
    '''One way of computing a holiday's dates for a given year.'''
    type: ClassVar[HolidayType]

    @abstractmethod
    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        pass

    @abstractmethod
    def validate(self) -> list[str]:
        pass


@dataclass(frozen=True, slots=True)
class FixedDateRule(DateRule):
    month: int
    day: int

    type: ClassVar[HolidayType] = HolidayType.FIXED

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        try:
            return [date(year, self.month, self.day)]
        except ValueError:
            logger.debug('%s has no %s-%s in %s, skipping year', context.rule_name, self.month, self.day, year)
            return []

    def validate(self) -> list[str]:
        errors: list[str] = []
        _check_range(errors, 'Fixed rule month', self.month, 1, 12)
        _check_range(errors, 'Fixed rule day', self.day, 1, 31)
        return errors


@dataclass(frozen=True, slots=True)
class NthWeekdayRule(DateRule):
    '''
    nth occurrence of weekday (0=Sunday) in month. Negative nth counts from
    the end of the month, -1 being the last one.
    '''
    month: int
    weekday: int
    nth: int

    type: ClassVar[HolidayType] = HolidayType.NTH_WEEKDAY

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        if self.nth > 0:
            return [self._from_start(year)]
        return [self._from_end(year)]

    def _from_start(self, year: int) -> date:
        first_day = date(year, self.month, 1)
        days_to_add = (self.weekday - day_of_week(first_day)) % 7
        result = first_day + timedelta(days=days_to_add, weeks=self.nth - 1)
        if result.month != self.month:
            raise NoSuchOccurrence(
                f'{_ordinal(self.nth)} {weekday_name(self.weekday)} of {month_name(self.month)} {year} does not exist')
        return result

    def _from_end(self, year: int) -> date:
        count = -self.nth
        last_day = last_day_of_month(year, self.month)
        days_to_subtract = (day_of_week(last_day) - self.weekday) % 7
        day = last_day.day - days_to_subtract - 7 * (count - 1)
        if day < 1:
            raise NoSuchOccurrence(
                f'{_ordinal(count)} to last {weekday_name(self.weekday)} of {month_name(self.month)} {year} does not exist')
        return date(year, self.month, day)

    def validate(self) -> list[str]:
        errors: list[str] = []
        _check_range(errors, 'Nth-weekday rule month', self.month, 1, 12)
        _check_range(errors, 'Nth-weekday rule weekday', self.weekday, 0, 6)
        if not _is_int(self.nth) or self.nth == 0 or not -5 <= self.nth <= 5:
            errors.append('Nth-weekday rule nth must be 1-5 or -1 to -5')
        return errors


@dataclass(frozen=True, slots=True)
class EasterRule(DateRule):
    offset_days: int = 0
    orthodox: bool = False

    type: ClassVar[HolidayType] = HolidayType.EASTER_BASED

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        easter = orthodox_easter(year) if self.orthodox else easter_sunday(year)
        return [easter + timedelta(days=self.offset_days)]

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not _is_int(self.offset_days):
            errors.append('Easter-based rule offset must be an integer')
        if not isinstance(self.orthodox, bool):
            errors.append('Easter-based rule orthodox must be a boolean')
        return errors


@dataclass(frozen=True, slots=True)
class LunarRule(DateRule):
    calendar: str
    month: int
    day: int

    type: ClassVar[HolidayType] = HolidayType.LUNAR

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        converter = get_converter(self.calendar)
        lunar_year = converter.lunar_year(year)
        # A lunar year can start in the previous or next Gregorian year
        dates = set()
        for candidate in range(lunar_year - 1, lunar_year + 3):
            try:
                d = converter.to_gregorian(candidate, self.month, self.day)
            except (ValueError, OverflowError):
                logger.debug('%s lunar year %s is outside the supported date range', context.rule_name, candidate)
                continue
            if d.year == year:
                dates.add(d)
        return sorted(dates)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.calendar not in LUNAR_CONVERTERS:
            errors.append(f'Lunar rule calendar must be one of: {", ".join(LUNAR_CONVERTERS)}')
        _check_range(errors, 'Lunar rule month', self.month, 1, 12)
        _check_range(errors, 'Lunar rule day', self.day, 1, 31)
        return errors


# Base rule types a relative rule can be computed from without recursion.
DIRECT_BASE_TYPES = frozenset({HolidayType.FIXED, HolidayType.NTH_WEEKDAY, HolidayType.EASTER_BASED})


@dataclass(frozen=True, slots=True)
class RelativeRule(DateRule):
    relative_to: str
    offset_days: int = 0

    type: ClassVar[HolidayType] = HolidayType.RELATIVE

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        base = context.find_rule(self.relative_to)
        if base is None:
            raise BaseHolidayNotFound(self.relative_to, context.rule_name)
        if base.name in context.path:
            raise CircularDependency(context.path + (base.name,))
        if base.type is not HolidayType.RELATIVE and base.type not in DIRECT_BASE_TYPES:
            raise UnsupportedBaseType(base.type.value, base.name)
        errors = base.rule.validate()
        if errors:
            raise InvalidRule(errors, base.name)
        base_dates = base.rule.get_dates(year, context.visiting(base.name))
        return add_days(base_dates, self.offset_days)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not isinstance(self.relative_to, str) or not self.relative_to.strip():
            errors.append('Relative rule relative_to must be a non-empty string')
        if not _is_int(self.offset_days):
            errors.append('Relative rule offset must be an integer')
        return errors


@dataclass(frozen=True, slots=True)
class CustomRule(DateRule):
    calculate: Callable[[int, Any], Any]

    type: ClassVar[HolidayType] = HolidayType.CUSTOM

    def get_dates(self, year: int, context: CalculationContext) -> list[date]:
        try:
            result = self.calculate(year, context)
        except Exception as e:
            raise CustomRuleError(context.rule_name, e) from e
        if isinstance(result, date):
            return [as_date(result)]
        if isinstance(result, Iterable) and not isinstance(result, (str, bytes)):
            return [as_date(d) for d in result if isinstance(d, date)]
        raise InvalidCustomResult(context.rule_name, result)

    def validate(self) -> list[str]:
        if not callable(self.calculate):
            return ['Custom rule must have a calculate function']
        return []
