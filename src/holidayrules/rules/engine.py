'''
Holiday rule engine.

Computes the dates of HolidayRule values per year, applies observed-date
policies and multi-day durations, and answers holiday queries over a
caller-supplied, ordered rule collection. Results are cached per rule and
year; the cache is only invalidated by clear_cache().

Basic usage::

    from holidayrules import HolidayEngine, us_federal_rules

    engine = HolidayEngine()
    rules = us_federal_rules()
    engine.get_holidays_for_year(2024, rules)
    engine.is_holiday(date(2024, 11, 28), rules)   # -> HolidayOccurrence
'''
import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any, Optional

from ..cache import LRUCache
from ..dates.datetools import as_date
from .adjustments import apply_observed_rule
from .models import CalculationContext, HolidayOccurrence, HolidayRule
from .validation import ensure_valid

logger = logging.getLogger(__name__)

DEFAULT_RULE_CACHE_SIZE = 5000


def expand_duration(dates: Iterable[date], duration: int) -> list[date]:
    return [d + timedelta(days=i) for d in dates for i in range(duration)]


class HolidayEngine:
    def __init__(self, cache_size: int = DEFAULT_RULE_CACHE_SIZE):
        # rule cache key -> {year: dates}
        self._rule_cache: LRUCache[str, dict[int, tuple[date, ...]]] = LRUCache(cache_size)

    def calculate(self, rule: HolidayRule, year: int, rules: Optional[Iterable[HolidayRule]] = None) -> tuple[date, ...]:
        '''
        Dates of rule in year, sorted. rules is the collection relative rules
        resolve their base holiday against.
        '''
        ensure_valid(rule)

        key = rule.cache_key
        year_cache = self._rule_cache.get(key)
        if year_cache is None:
            year_cache = {}
            self._rule_cache.set(key, year_cache)
        if year in year_cache:
            return year_cache[year]

        context = CalculationContext.for_rule(rule, rules)
        dates = rule.rule.get_dates(year, context)
        if rule.observed_rule is not None:
            dates = apply_observed_rule(dates, rule.observed_rule)
        if rule.duration > 1:
            dates = expand_duration(dates, rule.duration)

        result = tuple(sorted(dates))
        year_cache[year] = result
        logger.debug('Computed %s for %s: %s', key, year, [d.isoformat() for d in result])
        return result

    def is_holiday(self, d: date, rules: Iterable[HolidayRule]) -> Optional[HolidayOccurrence]:
        '''First rule, in collection order, with an occurrence on the calendar day of d.'''
        rules = tuple(rules)
        day = as_date(d)
        for rule in rules:
            if not rule.active:
                continue
            for holiday_date in self.calculate(rule, day.year, rules):
                if holiday_date == day:
                    return rule.occurrence(holiday_date)
        return None

    def get_holiday_info(self, d: date, rules: Iterable[HolidayRule]) -> Optional[HolidayOccurrence]:
        return self.is_holiday(d, rules)

    def get_holidays_for_year(self, year: int, rules: Iterable[HolidayRule]) -> list[HolidayOccurrence]:
        rules = tuple(rules)
        occurrences = [
            rule.occurrence(holiday_date)
            for rule in rules if rule.active
            for holiday_date in self.calculate(rule, year, rules)
        ]
        occurrences.sort(key=lambda occurrence: occurrence.date)
        return occurrences

    def get_holidays_in_range(self, start: date, end: date, rules: Iterable[HolidayRule]) -> list[HolidayOccurrence]:
        rules = tuple(rules)
        start_day, end_day = as_date(start), as_date(end)
        return [
            occurrence
            for year in range(start_day.year, end_day.year + 1)
            for occurrence in self.get_holidays_for_year(year, rules)
            if start_day <= occurrence.date <= end_day
        ]

    def get_next_holiday(self, after: date, rules: Iterable[HolidayRule]) -> Optional[HolidayOccurrence]:
        rules = tuple(rules)
        day = as_date(after)
        for occurrence in self.get_holidays_for_year(day.year, rules):
            if occurrence.date > day:
                return occurrence
        next_year = self.get_holidays_for_year(day.year + 1, rules)
        return next_year[0] if next_year else None

    def get_previous_holiday(self, before: date, rules: Iterable[HolidayRule]) -> Optional[HolidayOccurrence]:
        rules = tuple(rules)
        day = as_date(before)
        for occurrence in reversed(self.get_holidays_for_year(day.year, rules)):
            if occurrence.date < day:
                return occurrence
        previous_year = self.get_holidays_for_year(day.year - 1, rules)
        return previous_year[-1] if previous_year else None

    def clear_cache(self) -> None:
        self._rule_cache.clear()

    def cache_stats(self) -> dict[str, Any]:
        return self._rule_cache.stats()

    def __repr__(self) -> str:
        return f'HolidayEngine(cached_rules={len(self._rule_cache)})'
