import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Optional, Self

import numpy as np

from ..cache import LRUCache
from ..dates.datetools import DEFAULT_WEEKENDS, add_days, as_date, day_of_week, iter_days, month_days
from ..exceptions import NoBusinessDayFound
from ..rules.engine import HolidayEngine
from ..rules.models import HolidayRule

logger = logging.getLogger(__name__)

# Step bounds for business day searches
MAX_SEARCH_DAYS = 1000
MAX_WALK_DAYS = 10000

DEFAULT_DAY_CACHE_SIZE = 10000


@dataclass(frozen=True, slots=True)
class BusinessDayConfig:
    weekends: frozenset[int] = DEFAULT_WEEKENDS
    holidays: tuple[HolidayRule, ...] = ()
    custom_rules: tuple[Callable[[date], bool], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'weekends', frozenset(self.weekends))
        object.__setattr__(self, 'holidays', tuple(self.holidays))
        object.__setattr__(self, 'custom_rules', tuple(self.custom_rules))

    def with_holidays(self, holidays: Iterable[HolidayRule]) -> Self:
        return replace(self, holidays=self.holidays + tuple(holidays))


class BusinessDayCalculator:
    '''
    Business day arithmetic over a weekend set, a holiday rule set and
    custom predicates. A day is a business day when it is not a weekend day,
    no holiday rule falls on it and every custom predicate accepts it.

    Results of is_business_day are cached per calendar day until the
    configuration changes or clear_cache() is called. Inputs may be dates or
    datetimes; returned values keep the input's type.
    '''
    def __init__(self, config: Optional[BusinessDayConfig] = None, engine: Optional[HolidayEngine] = None,
                 cache_size: int = DEFAULT_DAY_CACHE_SIZE):
        self.config = config if config is not None else BusinessDayConfig()
        self.engine = engine if engine is not None else HolidayEngine()
        self._day_cache: LRUCache[date, bool] = LRUCache(cache_size)

    def update_config(self, **changes: Any) -> None:
        self.config = replace(self.config, **changes)
        self._day_cache.clear()
        logger.debug('Business day config updated: %s', sorted(changes))

    def is_weekend(self, d: date) -> bool:
        return day_of_week(d) in self.config.weekends

    def is_business_day(self, d: date) -> bool:
        day = as_date(d)
        cached = self._day_cache.get(day)
        if cached is not None:
            return cached
        result = self._check_business_day(day)
        self._day_cache.set(day, result)
        return result

    def _check_business_day(self, day: date) -> bool:
        if self.is_weekend(day):
            return False
        if self.config.holidays and self.engine.is_holiday(day, self.config.holidays) is not None:
            return False
        for predicate in self.config.custom_rules:
            if not predicate(day):
                return False
        return True

    def business_day_mask(self, dates: Iterable[date]) -> np.ndarray:
        return np.fromiter((self.is_business_day(d) for d in dates), dtype=bool)

    def _search(self, d: date, step: int) -> date:
        current = d
        for _ in range(MAX_SEARCH_DAYS):
            current = add_days(current, step)
            if self.is_business_day(current):
                return current
        raise NoBusinessDayFound(d, MAX_SEARCH_DAYS, step)

    def next_business_day(self, d: date) -> date:
        return self._search(d, 1)

    def previous_business_day(self, d: date) -> date:
        return self._search(d, -1)

    def add_business_days(self, d: date, n: int) -> date:
        if n == 0:
            return d
        step = 1 if n > 0 else -1
        remaining = abs(n)
        current = anchor = d
        # bound on consecutive non-business days, reset on every business day
        gap = 0
        while gap < MAX_WALK_DAYS:
            current = add_days(current, step)
            if self.is_business_day(current):
                remaining -= 1
                if remaining == 0:
                    return current
                anchor = current
                gap = 0
            else:
                gap += 1
        raise NoBusinessDayFound(anchor, MAX_WALK_DAYS, step)

    def business_days_between(self, start: date, end: date) -> int:
        '''
        Signed count of business days from start to end, start excluded and
        end included. Negative when end is before start.
        '''
        start_day, end_day = as_date(start), as_date(end)
        one_day = timedelta(days=1)
        if start_day < end_day:
            return int(self.business_day_mask(iter_days(start_day + one_day, end_day)).sum())
        if start_day > end_day:
            return -int(self.business_day_mask(iter_days(end_day, start_day - one_day)).sum())
        return 0

    def business_days_in_month(self, year: int, month: int) -> int:
        return int(self.business_day_mask(month_days(year, month)).sum())

    def business_days_in_year(self, year: int) -> int:
        return int(self.business_day_mask(iter_days(date(year, 1, 1), date(year, 12, 31))).sum())

    def get_business_days_in_range(self, start: date, end: date) -> list[date]:
        '''Business days from start to end, both inclusive.'''
        days = list(iter_days(start, end))
        mask = self.business_day_mask(days)
        return [d for d, is_business in zip(days, mask) if is_business]

    def get_business_days_in_month(self, year: int, month: int) -> list[date]:
        days = month_days(year, month)
        return [d for d, is_business in zip(days, self.business_day_mask(days)) if is_business]

    def get_nth_business_day(self, year: int, month: int, nth: int) -> Optional[date]:
        if nth < 1:
            raise ValueError(f'nth must be a positive integer. Got {nth}')
        business_days = self.get_business_days_in_month(year, month)
        return business_days[nth - 1] if nth <= len(business_days) else None

    def get_last_business_day(self, year: int, month: int) -> Optional[date]:
        business_days = self.get_business_days_in_month(year, month)
        return business_days[-1] if business_days else None

    def settlement_date(self, d: date, days: int) -> date:
        '''T+days settlement date.'''
        return self.add_business_days(d, days)

    def clear_cache(self) -> None:
        self._day_cache.clear()

    def cache_stats(self) -> dict[str, Any]:
        return self._day_cache.stats()
