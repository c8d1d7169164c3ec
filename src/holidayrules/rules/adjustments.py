from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, timedelta

from ..dates.datetools import DEFAULT_WEEKENDS, SATURDAY, SUNDAY, day_of_week
from .models import Direction, ObservedRule, ObservedType


class ObservedAdjustmentBase(ABC):
    def __init__(self, weekends: Iterable[int] = DEFAULT_WEEKENDS, direction: Direction = Direction.FORWARD):
        self.weekends = frozenset(weekends)
        self.direction = Direction(direction)

    def is_weekend(self, d: date) -> bool:
        return day_of_week(d) in self.weekends

    def adjust(self, d: date) -> list[date]:
        if not self.is_weekend(d):
            return [d]
        return self._adjust_weekend(d)

    @abstractmethod
    def _adjust_weekend(self, d: date) -> list[date]:
        pass


class SubstituteAdjustment(ObservedAdjustmentBase):
    def _adjust_weekend(self, d: date) -> list[date]:
        step = timedelta(days=1 if self.direction == Direction.FORWARD else -1)
        while self.is_weekend(d):
            d += step
        return [d]


class NearestWeekdayAdjustment(ObservedAdjustmentBase):
    '''Saturday is observed on Friday and Sunday on Monday.'''
    def _adjust_weekend(self, d: date) -> list[date]:
        wd = day_of_week(d)
        if wd == SUNDAY:
            return [d + timedelta(days=1)]
        elif wd == SATURDAY:
            return [d - timedelta(days=1)]
        return [d]


class BridgeAdjustment(ObservedAdjustmentBase):
    def _adjust_weekend(self, d: date) -> list[date]:
        return [d, d + timedelta(days=1)]


_adjustment_router: dict[ObservedType, type[ObservedAdjustmentBase]] = {
    ObservedType.SUBSTITUTE: SubstituteAdjustment,
    ObservedType.NEAREST_WEEKDAY: NearestWeekdayAdjustment,
    ObservedType.BRIDGE: BridgeAdjustment,
}

def get_adjustment(observed_rule: ObservedRule) -> ObservedAdjustmentBase:
    adjustment_cls = _adjustment_router[ObservedType(observed_rule.type)]
    return adjustment_cls(observed_rule.weekends, observed_rule.direction)

def apply_observed_rule(dates: Iterable[date], observed_rule: ObservedRule) -> list[date]:
    adjustment = get_adjustment(observed_rule)
    observed = []
    for d in dates:
        observed.extend(adjustment.adjust(d))
    return observed
