from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional, Self

from ..dates.datetools import DEFAULT_WEEKENDS
from ..exceptions import UnknownHolidayType
from .holidays import DateRule, HolidayType


class ObservedType(str, Enum):
    SUBSTITUTE = 'substitute'
    NEAREST_WEEKDAY = 'nearest-weekday'
    BRIDGE = 'bridge'


class Direction(str, Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'


@dataclass(frozen=True, slots=True)
class ObservedRule:
    '''How a holiday landing on a weekend day is observed.'''
    type: ObservedType = ObservedType.SUBSTITUTE
    weekends: frozenset[int] = DEFAULT_WEEKENDS
    direction: Direction = Direction.FORWARD

    def __post_init__(self):
        if not isinstance(self.weekends, frozenset):
            object.__setattr__(self, 'weekends', frozenset(self.weekends))


@dataclass(frozen=True, slots=True)
class HolidayRule:
    name: str
    rule: DateRule
    id: Optional[str] = None
    observed_rule: Optional[ObservedRule] = None
    duration: int = 1
    regions: tuple[str, ...] = ()
    active: bool = True

    def __post_init__(self):
        if not isinstance(self.rule, DateRule):
            raise UnknownHolidayType(type(self.rule).__name__)
        if not isinstance(self.regions, tuple):
            object.__setattr__(self, 'regions', tuple(self.regions))

    @property
    def type(self) -> HolidayType:
        return self.rule.type

    @property
    def cache_key(self) -> str:
        if self.name:
            return self.name
        return f'{self.type.value}:{self.rule!r}'

    def occurrence(self, d: date) -> 'HolidayOccurrence':
        return HolidayOccurrence(
            id=self.id or self.name,
            name=self.name,
            type=self.type,
            date=d,
            regions=self.regions,
        )


@dataclass(frozen=True, slots=True)
class HolidayOccurrence:
    id: str
    name: str
    type: HolidayType
    date: date
    regions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CalculationContext:
    '''
    Rules visible to a calculation and the chain of rule names being resolved.
    Contexts are never mutated: visiting() returns a new one, so sibling
    resolutions keep independent cycle-detection state.
    '''
    rules: tuple[HolidayRule, ...] = ()
    path: tuple[str, ...] = ()

    @classmethod
    def for_rule(cls, rule: HolidayRule, rules: Optional[Iterable[HolidayRule]] = None) -> Self:
        return cls(rules=tuple(rules or ()), path=(rule.name,))

    @property
    def rule_name(self) -> str:
        return self.path[-1] if self.path else ''

    def visiting(self, name: str) -> Self:
        return replace(self, path=self.path + (name,))

    def find_rule(self, reference: str) -> Optional[HolidayRule]:
        for rule in self.rules:
            if rule.name == reference:
                return rule
        for rule in self.rules:
            if rule.id is not None and rule.id == reference:
                return rule
        lowered = reference.lower()
        for rule in self.rules:
            if isinstance(rule.name, str) and rule.name.lower() == lowered:
                return rule
        return None
