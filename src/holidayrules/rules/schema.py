'''
Loading holiday rules from plain data (JSON/YAML-decoded mappings).

A rule mapping looks like::

    {
        "id": "thanksgiving",
        "name": "Thanksgiving",
        "type": "nth-weekday",
        "rule": {"month": 11, "weekday": 4, "nth": 4},
        "observedRule": {"type": "substitute", "weekends": [0, 6], "direction": "forward"},
        "duration": 1,
        "regions": ["US"],
        "active": true
    }

Keys may be camelCase or snake_case, and "offset" is accepted for "offsetDays".
The "type" value selects the rule payload schema.
'''
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..exceptions import InvalidRule, UnknownHolidayType
from .holidays import (
    CustomRule,
    DateRule,
    EasterRule,
    FixedDateRule,
    HolidayType,
    LunarRule,
    NthWeekdayRule,
    RelativeRule,
)
from .models import Direction, HolidayRule, ObservedRule, ObservedType

logger = logging.getLogger(__name__)

HOLIDAY_TYPES = tuple(t.value for t in HolidayType)

Month = Annotated[int, Field(strict=True, ge=1, le=12)]
Day = Annotated[int, Field(strict=True, ge=1, le=31)]
Weekday = Annotated[int, Field(strict=True, ge=0, le=6)]
Offset = Annotated[int, Field(strict=True)]


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# =============================================================================
# Rule payloads
# =============================================================================

class FixedPayload(_Schema):
    month: Month
    day: Day

    def to_rule(self) -> DateRule:
        return FixedDateRule(self.month, self.day)


class NthWeekdayPayload(_Schema):
    month: Month
    weekday: Weekday
    nth: Annotated[int, Field(strict=True, ge=-5, le=5)]

    @field_validator('nth')
    @classmethod
    def nth_not_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError('nth must be 1-5 or -1 to -5')
        return v

    def to_rule(self) -> DateRule:
        return NthWeekdayRule(self.month, self.weekday, self.nth)


class RelativePayload(_Schema):
    relative_to: str = Field(min_length=1)
    offset_days: Offset = Field(0, validation_alias=AliasChoices('offsetDays', 'offset_days', 'offset'))

    def to_rule(self) -> DateRule:
        return RelativeRule(self.relative_to, self.offset_days)


class LunarPayload(_Schema):
    calendar: Literal['islamic', 'chinese', 'hebrew', 'persian']
    month: Month
    day: Day

    def to_rule(self) -> DateRule:
        return LunarRule(self.calendar, self.month, self.day)


class EasterPayload(_Schema):
    offset_days: Offset = Field(0, validation_alias=AliasChoices('offsetDays', 'offset_days', 'offset'))
    orthodox: bool = False

    def to_rule(self) -> DateRule:
        return EasterRule(self.offset_days, self.orthodox)


class CustomPayload(_Schema):
    calculate: Callable[[int, Any], Any]

    def to_rule(self) -> DateRule:
        return CustomRule(self.calculate)


# =============================================================================
# Rule envelopes
# =============================================================================

class ObservedRuleSchema(_Schema):
    type: Literal['substitute', 'nearest-weekday', 'bridge'] = 'substitute'
    weekends: list[Weekday] = Field(default_factory=lambda: [0, 6])
    direction: Literal['forward', 'backward'] = 'forward'

    @model_validator(mode='after')
    def leaves_a_weekday(self) -> ObservedRuleSchema:
        if len(set(self.weekends)) >= 7:
            raise ValueError('weekends must leave at least one weekday')
        return self

    def to_observed_rule(self) -> ObservedRule:
        return ObservedRule(ObservedType(self.type), frozenset(self.weekends), Direction(self.direction))


class _RuleSchema(_Schema):
    name: str = Field(min_length=1)
    id: Optional[str] = None
    observed_rule: Optional[ObservedRuleSchema] = None
    duration: Annotated[int, Field(strict=True, ge=1)] = 1
    regions: list[str] = Field(default_factory=list)
    active: bool = True

    def to_holiday_rule(self) -> HolidayRule:
        return HolidayRule(
            name=self.name,
            rule=self.rule.to_rule(),
            id=self.id,
            observed_rule=self.observed_rule.to_observed_rule() if self.observed_rule else None,
            duration=self.duration,
            regions=tuple(self.regions),
            active=self.active,
        )


class FixedRuleSchema(_RuleSchema):
    type: Literal['fixed']
    rule: FixedPayload


class NthWeekdayRuleSchema(_RuleSchema):
    type: Literal['nth-weekday']
    rule: NthWeekdayPayload


class RelativeRuleSchema(_RuleSchema):
    type: Literal['relative']
    rule: RelativePayload


class LunarRuleSchema(_RuleSchema):
    type: Literal['lunar']
    rule: LunarPayload


class EasterRuleSchema(_RuleSchema):
    type: Literal['easter-based']
    rule: EasterPayload


class CustomRuleSchema(_RuleSchema):
    type: Literal['custom']
    rule: CustomPayload


RuleSchema = Annotated[
    Union[FixedRuleSchema, NthWeekdayRuleSchema, RelativeRuleSchema, LunarRuleSchema, EasterRuleSchema, CustomRuleSchema],
    Field(discriminator='type'),
]

_rule_adapter: TypeAdapter[RuleSchema] = TypeAdapter(RuleSchema)


def _error_messages(error: ValidationError) -> list[str]:
    messages = []
    for err in error.errors():
        location = '.'.join(str(part) for part in err['loc'])
        messages.append(f'{location}: {err["msg"]}' if location else err['msg'])
    return messages

def parse_rule(data: Mapping[str, Any]) -> HolidayRule:
    if not isinstance(data, Mapping):
        raise InvalidRule([f'Rule data must be a mapping, got {type(data).__name__}'])
    holiday_type = data.get('type')
    if holiday_type not in HOLIDAY_TYPES:
        raise UnknownHolidayType(holiday_type)
    try:
        schema = _rule_adapter.validate_python(dict(data))
    except ValidationError as e:
        raise InvalidRule(_error_messages(e), data.get('name')) from e
    return schema.to_holiday_rule()

def parse_rules(data: Iterable[Mapping[str, Any]]) -> list[HolidayRule]:
    '''Rules in input order. Names must be unique within the collection.'''
    rules = [parse_rule(item) for item in data]
    seen: set[str] = set()
    duplicates = []
    for rule in rules:
        if rule.name in seen:
            duplicates.append(f'Duplicate rule name: {rule.name}')
        seen.add(rule.name)
    if duplicates:
        raise InvalidRule(duplicates)
    logger.debug('Loaded %s holiday rules', len(rules))
    return rules
