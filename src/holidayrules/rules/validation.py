from typing import Any

from ..exceptions import InvalidRule
from .holidays import DateRule
from .models import Direction, HolidayRule, ObservedRule, ObservedType


def _is_member(enum_cls: type, value: Any) -> bool:
    try:
        enum_cls(value)
    except (ValueError, TypeError):
        return False
    return True

def _validate_observed(observed: Any) -> list[str]:
    if not isinstance(observed, ObservedRule):
        return ['Observed rule must be an ObservedRule']
    errors = []
    if not _is_member(ObservedType, observed.type):
        errors.append(f'Observed rule type must be one of: {", ".join(t.value for t in ObservedType)}')
    if any(isinstance(w, bool) or not isinstance(w, int) or not 0 <= w <= 6 for w in observed.weekends):
        errors.append('Observed rule weekends must be weekday indices 0-6')
    elif len(observed.weekends) >= 7:
        errors.append('Observed rule weekends must leave at least one weekday')
    if not _is_member(Direction, observed.direction):
        errors.append(f'Observed rule direction must be one of: {", ".join(d.value for d in Direction)}')
    return errors

def validate_holiday_rule(rule: Any) -> list[str]:
    '''Every problem found in rule; an empty list means the rule is usable.'''
    if not isinstance(rule, HolidayRule):
        return ['Rule must be a HolidayRule']

    errors = []
    if not isinstance(rule.name, str) or not rule.name.strip():
        errors.append('Rule name must be a non-empty string')
    if rule.id is not None and not isinstance(rule.id, str):
        errors.append('Rule id must be a string')
    if not isinstance(rule.rule, DateRule):
        errors.append('Rule must have a known rule type')
    else:
        errors.extend(rule.rule.validate())
    if rule.observed_rule is not None:
        errors.extend(_validate_observed(rule.observed_rule))
    if isinstance(rule.duration, bool) or not isinstance(rule.duration, int) or rule.duration < 1:
        errors.append('Rule duration must be a positive integer')
    if not all(isinstance(region, str) for region in rule.regions):
        errors.append('Rule regions must be strings')
    if not isinstance(rule.active, bool):
        errors.append('Rule active must be a boolean')
    return errors

def ensure_valid(rule: HolidayRule) -> None:
    errors = validate_holiday_rule(rule)
    if errors:
        raise InvalidRule(errors, getattr(rule, 'name', None))
