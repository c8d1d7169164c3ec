from datetime import date

import pytest

from holidayrules import (
    Direction,
    EasterRule,
    FixedDateRule,
    InvalidRule,
    NthWeekdayRule,
    ObservedType,
    RelativeRule,
    UnknownHolidayType,
    parse_rule,
    parse_rules,
)


def test_parse_fixed_rule_with_observed():
    rule = parse_rule({
        'id': 'july-4',
        'name': 'Independence Day',
        'type': 'fixed',
        'rule': {'month': 7, 'day': 4},
        'observedRule': {'type': 'nearest-weekday', 'weekends': [0, 6], 'direction': 'backward'},
        'regions': ['US'],
    })
    assert rule.rule == FixedDateRule(7, 4)
    assert rule.id == 'july-4'
    assert rule.regions == ('US',)
    assert rule.observed_rule.type is ObservedType.NEAREST_WEEKDAY
    assert rule.observed_rule.direction is Direction.BACKWARD
    assert rule.observed_rule.weekends == frozenset({0, 6})

def test_parse_defaults():
    rule = parse_rule({'name': 'Easter', 'type': 'easter-based', 'rule': {}})
    assert rule.rule == EasterRule(0)
    assert rule.duration == 1
    assert rule.active is True
    assert rule.observed_rule is None
    assert rule.id is None

@pytest.mark.parametrize('payload', [
    {'relativeTo': 'thanksgiving', 'offsetDays': 1},
    {'relative_to': 'thanksgiving', 'offset_days': 1},
    {'relativeTo': 'thanksgiving', 'offset': 1},
])
def test_parse_relative_key_styles(payload):
    rule = parse_rule({'name': 'Black Friday', 'type': 'relative', 'rule': payload})
    assert rule.rule == RelativeRule('thanksgiving', 1)

def test_parse_nth_weekday():
    rule = parse_rule({'name': 'Memorial Day', 'type': 'nth-weekday', 'rule': {'month': 5, 'weekday': 1, 'nth': -1}})
    assert rule.rule == NthWeekdayRule(5, 1, -1)

def test_parse_custom_rule():
    rule = parse_rule({'name': 'Custom', 'type': 'custom', 'rule': {'calculate': lambda year, context: date(year, 1, 2)}})
    assert rule.rule.calculate(2024, None) == date(2024, 1, 2)

@pytest.mark.parametrize('holiday_type', ['solar', None, 3])
def test_unknown_type(holiday_type):
    with pytest.raises(UnknownHolidayType):
        parse_rule({'name': 'Mystery', 'type': holiday_type, 'rule': {}})

def test_collects_all_schema_errors():
    with pytest.raises(InvalidRule) as exc_info:
        parse_rule({'name': 'Bad', 'type': 'fixed', 'rule': {'month': 13, 'day': 0}})
    errors = exc_info.value.errors
    assert len(errors) == 2, f'Expected 2 errors, got {errors}'
    assert any('month' in error for error in errors)
    assert any('day' in error for error in errors)
    assert exc_info.value.rule_name == 'Bad'

@pytest.mark.parametrize('data', [
    {'type': 'fixed', 'rule': {'month': 1, 'day': 1}},
    {'name': '', 'type': 'fixed', 'rule': {'month': 1, 'day': 1}},
    {'name': 'Bool month', 'type': 'fixed', 'rule': {'month': True, 'day': 1}},
    {'name': 'Zero nth', 'type': 'nth-weekday', 'rule': {'month': 1, 'weekday': 1, 'nth': 0}},
    {'name': 'Bad calendar', 'type': 'lunar', 'rule': {'calendar': 'mayan', 'month': 1, 'day': 1}},
    {'name': 'No base', 'type': 'relative', 'rule': {'offsetDays': 1}},
    {'name': 'Short', 'type': 'fixed', 'rule': {'month': 1, 'day': 1}, 'duration': 0},
    {'name': 'All weekend', 'type': 'fixed', 'rule': {'month': 1, 'day': 1}, 'observedRule': {'weekends': [0, 1, 2, 3, 4, 5, 6]}},
    {'name': 'Not callable', 'type': 'custom', 'rule': {'calculate': 'later'}},
])
def test_invalid_rule_data(data):
    with pytest.raises(InvalidRule):
        parse_rule(data)

def test_non_mapping_input():
    with pytest.raises(InvalidRule):
        parse_rule(['fixed'])

def test_parse_rules_keeps_order():
    rules = parse_rules([
        {'name': 'B', 'type': 'fixed', 'rule': {'month': 2, 'day': 1}},
        {'name': 'A', 'type': 'fixed', 'rule': {'month': 1, 'day': 1}},
    ])
    assert [r.name for r in rules] == ['B', 'A']

def test_parse_rules_rejects_duplicate_names():
    with pytest.raises(InvalidRule):
        parse_rules([
            {'name': 'A', 'type': 'fixed', 'rule': {'month': 2, 'day': 1}},
            {'name': 'A', 'type': 'fixed', 'rule': {'month': 1, 'day': 1}},
        ])
