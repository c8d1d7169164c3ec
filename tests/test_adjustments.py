from datetime import date

import pytest

from holidayrules import Direction, ObservedRule, ObservedType
from holidayrules.rules.adjustments import apply_observed_rule

SATURDAY_JULY_4 = date(2026, 7, 4)
SUNDAY_CHRISTMAS = date(2022, 12, 25)
WEDNESDAY_CHRISTMAS = date(2024, 12, 25)


@pytest.mark.parametrize('holiday, expected', [
    (SATURDAY_JULY_4, date(2026, 7, 6)),
    (SUNDAY_CHRISTMAS, date(2022, 12, 26)),
    (WEDNESDAY_CHRISTMAS, WEDNESDAY_CHRISTMAS),
])
def test_substitute_forward(holiday, expected):
    assert apply_observed_rule([holiday], ObservedRule()) == [expected]

@pytest.mark.parametrize('holiday, expected', [
    (SATURDAY_JULY_4, date(2026, 7, 3)),
    (SUNDAY_CHRISTMAS, date(2022, 12, 23)),
])
def test_substitute_backward(holiday, expected):
    observed = ObservedRule(ObservedType.SUBSTITUTE, direction=Direction.BACKWARD)
    assert apply_observed_rule([holiday], observed) == [expected]

def test_substitute_with_custom_weekend():
    # Friday/Saturday weekend
    observed = ObservedRule(ObservedType.SUBSTITUTE, weekends={5, 6})
    assert apply_observed_rule([date(2024, 3, 1)], observed) == [date(2024, 3, 3)]

@pytest.mark.parametrize('holiday, expected', [
    (SATURDAY_JULY_4, date(2026, 7, 3)),
    (SUNDAY_CHRISTMAS, date(2022, 12, 26)),
    (WEDNESDAY_CHRISTMAS, WEDNESDAY_CHRISTMAS),
])
def test_nearest_weekday(holiday, expected):
    observed = ObservedRule(ObservedType.NEAREST_WEEKDAY)
    assert apply_observed_rule([holiday], observed) == [expected]

def test_nearest_weekday_ignores_other_weekend_days():
    observed = ObservedRule(ObservedType.NEAREST_WEEKDAY, weekends={5, 6})
    friday = date(2024, 3, 1)
    assert apply_observed_rule([friday], observed) == [friday]

def test_bridge_adds_following_day():
    observed = ObservedRule(ObservedType.BRIDGE)
    assert apply_observed_rule([SATURDAY_JULY_4], observed) == [SATURDAY_JULY_4, date(2026, 7, 5)]
    assert apply_observed_rule([WEDNESDAY_CHRISTMAS], observed) == [WEDNESDAY_CHRISTMAS]

def test_string_values_accepted():
    observed = ObservedRule('substitute', direction='backward')
    assert apply_observed_rule([SATURDAY_JULY_4], observed) == [date(2026, 7, 3)]
