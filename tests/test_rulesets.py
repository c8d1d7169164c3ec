from datetime import date

import pytest

from holidayrules import InvalidRule, country_rule
from holidayrules.rules.rulesets import US_FEDERAL_HOLIDAYS


def test_us_federal_rules_loaded(us_rules):
    assert len(us_rules) == len(US_FEDERAL_HOLIDAYS)
    assert len({rule.name for rule in us_rules}) == len(us_rules)

@pytest.mark.parametrize('name, year, expected', [
    ('Martin Luther King Jr. Day', 2024, date(2024, 1, 15)),
    ("Presidents' Day", 2024, date(2024, 2, 19)),
    ('Memorial Day', 2024, date(2024, 5, 27)),
    ('Labor Day', 2024, date(2024, 9, 2)),
    ('Columbus Day', 2024, date(2024, 10, 14)),
    ('Thanksgiving', 2024, date(2024, 11, 28)),
    ('Black Friday', 2024, date(2024, 11, 29)),
    ('Good Friday', 2024, date(2024, 3, 29)),
    ('Independence Day', 2026, date(2026, 7, 6)),
    ('Christmas Day', 2022, date(2022, 12, 26)),
])
def test_us_federal_dates(engine, us_rules, name, year, expected):
    rule = next(r for r in us_rules if r.name == name)
    assert engine.calculate(rule, year, us_rules) == (expected,)

def test_country_rule(engine):
    rule = country_rule('US')
    assert rule.regions == ('US',)
    assert engine.is_holiday(date(2024, 7, 4), [rule]) is not None
    assert engine.is_holiday(date(2024, 3, 12), [rule]) is None

def test_country_rule_subdivision_name():
    rule = country_rule('US', subdiv='CA')
    assert rule.name == 'US-CA public holidays'

def test_country_rule_unknown_country():
    with pytest.raises(InvalidRule):
        country_rule('XX')
