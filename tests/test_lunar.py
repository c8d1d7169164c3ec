from datetime import date

import pytest

from holidayrules import BusinessDayCalculator, BusinessDayConfig, CalculationContext, HolidayRule, LunarRule, UnknownLunarCalendar
from holidayrules.dates.lunar import IslamicConverter, get_converter


def test_islamic_leap_cycle_has_eleven_leap_years():
    leap_years = [year for year in range(1, 31) if IslamicConverter.is_leap_year(year)]
    assert leap_years == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]

def test_islamic_month_lengths_alternate():
    converter = IslamicConverter()
    first = converter.to_gregorian(1445, 1, 1)
    second = converter.to_gregorian(1445, 2, 1)
    third = converter.to_gregorian(1445, 3, 1)
    assert (second - first).days == 30
    assert (third - second).days == 29

def test_islamic_last_month_longer_in_leap_year():
    converter = IslamicConverter()
    assert converter.month_length(12, 1442) == 30
    assert converter.month_length(12, 1443) == 29

@pytest.mark.parametrize('calendar, month, day, expected', [
    ('chinese', 1, 1, date(2024, 1, 25)),
    ('hebrew', 1, 1, date(2024, 9, 15)),
    ('persian', 1, 1, date(2024, 3, 21)),
    ('persian', 2, 1, date(2024, 4, 20)),
])
def test_lunar_rule_dates(calendar, month, day, expected):
    rule = HolidayRule('Lunar', LunarRule(calendar, month, day))
    assert rule.rule.get_dates(2024, CalculationContext.for_rule(rule)) == [expected]

ISLAMIC_EID = HolidayRule('Eid al-Fitr', LunarRule('islamic', 10, 1))


@pytest.mark.parametrize('year, expected', [
    (2023, [date(2023, 4, 20)]),
    (2024, [date(2024, 4, 8)]),
    (2025, [date(2025, 3, 29)]),
])
def test_islamic_rule_dates(engine, year, expected):
    assert list(engine.calculate(ISLAMIC_EID, year)) == expected

def test_islamic_rule_found_by_is_holiday(engine):
    for year in range(2015, 2031):
        dates = engine.calculate(ISLAMIC_EID, year)
        assert dates, f'No occurrence computed for {year}'
        for d in dates:
            assert d.year == year, f'{year} occurrence computed as {d}'
            assert engine.is_holiday(d, [ISLAMIC_EID]) is not None, f'{d} not reported as a holiday'

def test_islamic_holiday_is_not_a_business_day(engine):
    calculator = BusinessDayCalculator(BusinessDayConfig(holidays=[ISLAMIC_EID]), engine)
    assert not calculator.is_business_day(date(2024, 4, 8))
    assert calculator.is_business_day(date(2024, 4, 9))

def test_lunar_date_late_in_lunar_year_found_in_following_year(engine):
    # month 12 of the lunar year starting Sep 15, 2023 falls in 2024
    rule = HolidayRule('Late', LunarRule('hebrew', 12, 1))
    assert engine.calculate(rule, 2024) == (date(2024, 8, 4),)

def test_unknown_calendar():
    with pytest.raises(UnknownLunarCalendar):
        get_converter('mayan')
    assert LunarRule('mayan', 1, 1).validate()
