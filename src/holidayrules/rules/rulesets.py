from datetime import date
from typing import Any, Optional

from holidays import country_holidays, list_supported_countries

from ..exceptions import InvalidRule
from .holidays import CustomRule
from .models import HolidayRule
from .schema import parse_rules

_OBSERVED_SUBSTITUTE = {'type': 'substitute', 'weekends': [0, 6], 'direction': 'forward'}

US_FEDERAL_HOLIDAYS: list[dict[str, Any]] = [
    {'id': 'new-years-day', 'name': "New Year's Day", 'type': 'fixed', 'rule': {'month': 1, 'day': 1}, 'observedRule': _OBSERVED_SUBSTITUTE},
    {'id': 'mlk-day', 'name': 'Martin Luther King Jr. Day', 'type': 'nth-weekday', 'rule': {'month': 1, 'weekday': 1, 'nth': 3}},
    {'id': 'presidents-day', 'name': "Presidents' Day", 'type': 'nth-weekday', 'rule': {'month': 2, 'weekday': 1, 'nth': 3}},
    {'id': 'good-friday', 'name': 'Good Friday', 'type': 'easter-based', 'rule': {'offsetDays': -2}},
    {'id': 'easter-sunday', 'name': 'Easter Sunday', 'type': 'easter-based', 'rule': {'offsetDays': 0}},
    {'id': 'easter-monday', 'name': 'Easter Monday', 'type': 'easter-based', 'rule': {'offsetDays': 1}},
    {'id': 'memorial-day', 'name': 'Memorial Day', 'type': 'nth-weekday', 'rule': {'month': 5, 'weekday': 1, 'nth': -1}},
    {'id': 'juneteenth', 'name': 'Juneteenth', 'type': 'fixed', 'rule': {'month': 6, 'day': 19}, 'observedRule': _OBSERVED_SUBSTITUTE},
    {'id': 'independence-day', 'name': 'Independence Day', 'type': 'fixed', 'rule': {'month': 7, 'day': 4}, 'observedRule': _OBSERVED_SUBSTITUTE},
    {'id': 'labor-day', 'name': 'Labor Day', 'type': 'nth-weekday', 'rule': {'month': 9, 'weekday': 1, 'nth': 1}},
    {'id': 'columbus-day', 'name': 'Columbus Day', 'type': 'nth-weekday', 'rule': {'month': 10, 'weekday': 1, 'nth': 2}},
    {'id': 'veterans-day', 'name': 'Veterans Day', 'type': 'fixed', 'rule': {'month': 11, 'day': 11}, 'observedRule': _OBSERVED_SUBSTITUTE},
    {'id': 'thanksgiving', 'name': 'Thanksgiving', 'type': 'nth-weekday', 'rule': {'month': 11, 'weekday': 4, 'nth': 4}},
    {'id': 'black-friday', 'name': 'Black Friday', 'type': 'relative', 'rule': {'relativeTo': 'thanksgiving', 'offsetDays': 1}},
    {'id': 'christmas-day', 'name': 'Christmas Day', 'type': 'fixed', 'rule': {'month': 12, 'day': 25}, 'observedRule': _OBSERVED_SUBSTITUTE},
]


def us_federal_rules() -> list[HolidayRule]:
    return parse_rules(US_FEDERAL_HOLIDAYS)


def country_rule(country: str, subdiv: Optional[str] = None, name: Optional[str] = None) -> HolidayRule:
    '''
    Rule whose dates are the public holidays of a country (and optionally a
    subdivision) as published by the holidays package.
    '''
    supported = list_supported_countries()
    if country not in supported:
        raise InvalidRule([f'Country {country} not supported by holidays package'], name)
    if subdiv is not None and subdiv not in supported[country]:
        raise InvalidRule([f'Subdivision {subdiv} not supported for country {country}'], name)

    def calculate(year: int, context: Any) -> list[date]:
        return sorted(country_holidays(country, subdiv=subdiv, years=year))

    label = country if subdiv is None else f'{country}-{subdiv}'
    return HolidayRule(
        name=name or f'{label} public holidays',
        rule=CustomRule(calculate),
        id=f'country:{label}',
        regions=(label,),
    )
