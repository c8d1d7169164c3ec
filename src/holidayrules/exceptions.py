from typing import Iterable, Optional


class HolidayRulesError(Exception):
    '''Base class for every error raised by holidayrules.'''


class InvalidRule(HolidayRulesError, ValueError):
    def __init__(self, errors: Iterable[str], rule_name: Optional[str] = None):
        self.errors: list[str] = list(errors)
        self.rule_name = rule_name
        label = f"'{rule_name}'" if rule_name else '(unnamed)'
        super().__init__(f'Invalid holiday rule {label}: {", ".join(self.errors)}')


class UnknownHolidayType(HolidayRulesError, ValueError):
    def __init__(self, holiday_type: object):
        self.holiday_type = holiday_type
        super().__init__(f'Unknown holiday type: {holiday_type!r}')


class UnknownLunarCalendar(HolidayRulesError, ValueError):
    def __init__(self, calendar: str):
        self.calendar = calendar
        super().__init__(f'Unknown lunar calendar: {calendar!r}')


class NoSuchOccurrence(HolidayRulesError, ValueError):
    pass


class BaseHolidayNotFound(HolidayRulesError, LookupError):
    def __init__(self, relative_to: str, rule_name: str):
        self.relative_to = relative_to
        self.rule_name = rule_name
        super().__init__(f"Base holiday '{relative_to}' not found for relative rule '{rule_name}'")


class UnsupportedBaseType(HolidayRulesError, ValueError):
    def __init__(self, holiday_type: object, base_name: str):
        self.holiday_type = holiday_type
        self.base_name = base_name
        super().__init__(f"Cannot calculate base holiday '{base_name}' of type: {holiday_type}")


class CircularDependency(HolidayRulesError, ValueError):
    def __init__(self, chain: Iterable[str]):
        self.chain: list[str] = list(chain)
        super().__init__(f'Circular dependency detected in holiday chain: {" -> ".join(self.chain)}')


class InvalidCustomResult(HolidayRulesError, TypeError):
    def __init__(self, rule_name: str, result: object):
        self.rule_name = rule_name
        self.result = result
        super().__init__(f"Custom rule '{rule_name}' must return a date or a sequence of dates, got {type(result).__name__}")


class CustomRuleError(HolidayRulesError):
    def __init__(self, rule_name: str, error: Exception):
        self.rule_name = rule_name
        super().__init__(f"Error calculating custom rule '{rule_name}': {error}")


class NoBusinessDayFound(HolidayRulesError):
    def __init__(self, start: object, limit: int, direction: int):
        self.start = start
        self.limit = limit
        self.direction = direction
        where = 'after' if direction > 0 else 'before'
        super().__init__(f'No business day found within {limit} days {where} {start}')
