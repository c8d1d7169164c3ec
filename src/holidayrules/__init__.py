import logging

from .__version__ import __version__
from .cache import LRUCache
from .exceptions import HolidayRulesError, InvalidRule, UnknownHolidayType, UnknownLunarCalendar, NoSuchOccurrence, BaseHolidayNotFound, UnsupportedBaseType, CircularDependency, InvalidCustomResult, CustomRuleError, NoBusinessDayFound
from .dates import easter_sunday, orthodox_easter, day_of_week, DEFAULT_WEEKENDS
from .rules import HolidayType, FixedDateRule, NthWeekdayRule, RelativeRule, LunarRule, EasterRule, CustomRule, HolidayRule, ObservedRule, ObservedType, Direction, HolidayOccurrence, CalculationContext, HolidayEngine, validate_holiday_rule, parse_rule, parse_rules, us_federal_rules, country_rule
from .business import BusinessDayCalculator, BusinessDayConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())
