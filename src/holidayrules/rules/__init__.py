from .holidays import HolidayType, DateRule, FixedDateRule, NthWeekdayRule, RelativeRule, LunarRule, EasterRule, CustomRule
from .models import HolidayRule, ObservedRule, ObservedType, Direction, HolidayOccurrence, CalculationContext
from .validation import validate_holiday_rule, ensure_valid
from .adjustments import SubstituteAdjustment, NearestWeekdayAdjustment, BridgeAdjustment, apply_observed_rule
from .engine import HolidayEngine
from .schema import parse_rule, parse_rules
from .rulesets import US_FEDERAL_HOLIDAYS, us_federal_rules, country_rule
