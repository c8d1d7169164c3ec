from .calendars import BusinessDayConfig, BusinessDayCalculator, MAX_SEARCH_DAYS, MAX_WALK_DAYS
