import pytest

from holidayrules import BusinessDayCalculator, BusinessDayConfig, HolidayEngine, us_federal_rules


@pytest.fixture
def engine() -> HolidayEngine:
    return HolidayEngine()

@pytest.fixture
def us_rules():
    return us_federal_rules()

@pytest.fixture
def plain_calculator() -> BusinessDayCalculator:
    return BusinessDayCalculator(BusinessDayConfig())

@pytest.fixture
def us_calculator(engine, us_rules) -> BusinessDayCalculator:
    return BusinessDayCalculator(BusinessDayConfig(holidays=us_rules), engine)
