from .datetools import SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, DEFAULT_WEEKENDS, as_date, day_of_week, add_days, iter_days, month_days, last_day_of_month
from .easter import easter_sunday, orthodox_easter
from .lunar import LunarConverter, IslamicConverter, ChineseConverter, HebrewConverter, PersianConverter, get_converter
