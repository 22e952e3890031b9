"""
Period Descriptors

Calendar spans the aggregator filters transactions by. Every span is a
closed range [first, last] of calendar dates.

PRECONDITIONS (documented, not guarded): month is 1-12, half is 1 or 2.
A malformed descriptor is a bug in the caller.
"""

import calendar
from datetime import date

from pydantic import BaseModel, ConfigDict


class Period(BaseModel):
    """Base class for all period descriptors."""
    model_config = ConfigDict(frozen=True)

    def bounds(self) -> tuple[date, date]:
        raise NotImplementedError

    def contains(self, day: date) -> bool:
        first, last = self.bounds()
        return first <= day <= last


class DayPeriod(Period):
    """A single calendar day."""
    on: date

    def bounds(self) -> tuple[date, date]:
        return self.on, self.on


class MonthPeriod(Period):
    """A calendar month. month is 1-based."""
    year: int
    month: int

    def bounds(self) -> tuple[date, date]:
        last_day = calendar.monthrange(self.year, self.month)[1]
        return date(self.year, self.month, 1), date(self.year, self.month, last_day)

    def shifted(self, months: int) -> "MonthPeriod":
        """The month `months` calendar months away (negative = earlier)."""
        index = self.year * 12 + (self.month - 1) + months
        return MonthPeriod(year=index // 12, month=index % 12 + 1)

    @classmethod
    def of(cls, day: date) -> "MonthPeriod":
        return cls(year=day.year, month=day.month)


class HalfYearPeriod(Period):
    """
    Half of a calendar year.

    half=1 covers January-June, half=2 covers July-December.
    """
    year: int
    half: int

    def bounds(self) -> tuple[date, date]:
        if self.half == 1:
            return date(self.year, 1, 1), date(self.year, 6, 30)
        return date(self.year, 7, 1), date(self.year, 12, 31)


class YearPeriod(Period):
    """A full calendar year; matches on year alone."""
    year: int

    def bounds(self) -> tuple[date, date]:
        return date(self.year, 1, 1), date(self.year, 12, 31)

    def contains(self, day: date) -> bool:
        return day.year == self.year
