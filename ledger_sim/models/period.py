"""Calendar month used as the statement period."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


@dataclass(frozen=True, order=True)
class StatementMonth:
    """A calendar month, e.g. ``StatementMonth(2023, 6)``."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12, got {self.month}")

    @classmethod
    def of(cls, day: date) -> "StatementMonth":
        """Get the month containing ``day``."""
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.num_days)

    @property
    def num_days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def days(self) -> Iterator[date]:
        """Iterate every calendar day of the month in order."""
        first = self.first_day
        for offset in range(self.num_days):
            yield first + timedelta(days=offset)

    def __contains__(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}{self.month:02d}"
