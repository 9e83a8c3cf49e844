"""End-of-day balance map for a statement month."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from ledger_sim.models.period import StatementMonth


@dataclass(frozen=True)
class EodBalances:
    """End-of-day balances for every day of a month.

    Stored densely: ``balances[i]`` is the balance at the end of day
    ``month.first_day + i``.
    """

    month: StatementMonth
    opening: Decimal  # balance before the first day
    balances: tuple[Decimal, ...]

    def __post_init__(self) -> None:
        if len(self.balances) != self.month.num_days:
            raise ValueError(
                f"Expected {self.month.num_days} balances for {self.month}, got {len(self.balances)}"
            )

    def __getitem__(self, day: date) -> Decimal:
        if day not in self.month:
            raise KeyError(day)
        return self.balances[day.day - 1]

    def __len__(self) -> int:
        return len(self.balances)

    def items(self) -> Iterator[tuple[date, Decimal]]:
        """Iterate ``(day, balance)`` pairs in date order."""
        first = self.month.first_day
        for offset, balance in enumerate(self.balances):
            yield first + timedelta(days=offset), balance

    def between(self, start: date, end: date) -> tuple[Decimal, ...]:
        """Balances for the inclusive range ``[start, end]`` inside the month."""
        if start not in self.month or end not in self.month:
            raise KeyError((start, end))
        return self.balances[start.day - 1 : end.day]

    @property
    def closing(self) -> Decimal:
        """Balance at the end of the last day of the month."""
        return self.balances[-1]
