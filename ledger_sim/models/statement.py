"""Statement models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from ledger_sim.models.enums import TransactionKind
from ledger_sim.models.period import StatementMonth


@dataclass(frozen=True)
class StatementLine:
    """One row of a monthly statement.

    ``balance`` is the running balance right after this line; ``eod_balance``
    is the balance at the end of the line's date. They differ only for lines
    followed by other transactions on the same day.
    """

    date: date
    transaction_id: str  # empty for the interest line
    kind: TransactionKind
    amount: Decimal
    balance: Decimal
    eod_balance: Decimal


@dataclass
class Statement:
    """Monthly account statement."""

    account_id: str
    month: StatementMonth
    opening_balance: Decimal
    interest: Decimal
    closing_balance: Decimal
    lines: list[StatementLine] = field(default_factory=list)

    @property
    def transaction_lines(self) -> list[StatementLine]:
        """Lines excluding the synthetic interest line."""
        return [line for line in self.lines if line.kind is not TransactionKind.INTEREST]
