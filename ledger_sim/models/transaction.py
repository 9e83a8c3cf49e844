"""Transaction model for the ledger."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ledger_sim.models.enums import TransactionKind


def compact_date(day: date) -> str:
    """``YYYYMMDD`` with the year always four digits."""
    return f"{day.year:04d}{day.month:02d}{day.day:02d}"


@dataclass(frozen=True)
class Transaction:
    """A deposit or withdrawal recorded against one account.

    ``sequence`` is the 1-based position of this transaction among those
    recorded for the same account on the same date.
    """

    date: date
    account_id: str
    kind: TransactionKind
    amount: Decimal
    sequence: int

    @property
    def transaction_id(self) -> str:
        """Display id in ``YYYYMMDD-NN`` form."""
        return f"{compact_date(self.date)}-{self.sequence:02d}"

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affects the balance."""
        return self.kind.signed(self.amount)
