"""Per-account transaction ledger."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable

from ledger_sim.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidFormatError,
)
from ledger_sim.logging import get_logger
from ledger_sim.models import Transaction, TransactionKind

logger = get_logger(__name__)

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | str) -> Decimal:
    """Coerce a numeric input to ``Decimal`` without going through float."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidAmountError(f"Not a number: {value!r}") from None


def balance_as_of(transactions: Iterable[Transaction]) -> Decimal:
    """Fold transactions into a balance: deposits add, withdrawals subtract."""
    return sum((txn.signed_amount for txn in transactions), ZERO)


@dataclass
class LedgerStore:
    """In-memory store of append-only transaction histories keyed by account.

    Transactions are kept in the order they were recorded; the store never
    reorders them by date.
    """

    accounts: dict[str, list[Transaction]] = field(default_factory=dict)

    # (account_id, date) -> transactions recorded that day
    _daily_counts: dict[tuple[str, date], int] = field(default_factory=dict)

    def record(
        self,
        account_id: str,
        txn_date: date,
        kind: TransactionKind,
        amount: Decimal | int | str,
    ) -> Transaction:
        """Validate and append a transaction.

        Raises
        ------
        InvalidFormatError
            If the account id is empty or the kind is not D/W.
        InvalidAmountError
            If the amount is not a positive number.
        InsufficientFundsError
            If a withdrawal exceeds the current balance.
        """
        if not account_id or not account_id.strip():
            raise InvalidFormatError("Account id must not be empty")
        if kind not in (TransactionKind.DEPOSIT, TransactionKind.WITHDRAWAL):
            raise InvalidFormatError(f"Cannot record a {kind.name.lower()} transaction")

        value = to_decimal(amount)
        if not value.is_finite() or value <= ZERO:
            raise InvalidAmountError(f"Amount must be a positive number, got {amount}")

        history = self.accounts.get(account_id, [])
        if kind is TransactionKind.WITHDRAWAL:
            current = balance_as_of(history)
            if value > current:
                raise InsufficientFundsError(
                    f"Insufficient funds in {account_id}: balance {current}, withdrawal {value}"
                )

        key = (account_id, txn_date)
        sequence = self._daily_counts.get(key, 0) + 1
        transaction = Transaction(
            date=txn_date,
            account_id=account_id,
            kind=kind,
            amount=value,
            sequence=sequence,
        )

        self.accounts.setdefault(account_id, []).append(transaction)
        self._daily_counts[key] = sequence
        logger.debug(
            "Recorded %s %s %s for %s", transaction.transaction_id, kind.value, value, account_id
        )
        return transaction

    def has_account(self, account_id: str) -> bool:
        """Whether the account has at least one recorded transaction."""
        return bool(self.accounts.get(account_id))

    def transactions(self, account_id: str) -> list[Transaction]:
        """Get an account's transactions in recording order."""
        return list(self.accounts.get(account_id, []))

    def balance(self, account_id: str) -> Decimal:
        """Current balance of an account (0 for unknown accounts)."""
        return balance_as_of(self.accounts.get(account_id, []))

    def account_ids(self) -> list[str]:
        """Ids of all accounts with history, in first-seen order."""
        return list(self.accounts)

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "accounts": len(self.accounts),
            "transactions": sum(len(txns) for txns in self.accounts.values()),
        }
