"""Enumeration types for ledger entities."""

from decimal import Decimal
from enum import Enum

from ledger_sim.exceptions import InvalidFormatError


class TransactionKind(str, Enum):
    DEPOSIT = "D"
    WITHDRAWAL = "W"
    INTEREST = "I"

    @classmethod
    def from_code(cls, code: str) -> "TransactionKind":
        """Parse a one-letter type code, case-insensitively.

        Only deposits and withdrawals can be entered; interest lines are
        produced by the statement builder.
        """
        normalized = code.strip().upper()
        if normalized not in (cls.DEPOSIT.value, cls.WITHDRAWAL.value):
            raise InvalidFormatError(
                f"Invalid transaction type {code!r}. Use 'D' for deposit and 'W' for withdrawal."
            )
        return cls(normalized)

    def signed(self, amount: Decimal) -> Decimal:
        """Return the amount with the sign this kind applies to a balance."""
        if self is TransactionKind.WITHDRAWAL:
            return -amount
        return amount
