"""Domain models for the ledger."""

from ledger_sim.models.balances import EodBalances
from ledger_sim.models.enums import TransactionKind
from ledger_sim.models.interest_rule import InterestRule
from ledger_sim.models.period import StatementMonth
from ledger_sim.models.statement import Statement, StatementLine
from ledger_sim.models.transaction import Transaction, compact_date

__all__ = [
    "EodBalances",
    "InterestRule",
    "Statement",
    "StatementLine",
    "StatementMonth",
    "Transaction",
    "TransactionKind",
    "compact_date",
]
