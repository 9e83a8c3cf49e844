"""In-memory bank ledger with monthly interest statements."""

from ledger_sim.config import LedgerConfig
from ledger_sim.engine import StatementBuilder, accrue_interest, build_statement, project_eod_balances
from ledger_sim.models import InterestRule, Statement, StatementMonth, Transaction, TransactionKind
from ledger_sim.store import InterestRuleTable, LedgerStore

__version__ = "0.1.0"

__all__ = [
    "InterestRule",
    "InterestRuleTable",
    "LedgerConfig",
    "LedgerStore",
    "Statement",
    "StatementBuilder",
    "StatementMonth",
    "Transaction",
    "TransactionKind",
    "accrue_interest",
    "build_statement",
    "project_eod_balances",
]
