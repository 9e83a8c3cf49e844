"""Statement and interest engine."""

from ledger_sim.engine.eod import project_eod_balances
from ledger_sim.engine.interest import AccrualPeriod, InterestAccrual, accrue_interest, split_periods
from ledger_sim.engine.statement import StatementBuilder, build_statement

__all__ = [
    "AccrualPeriod",
    "InterestAccrual",
    "StatementBuilder",
    "accrue_interest",
    "build_statement",
    "project_eod_balances",
    "split_periods",
]
