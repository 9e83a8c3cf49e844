"""In-memory stores for transactions and interest rules."""

from ledger_sim.store.ledger import LedgerStore, balance_as_of
from ledger_sim.store.rules import InterestRuleTable

__all__ = ["InterestRuleTable", "LedgerStore", "balance_as_of"]
