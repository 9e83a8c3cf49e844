"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from ledger_sim.models import StatementMonth, TransactionKind
from ledger_sim.store import InterestRuleTable, LedgerStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_id() -> str:
    """Sample account ID."""
    return "AC001"


@pytest.fixture
def june() -> StatementMonth:
    """June 2023 statement month."""
    return StatementMonth(2023, 6)


@pytest.fixture
def ledger() -> LedgerStore:
    """Create a fresh ledger for each test."""
    return LedgerStore()


@pytest.fixture
def rules() -> InterestRuleTable:
    """Create a fresh rule table for each test."""
    return InterestRuleTable()


@pytest.fixture
def june_ledger(ledger: LedgerStore, sample_account_id: str) -> LedgerStore:
    """Deposit 100.00 on June 1st, withdraw 30.00 on June 10th."""
    ledger.record(sample_account_id, date(2023, 6, 1), TransactionKind.DEPOSIT, Decimal("100.00"))
    ledger.record(sample_account_id, date(2023, 6, 10), TransactionKind.WITHDRAWAL, Decimal("30.00"))
    return ledger


@pytest.fixture
def june_rules(rules: InterestRuleTable) -> InterestRuleTable:
    """5.00% from June 1st, 6.00% from June 15th."""
    rules.upsert(date(2023, 6, 1), "RULE01", Decimal("5.00"))
    rules.upsert(date(2023, 6, 15), "RULE02", Decimal("6.00"))
    return rules
