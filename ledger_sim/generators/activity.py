"""Synthetic deposits, withdrawals and interest rules."""

import random
from datetime import date, timedelta
from decimal import ROUND_DOWN, Decimal
from typing import Iterator

from ledger_sim.generators.base import BaseGenerator
from ledger_sim.logging import get_logger
from ledger_sim.models import InterestRule, Transaction, TransactionKind
from ledger_sim.store import InterestRuleTable, LedgerStore

logger = get_logger(__name__)

CENTS = Decimal("0.01")


class ActivityGenerator(BaseGenerator):
    """Generate valid account activity that never overdraws.

    Amounts follow a Pareto distribution (many small, few large), and
    withdrawals take a random share of the balance available at the time.
    """

    WITHDRAWAL_PROBABILITY = 0.4
    MAX_AMOUNT = 50000.0

    def account_id(self) -> str:
        """Generate a unique account id such as ``AC042``."""
        return self.fake.unique.bothify("AC###")

    def _amount(self) -> Decimal:
        amount = min(random.paretovariate(1.5) * 50, self.MAX_AMOUNT)
        return Decimal(f"{amount:.2f}")

    def generate_for_account(
        self,
        ledger: LedgerStore,
        account_id: str,
        start_date: date,
        end_date: date,
        avg_transactions_per_day: float = 0.5,
    ) -> Iterator[Transaction]:
        """Record transactions for an account day by day, yielding each one.

        Parameters
        ----------
        ledger : LedgerStore
            Store the transactions are recorded into.
        account_id : str
            Account to record against.
        start_date, end_date : date
            Inclusive date range.
        avg_transactions_per_day : float
            Mean of the exponential draw for the daily count.
        """
        current_date = start_date
        while current_date <= end_date:
            num_transactions = max(0, int(random.expovariate(1 / avg_transactions_per_day)))

            for _ in range(num_transactions):
                balance = ledger.balance(account_id)
                if balance > CENTS and random.random() < self.WITHDRAWAL_PROBABILITY:
                    share = Decimal(str(round(random.uniform(0.05, 0.9), 4)))
                    amount = max((balance * share).quantize(CENTS, rounding=ROUND_DOWN), CENTS)
                    kind = TransactionKind.WITHDRAWAL
                else:
                    amount = self._amount()
                    kind = TransactionKind.DEPOSIT
                yield ledger.record(account_id, current_date, kind, amount)

            current_date += timedelta(days=1)

    def generate_rules(
        self,
        rules: InterestRuleTable,
        start_date: date,
        end_date: date,
        count: int = 3,
    ) -> list[InterestRule]:
        """Upsert ``count`` random rules effective between the given dates."""
        created = []
        for i in range(count):
            effective = self.fake.date_between_dates(date_start=start_date, date_end=end_date)
            rate = Decimal(str(round(random.uniform(0.5, 8.0), 2)))
            created.append(rules.upsert(effective, f"RULE{i + 1:02d}", rate))
        logger.debug("Generated %d interest rules, table now has %d", count, len(rules))
        return created

    def populate(
        self,
        ledger: LedgerStore,
        rules: InterestRuleTable,
        start_date: date,
        end_date: date,
        num_accounts: int = 3,
        num_rules: int = 3,
    ) -> list[str]:
        """Fill a ledger and rule table with activity.

        Returns the ids of generated accounts that received at least one
        transaction.
        """
        account_ids = [self.account_id() for _ in range(num_accounts)]
        for account_id in account_ids:
            list(self.generate_for_account(ledger, account_id, start_date, end_date))
        self.generate_rules(rules, start_date, end_date, num_rules)
        logger.info("Populated %s", ledger.summary())
        return [account_id for account_id in account_ids if ledger.has_account(account_id)]
