"""Monthly statement assembly."""


from ledger_sim.config import InterestConfig
from ledger_sim.engine.eod import project_eod_balances
from ledger_sim.engine.interest import accrue_interest
from ledger_sim.exceptions import AccountNotFoundError
from ledger_sim.logging import get_logger
from ledger_sim.models import Statement, StatementLine, StatementMonth, TransactionKind
from ledger_sim.store import InterestRuleTable, LedgerStore
from ledger_sim.store.ledger import ZERO

logger = get_logger(__name__)


class StatementBuilder:
    """Build monthly statements from a ledger and an interest rule table."""

    def __init__(
        self,
        ledger: LedgerStore,
        rules: InterestRuleTable,
        config: InterestConfig | None = None,
    ) -> None:
        self.ledger = ledger
        self.rules = rules
        self.config = config or InterestConfig()

    def build(self, account_id: str, month: StatementMonth) -> Statement:
        """Build the statement of ``account_id`` for ``month``.

        Raises
        ------
        AccountNotFoundError
            If the account has no recorded transactions.
        """
        if not self.ledger.has_account(account_id):
            raise AccountNotFoundError(f"Account {account_id} not found")

        history = self.ledger.transactions(account_id)
        eod = project_eod_balances(history, month)
        accrual = accrue_interest(
            eod,
            self.rules,
            day_count=self.config.day_count,
            rounding=self.config.rounding_mode,
        )

        lines: list[StatementLine] = []
        running = eod.opening
        for txn in history:
            if txn.date not in month:
                continue
            running += txn.signed_amount
            lines.append(
                StatementLine(
                    date=txn.date,
                    transaction_id=txn.transaction_id,
                    kind=txn.kind,
                    amount=txn.amount,
                    balance=running,
                    eod_balance=eod[txn.date],
                )
            )

        closing = eod.closing + accrual.amount
        if accrual.amount > ZERO:
            lines.append(
                StatementLine(
                    date=month.last_day,
                    transaction_id="",
                    kind=TransactionKind.INTEREST,
                    amount=accrual.amount,
                    balance=closing,
                    eod_balance=closing,
                )
            )

        logger.info(
            "Built statement for %s %s: %d lines, interest=%s, closing=%s",
            account_id,
            month,
            len(lines),
            accrual.amount,
            closing,
        )
        return Statement(
            account_id=account_id,
            month=month,
            opening_balance=eod.opening,
            interest=accrual.amount,
            closing_balance=closing,
            lines=lines,
        )


def build_statement(
    ledger: LedgerStore,
    rules: InterestRuleTable,
    account_id: str,
    month: StatementMonth,
    config: InterestConfig | None = None,
) -> Statement:
    """Shortcut for ``StatementBuilder(ledger, rules, config).build(...)``."""
    return StatementBuilder(ledger, rules, config).build(account_id, month)
