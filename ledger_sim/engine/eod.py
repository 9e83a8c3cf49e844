"""End-of-day balance projection."""

from decimal import Decimal
from typing import Sequence

from ledger_sim.logging import get_logger
from ledger_sim.models import EodBalances, StatementMonth, Transaction
from ledger_sim.store.ledger import ZERO, balance_as_of

logger = get_logger(__name__)


def project_eod_balances(transactions: Sequence[Transaction], month: StatementMonth) -> EodBalances:
    """Compute the balance at the end of every day of ``month``.

    The opening balance folds every transaction dated before the month.
    Days without transactions carry the previous day's balance forward, so
    the result has a value for every day, including leading zero days of an
    account opened mid-month or later.

    Parameters
    ----------
    transactions : Sequence[Transaction]
        One account's history in recording order.
    month : StatementMonth
        Month to project.

    Returns
    -------
    EodBalances
        Dense per-day balances.
    """
    first_day = month.first_day
    opening = balance_as_of(txn for txn in transactions if txn.date < first_day)

    # Net movement per day offset; same-day transactions apply in recording order
    movements: list[Decimal] = [ZERO] * month.num_days
    for txn in transactions:
        if txn.date in month:
            movements[txn.date.day - 1] += txn.signed_amount

    balances: list[Decimal] = []
    running = opening
    for movement in movements:
        running += movement
        balances.append(running)

    logger.debug(
        "Projected %d EOD balances for %s: opening=%s closing=%s",
        len(balances),
        month,
        opening,
        running,
    )
    return EodBalances(month=month, opening=opening, balances=tuple(balances))
