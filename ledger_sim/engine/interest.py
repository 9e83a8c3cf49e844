"""Monthly interest accrual over end-of-day balances.

Interest for a month is simple daily interest on each day's closing
balance::

    sum(EOD(d) * rate(d) / 100 for d in month) / day_count

where ``rate(d)`` is the annual rate of the latest rule effective on or
before ``d``. The month is split into sub-periods at each rule change so
that the rate is constant within a sub-period. The total is rounded once,
to cents.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_EVEN, Decimal

from ledger_sim.logging import get_logger
from ledger_sim.models import EodBalances, StatementMonth
from ledger_sim.store.ledger import ZERO
from ledger_sim.store.rules import InterestRuleTable

logger = get_logger(__name__)

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class AccrualPeriod:
    """A run of days within the month sharing one annual rate."""

    start: date
    end: date
    rate: Decimal
    weighted_sum: Decimal  # sum of EOD balance * rate / 100 over the period

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class InterestAccrual:
    """Result of accruing interest for one month."""

    month: StatementMonth
    periods: tuple[AccrualPeriod, ...]
    total: Decimal  # unrounded sum of period contributions, before day-count division
    amount: Decimal  # rounded monthly interest


def split_periods(rules: InterestRuleTable, month: StatementMonth) -> list[tuple[date, date, Decimal]]:
    """Partition ``month`` into ``(start, end, rate)`` runs at rate changes.

    Rules effective after the month's last day are ignored. Returns an empty
    list when no rule is effective on or before the last day.
    """
    applicable = rules.rules_effective_on_or_before(month.last_day)
    if not applicable:
        return []

    first_day = month.first_day
    periods: list[tuple[date, date, Decimal]] = []
    current_rate = ZERO
    period_start = first_day
    for rule in applicable:
        # Rules dated on or before the current start only change the opening rate
        if rule.effective_date > period_start:
            periods.append((period_start, rule.effective_date - timedelta(days=1), current_rate))
        current_rate = rule.rate
        period_start = max(rule.effective_date, first_day)
    periods.append((period_start, month.last_day, current_rate))
    return periods


def accrue_interest(
    eod: EodBalances,
    rules: InterestRuleTable,
    *,
    day_count: int = 365,
    rounding: str = ROUND_HALF_EVEN,
) -> InterestAccrual:
    """Accrue one month of interest over end-of-day balances.

    Parameters
    ----------
    eod : EodBalances
        End-of-day balances for the month.
    rules : InterestRuleTable
        Full rule table; only rules effective by month end are used.
    day_count : int
        Days per year used to turn annual rates into daily ones.
    rounding : str
        ``decimal`` rounding mode applied once to the final amount.

    Returns
    -------
    InterestAccrual
        Per-period breakdown and the rounded amount.
    """
    month = eod.month
    periods: list[AccrualPeriod] = []
    total = ZERO
    for start, end, rate in split_periods(rules, month):
        weighted = sum((balance * rate / HUNDRED for balance in eod.between(start, end)), ZERO)
        periods.append(AccrualPeriod(start=start, end=end, rate=rate, weighted_sum=weighted))
        total += weighted

    amount = (total / Decimal(day_count)).quantize(CENTS, rounding=rounding)
    logger.debug("Accrued %s interest for %s over %d periods", amount, month, len(periods))
    return InterestAccrual(month=month, periods=tuple(periods), total=total, amount=amount)
