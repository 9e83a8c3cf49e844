"""Effective-dated interest rule table."""

import bisect
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterator

from ledger_sim.exceptions import InvalidAmountError, InvalidFormatError, InvalidRateError
from ledger_sim.logging import get_logger
from ledger_sim.models import InterestRule
from ledger_sim.store.ledger import to_decimal

logger = get_logger(__name__)

MIN_RATE = Decimal("0")
MAX_RATE = Decimal("100")


@dataclass
class InterestRuleTable:
    """Interest rules kept sorted by effective date, at most one per date.

    Viewed chronologically the table is a step function: the rate on a day
    is the rate of the latest rule effective on or before it, or 0.
    """

    _rules: list[InterestRule] = field(default_factory=list)

    def upsert(self, effective_date: date, rule_id: str, rate: Decimal | int | str) -> InterestRule:
        """Insert a rule, replacing any rule with the same effective date.

        Raises
        ------
        InvalidFormatError
            If the rule id is empty.
        InvalidRateError
            If the rate is not strictly between 0 and 100.
        """
        if not rule_id or not rule_id.strip():
            raise InvalidFormatError("Rule id must not be empty")
        try:
            value = to_decimal(rate)
        except InvalidAmountError:
            raise InvalidRateError(f"Rate must be a number, got {rate!r}") from None
        if not value.is_finite() or not MIN_RATE < value < MAX_RATE:
            raise InvalidRateError(f"Rate must be between 0 and 100 (exclusive), got {rate}")

        rule = InterestRule(effective_date=effective_date, rule_id=rule_id, rate=value)
        dates = [r.effective_date for r in self._rules]
        idx = bisect.bisect_left(dates, effective_date)
        if idx < len(self._rules) and self._rules[idx].effective_date == effective_date:
            logger.debug("Replacing rule %s effective %s", self._rules[idx].rule_id, effective_date)
            self._rules[idx] = rule
        else:
            self._rules.insert(idx, rule)
        logger.debug("Rule %s at %s%% effective %s", rule_id, value, effective_date)
        return rule

    def rules(self) -> list[InterestRule]:
        """All rules, ascending by effective date."""
        return list(self._rules)

    def rules_effective_on_or_before(self, day: date) -> list[InterestRule]:
        """Rules with effective date <= ``day``, ascending."""
        dates = [r.effective_date for r in self._rules]
        return self._rules[: bisect.bisect_right(dates, day)]

    def rate_on(self, day: date) -> Decimal:
        """Annual rate in percent in effect on ``day`` (0 if no rule applies)."""
        applicable = self.rules_effective_on_or_before(day)
        return applicable[-1].rate if applicable else MIN_RATE

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[InterestRule]:
        return iter(list(self._rules))
