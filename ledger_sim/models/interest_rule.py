"""Interest rule model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class InterestRule:
    """Annual interest rate (in percent) effective from a given date."""

    effective_date: date
    rule_id: str
    rate: Decimal
