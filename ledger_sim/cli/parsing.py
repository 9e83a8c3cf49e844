"""Parsing of console command lines into validated inputs."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from ledger_sim.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    InvalidFormatError,
    InvalidRateError,
)
from ledger_sim.models import StatementMonth, TransactionKind

_DATE_RE = re.compile(r"^\d{8}$")
_MONTH_RE = re.compile(r"^\d{6}$")


@dataclass(frozen=True)
class TransactionInput:
    """A parsed ``<Date> <Account> <Type> <Amount>`` line."""

    date: date
    account_id: str
    kind: TransactionKind
    amount: Decimal


@dataclass(frozen=True)
class RuleInput:
    """A parsed ``<Date> <RuleId> <Rate in %>`` line."""

    date: date
    rule_id: str
    rate: Decimal


@dataclass(frozen=True)
class StatementRequest:
    """A parsed ``<Account> <Year><Month>`` line."""

    account_id: str
    month: StatementMonth


def parse_date(text: str) -> date:
    """Parse a ``YYYYMMDD`` date."""
    if not _DATE_RE.match(text):
        raise InvalidDateError(f"Invalid date {text!r}, expected YYYYMMDD")
    try:
        return datetime.strptime(text, "%Y%m%d").date()
    except ValueError:
        raise InvalidDateError(f"Invalid date {text!r}, expected YYYYMMDD") from None


def parse_month(text: str) -> StatementMonth:
    """Parse a ``YYYYMM`` month."""
    if not _MONTH_RE.match(text):
        raise InvalidDateError(f"Invalid month {text!r}, expected YYYYMM")
    year, month = int(text[:4]), int(text[4:])
    if not 1 <= month <= 12 or year < 1:
        raise InvalidDateError(f"Invalid month {text!r}, expected YYYYMM")
    return StatementMonth(year, month)


def _parse_decimal(text: str) -> Decimal | None:
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def parse_amount(text: str) -> Decimal:
    """Parse a positive amount with at most two decimal places."""
    value = _parse_decimal(text)
    if value is None or value <= 0:
        raise InvalidAmountError(f"Invalid amount {text!r}. Please enter a positive number.")
    if value.as_tuple().exponent < -2:
        raise InvalidAmountError(f"Invalid amount {text!r}. Up to two decimal places are allowed.")
    return value


def parse_rate(text: str) -> Decimal:
    """Parse an annual rate in percent, strictly between 0 and 100."""
    value = _parse_decimal(text)
    if value is None or not 0 < value < 100:
        raise InvalidRateError(f"Invalid rate {text!r}. Please enter a value between 0 and 100.")
    return value


def _split(line: str, expected: int, layout: str) -> list[str]:
    parts = line.split()
    if len(parts) != expected:
        raise InvalidFormatError(f"Invalid input format, expected {layout}")
    return parts


def parse_transaction(line: str) -> TransactionInput:
    """Parse ``<Date> <Account> <Type> <Amount>``."""
    date_text, account_id, kind_text, amount_text = _split(
        line, 4, "<Date> <Account> <Type> <Amount>"
    )
    return TransactionInput(
        date=parse_date(date_text),
        account_id=account_id,
        kind=TransactionKind.from_code(kind_text),
        amount=parse_amount(amount_text),
    )


def parse_rule(line: str) -> RuleInput:
    """Parse ``<Date> <RuleId> <Rate in %>``."""
    date_text, rule_id, rate_text = _split(line, 3, "<Date> <RuleId> <Rate in %>")
    return RuleInput(date=parse_date(date_text), rule_id=rule_id, rate=parse_rate(rate_text))


def parse_statement_request(line: str) -> StatementRequest:
    """Parse ``<Account> <Year><Month>``."""
    account_id, month_text = _split(line, 2, "<Account> <Year><Month>")
    return StatementRequest(account_id=account_id, month=parse_month(month_text))
