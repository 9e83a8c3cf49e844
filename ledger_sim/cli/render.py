"""Text and JSON rendering of ledger outputs."""

import json
from decimal import Decimal
from typing import Any, Iterable, Sequence

from ledger_sim.models import InterestRule, Statement, Transaction, compact_date
from ledger_sim.serialization import serialize_value


def format_amount(value: Decimal) -> str:
    return f"{value:.2f}"


def render_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    """Render a pipe-delimited table with columns padded to fit."""
    rows = [list(row) for row in rows]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)) + " |"

    return [line(headers)] + [line(row) for row in rows]


def render_transactions(account_id: str, transactions: Sequence[Transaction]) -> list[str]:
    """Account header followed by all transactions."""
    rows = [
        (compact_date(t.date), t.transaction_id, t.kind.value, format_amount(t.amount))
        for t in transactions
    ]
    return [f"Account: {account_id}"] + render_table(("Date", "Txn Id", "Type", "Amount"), rows)


def render_rules(rules: Sequence[InterestRule]) -> list[str]:
    rows = [(compact_date(r.effective_date), r.rule_id, format_amount(r.rate)) for r in rules]
    return ["Interest rules:"] + render_table(("Date", "RuleId", "Rate (%)"), rows)


def render_statement(statement: Statement) -> list[str]:
    rows = [
        (
            compact_date(line.date),
            line.transaction_id,
            line.kind.value,
            format_amount(line.amount),
            format_amount(line.balance),
        )
        for line in statement.lines
    ]
    return [f"Account: {statement.account_id}"] + render_table(
        ("Date", "Txn Id", "Type", "Amount", "Balance"), rows
    )


def render_json(obj: Any) -> list[str]:
    """Serialize a dataclass (or list of them) as indented JSON lines."""
    return json.dumps(serialize_value(obj), indent=2).splitlines()
