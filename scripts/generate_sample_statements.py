#!/usr/bin/env python3
"""Generate sample monthly statements for validation.

Fills an in-memory ledger with synthetic activity, then writes one JSON
file per account holding its statement for every month in the range.
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_sim.engine import StatementBuilder
from ledger_sim.generators import ActivityGenerator
from ledger_sim.logging import setup_logging
from ledger_sim.models import StatementMonth
from ledger_sim.serialization import to_dict
from ledger_sim.store import InterestRuleTable, LedgerStore


def months_between(start: date, end: date) -> list[StatementMonth]:
    """Months from ``start`` to ``end`` inclusive."""
    months = []
    current = StatementMonth.of(start)
    last = StatementMonth.of(end)
    while current <= last:
        months.append(current)
        if current.month == 12:
            current = StatementMonth(current.year + 1, 1)
        else:
            current = StatementMonth(current.year, current.month + 1)
    return months


def save_json(data: list, filename: str, output_dir: Path) -> None:
    """Save data to JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"Saved {len(data)} records to {filepath}")


def main() -> None:
    """Generate sample statements."""
    parser = argparse.ArgumentParser(description="Generate sample ledger statements")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--accounts", type=int, default=5, help="Number of accounts (default: 5)")
    parser.add_argument("--start", default="2023-01-01", help="First activity date (ISO)")
    parser.add_argument("--end", default="2023-06-30", help="Last activity date (ISO)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "local",
        help="Output directory (default: ./local)",
    )
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    args = parser.parse_args()

    setup_logging(args.log_level)
    start, end = date.fromisoformat(args.start), date.fromisoformat(args.end)
    args.output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("Generating Sample Statements")
    print("=" * 60)

    ledger = LedgerStore()
    rules = InterestRuleTable()
    generator = ActivityGenerator(seed=args.seed)
    account_ids = generator.populate(ledger, rules, start, end, num_accounts=args.accounts)

    builder = StatementBuilder(ledger, rules)
    months = months_between(start, end)
    for account_id in account_ids:
        statements = [to_dict(builder.build(account_id, month)) for month in months]
        save_json(statements, f"statements_{account_id}.json", args.output_dir)

    save_json([to_dict(rule) for rule in rules], "interest_rules.json", args.output_dir)

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for name, count in ledger.summary().items():
        print(f"{name + ':':18}{count}")
    print(f"{'rules:':18}{len(rules)}")
    print(f"\nAll files saved to: {args.output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
