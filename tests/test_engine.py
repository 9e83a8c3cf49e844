"""Tests for EOD projection, interest accrual and statements."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

import pytest

from ledger_sim.config import InterestConfig
from ledger_sim.engine import (
    StatementBuilder,
    accrue_interest,
    build_statement,
    project_eod_balances,
    split_periods,
)
from ledger_sim.exceptions import AccountNotFoundError
from ledger_sim.models import EodBalances, StatementMonth, TransactionKind
from ledger_sim.store import InterestRuleTable, LedgerStore

D = TransactionKind.DEPOSIT
W = TransactionKind.WITHDRAWAL


def constant_balances(month: StatementMonth, balance: Decimal) -> EodBalances:
    return EodBalances(month=month, opening=balance, balances=(balance,) * month.num_days)


def reference_ledger() -> tuple[LedgerStore, InterestRuleTable]:
    """Activity and rules from the reference statement walkthrough."""
    ledger = LedgerStore()
    ledger.record("AC001", date(2023, 5, 5), D, Decimal("100.00"))
    ledger.record("AC001", date(2023, 6, 1), D, Decimal("150.00"))
    ledger.record("AC001", date(2023, 6, 26), W, Decimal("20.00"))
    ledger.record("AC001", date(2023, 6, 26), W, Decimal("100.00"))
    rules = InterestRuleTable()
    rules.upsert(date(2023, 1, 1), "RULE01", Decimal("1.95"))
    rules.upsert(date(2023, 5, 20), "RULE02", Decimal("1.90"))
    rules.upsert(date(2023, 6, 15), "RULE03", Decimal("2.20"))
    return ledger, rules


class TestProjectEodBalances:
    """Tests for project_eod_balances."""

    def test_carry_forward(self, june_ledger: LedgerStore, june: StatementMonth) -> None:
        eod = project_eod_balances(june_ledger.transactions("AC001"), june)

        assert len(eod) == 30
        assert eod.opening == Decimal("0")
        for day in range(1, 10):
            assert eod[date(2023, 6, day)] == Decimal("100.00")
        for day in range(10, 31):
            assert eod[date(2023, 6, day)] == Decimal("70.00")

    def test_opening_includes_prior_months(self) -> None:
        ledger, _ = reference_ledger()
        eod = project_eod_balances(ledger.transactions("AC001"), StatementMonth(2023, 6))

        assert eod.opening == Decimal("100.00")
        assert eod[date(2023, 6, 1)] == Decimal("250.00")
        assert eod[date(2023, 6, 25)] == Decimal("250.00")
        assert eod[date(2023, 6, 26)] == Decimal("130.00")
        assert eod.closing == Decimal("130.00")

    def test_month_before_first_transaction(self, june_ledger: LedgerStore) -> None:
        eod = project_eod_balances(june_ledger.transactions("AC001"), StatementMonth(2023, 5))

        assert set(eod.balances) == {Decimal("0")}

    def test_month_after_last_transaction(self, june_ledger: LedgerStore) -> None:
        eod = project_eod_balances(june_ledger.transactions("AC001"), StatementMonth(2023, 9))

        assert eod.opening == Decimal("70.00")
        assert set(eod.balances) == {Decimal("70.00")}

    def test_first_transaction_mid_month(self, ledger: LedgerStore, june: StatementMonth) -> None:
        ledger.record("AC001", date(2023, 6, 20), D, Decimal("10"))
        eod = project_eod_balances(ledger.transactions("AC001"), june)

        assert eod[date(2023, 6, 19)] == Decimal("0")
        assert eod[date(2023, 6, 20)] == Decimal("10")
        assert eod.closing == Decimal("10")

    def test_balance_returns_to_zero(self, ledger: LedgerStore, june: StatementMonth) -> None:
        """A legitimate zero balance carries forward like any other value."""
        ledger.record("AC001", date(2023, 6, 2), D, Decimal("10"))
        ledger.record("AC001", date(2023, 6, 5), W, Decimal("10"))
        eod = project_eod_balances(ledger.transactions("AC001"), june)

        assert eod[date(2023, 6, 4)] == Decimal("10")
        assert eod[date(2023, 6, 5)] == Decimal("0")
        assert eod.closing == Decimal("0")


class TestSplitPeriods:
    """Tests for split_periods."""

    def test_no_rules(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        assert split_periods(rules, june) == []

    def test_rules_only_after_month(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 7, 1), "RULE01", Decimal("5"))
        assert split_periods(rules, june) == []

    def test_rule_before_month_covers_whole_month(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 1, 1), "RULE01", Decimal("1.95"))
        rules.upsert(date(2023, 5, 20), "RULE02", Decimal("1.90"))

        assert split_periods(rules, june) == [(date(2023, 6, 1), date(2023, 6, 30), Decimal("1.90"))]

    def test_split_inside_month(self, june_rules: InterestRuleTable, june: StatementMonth) -> None:
        assert split_periods(june_rules, june) == [
            (date(2023, 6, 1), date(2023, 6, 14), Decimal("5.00")),
            (date(2023, 6, 15), date(2023, 6, 30), Decimal("6.00")),
        ]

    def test_first_rule_mid_month_starts_at_zero(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 6, 10), "RULE01", Decimal("3"))

        assert split_periods(rules, june) == [
            (date(2023, 6, 1), date(2023, 6, 9), Decimal("0")),
            (date(2023, 6, 10), date(2023, 6, 30), Decimal("3")),
        ]

    def test_rule_on_last_day(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 6, 30), "RULE01", Decimal("3"))
        rules.upsert(date(2023, 7, 1), "RULE02", Decimal("9"))

        assert split_periods(rules, june)[-1] == (date(2023, 6, 30), date(2023, 6, 30), Decimal("3"))

    def test_rule_on_earliest_date(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        """A rule dated 0001-01-01 only sets the opening rate."""
        rules.upsert(date(1, 1, 1), "R0", Decimal("5"))

        assert split_periods(rules, june) == [(date(2023, 6, 1), date(2023, 6, 30), Decimal("5"))]

    def test_rule_on_month_start(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 5, 1), "RULE01", Decimal("1"))
        rules.upsert(date(2023, 6, 1), "RULE02", Decimal("2"))

        assert split_periods(rules, june) == [(date(2023, 6, 1), date(2023, 6, 30), Decimal("2"))]


class TestAccrueInterest:
    """Tests for accrue_interest."""

    def test_two_rate_scenario(
        self, june_ledger: LedgerStore, june_rules: InterestRuleTable, june: StatementMonth
    ) -> None:
        eod = project_eod_balances(june_ledger.transactions("AC001"), june)
        accrual = accrue_interest(eod, june_rules)

        expected_total = (
            Decimal(100) * 5 * 9 + Decimal(70) * 5 * 5 + Decimal(70) * 6 * 16
        ) / Decimal(100)
        assert accrual.total == expected_total
        assert accrual.amount == (expected_total / 365).quantize(Decimal("0.01"))
        assert accrual.amount == Decimal("0.36")
        assert [p.days for p in accrual.periods] == [14, 16]
        assert accrual.periods[0].weighted_sum == Decimal("62.5")
        assert accrual.periods[1].weighted_sum == Decimal("67.2")

    def test_no_rules_no_interest(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        accrual = accrue_interest(constant_balances(june, Decimal("1000")), rules)

        assert accrual.amount == Decimal("0")
        assert accrual.periods == ()

    def test_future_rules_ignored(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        rules.upsert(date(2023, 7, 1), "RULE01", Decimal("50"))
        accrual = accrue_interest(constant_balances(june, Decimal("1000")), rules)

        assert accrual.amount == Decimal("0")

    def test_linear_in_balance(self, june_rules: InterestRuleTable, june: StatementMonth) -> None:
        """Doubling a constant balance doubles each period's contribution."""
        single = accrue_interest(constant_balances(june, Decimal("500")), june_rules)
        double = accrue_interest(constant_balances(june, Decimal("1000")), june_rules)

        for one, two in zip(single.periods, double.periods):
            assert two.weighted_sum == one.weighted_sum * 2
        assert double.total == single.total * 2

    def test_bankers_rounding_by_default(self, rules: InterestRuleTable, june: StatementMonth) -> None:
        """365 at 12.5% for one day is exactly 0.125 of interest."""
        rules.upsert(date(2023, 6, 30), "RULE01", Decimal("12.5"))
        eod = constant_balances(june, Decimal("365"))

        assert accrue_interest(eod, rules).amount == Decimal("0.12")
        assert accrue_interest(eod, rules, rounding=ROUND_HALF_UP).amount == Decimal("0.13")

    def test_day_count(self, june_rules: InterestRuleTable, june: StatementMonth) -> None:
        eod = constant_balances(june, Decimal("36000"))
        accrual = accrue_interest(eod, june_rules, day_count=360)

        # 36000 * (5% * 14 + 6% * 16) / 360
        assert accrual.amount == Decimal("166.00")


class TestStatementBuilder:
    """Tests for StatementBuilder."""

    def test_reference_statement(self) -> None:
        ledger, rules = reference_ledger()
        statement = StatementBuilder(ledger, rules).build("AC001", StatementMonth(2023, 6))

        rows = [(line.date, line.transaction_id, line.kind, line.amount, line.balance) for line in statement.lines]
        assert rows == [
            (date(2023, 6, 1), "20230601-01", D, Decimal("150.00"), Decimal("250.00")),
            (date(2023, 6, 26), "20230626-01", W, Decimal("20.00"), Decimal("230.00")),
            (date(2023, 6, 26), "20230626-02", W, Decimal("100.00"), Decimal("130.00")),
            (date(2023, 6, 30), "", TransactionKind.INTEREST, Decimal("0.39"), Decimal("130.39")),
        ]
        assert statement.opening_balance == Decimal("100.00")
        assert statement.interest == Decimal("0.39")
        assert statement.closing_balance == Decimal("130.39")

    def test_eod_balance_on_lines(self) -> None:
        """Same-day lines share the day's closing balance."""
        ledger, rules = reference_ledger()
        statement = build_statement(ledger, rules, "AC001", StatementMonth(2023, 6))

        assert [line.eod_balance for line in statement.transaction_lines] == [
            Decimal("250.00"),
            Decimal("130.00"),
            Decimal("130.00"),
        ]

    def test_two_rate_scenario(
        self, june_ledger: LedgerStore, june_rules: InterestRuleTable, june: StatementMonth
    ) -> None:
        statement = build_statement(june_ledger, june_rules, "AC001", june)

        assert statement.interest == Decimal("0.36")
        assert statement.closing_balance == june_ledger.balance("AC001") + statement.interest
        assert statement.lines[-1].kind is TransactionKind.INTEREST
        assert statement.lines[-1].date == date(2023, 6, 30)

    def test_unknown_account(self, ledger: LedgerStore, rules: InterestRuleTable, june: StatementMonth) -> None:
        with pytest.raises(AccountNotFoundError, match="Account AC404 not found"):
            build_statement(ledger, rules, "AC404", june)

    def test_rule_on_earliest_date(self, ledger: LedgerStore, rules: InterestRuleTable, june: StatementMonth) -> None:
        ledger.record("AC001", date(2023, 6, 1), D, Decimal("100"))
        rules.upsert(date(1, 1, 1), "R0", Decimal("5"))

        statement = build_statement(ledger, rules, "AC001", june)

        # 100 * 5% * 30 days / 365
        assert statement.interest == Decimal("0.41")
        assert statement.closing_balance == Decimal("100.41")

    def test_activity_only_after_month(
        self, ledger: LedgerStore, june_rules: InterestRuleTable, june: StatementMonth
    ) -> None:
        """All EOD values are zero, so no interest line is added."""
        ledger.record("AC001", date(2023, 7, 5), D, Decimal("100"))
        statement = build_statement(ledger, june_rules, "AC001", june)

        assert statement.lines == []
        assert statement.interest == Decimal("0")
        assert statement.closing_balance == Decimal("0")

    def test_no_interest_line_without_rules(
        self, june_ledger: LedgerStore, rules: InterestRuleTable, june: StatementMonth
    ) -> None:
        statement = build_statement(june_ledger, rules, "AC001", june)

        assert all(line.kind is not TransactionKind.INTEREST for line in statement.lines)
        assert statement.closing_balance == Decimal("70.00")

    def test_config_rounding(self, ledger: LedgerStore, rules: InterestRuleTable, june: StatementMonth) -> None:
        ledger.record("AC001", date(2023, 5, 1), D, Decimal("365"))
        rules.upsert(date(2023, 6, 30), "RULE01", Decimal("12.5"))

        half_even = build_statement(ledger, rules, "AC001", june)
        half_up = build_statement(ledger, rules, "AC001", june, InterestConfig(rounding="HALF_UP"))

        assert half_even.interest == Decimal("0.12")
        assert half_up.interest == Decimal("0.13")

    def test_lines_keep_recording_order(self, ledger: LedgerStore, rules: InterestRuleTable, june: StatementMonth) -> None:
        ledger.record("AC001", date(2023, 6, 20), D, Decimal("40"))
        ledger.record("AC001", date(2023, 6, 3), D, Decimal("60"))
        ledger.record("AC001", date(2023, 7, 1), D, Decimal("5"))
        statement = build_statement(ledger, rules, "AC001", june)

        assert [line.date for line in statement.lines] == [date(2023, 6, 20), date(2023, 6, 3)]
        assert statement.closing_balance == Decimal("100")
