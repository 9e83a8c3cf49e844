"""Interactive menu loop for the ledger simulator."""

from typing import Callable

from ledger_sim.cli.parsing import parse_rule, parse_statement_request, parse_transaction
from ledger_sim.cli.render import (
    render_json,
    render_rules,
    render_statement,
    render_transactions,
)
from ledger_sim.config import LedgerConfig
from ledger_sim.engine import StatementBuilder
from ledger_sim.exceptions import LedgerError
from ledger_sim.logging import get_logger
from ledger_sim.serialization import to_dict
from ledger_sim.store import InterestRuleTable, LedgerStore

logger = get_logger(__name__)

MENU = (
    "[T] Input transactions",
    "[I] Define interest rules",
    "[P] Print statement",
    "[Q] Quit",
)


class LedgerApp:
    """Console front end driving the ledger, rule table and statement builder.

    ``input_fn`` and ``output_fn`` default to ``input`` and ``print`` and can
    be replaced to script a session.
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        ledger: LedgerStore | None = None,
        rules: InterestRuleTable | None = None,
        input_fn: Callable[[], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.ledger = ledger if ledger is not None else LedgerStore()
        self.rules = rules if rules is not None else InterestRuleTable()
        self.statements = StatementBuilder(self.ledger, self.rules, self.config.interest)
        self._input = input_fn or input
        self._output = output_fn or print

    @property
    def json_output(self) -> bool:
        return self.config.display.output_format == "json"

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self._output(line)

    def _read(self) -> str | None:
        """Read one stripped line; None at end of input."""
        try:
            return self._input().strip()
        except EOFError:
            return None

    def _reject(self, what: str, line: str, exc: LedgerError) -> None:
        logger.warning("Rejected %s %r: %s", what, line, exc, extra={"error": type(exc).__name__})
        self._output(str(exc))

    def run(self) -> None:
        """Run the menu loop until the user quits or input ends."""
        self._output(f"Welcome to {self.config.display.bank_name}! What would you like to do?")
        handlers = {
            "t": self.input_transactions,
            "i": self.define_interest_rules,
            "p": self.print_statement,
        }
        while True:
            self._emit(list(MENU))
            action = self._read()
            if action is None or action.lower() == "q":
                self._output(
                    f"Thank you for banking with {self.config.display.bank_name}.\nHave a nice day!"
                )
                return
            handler = handlers.get(action.lower())
            if handler is None:
                self._output("Invalid input, please try again.")
                continue
            handler()
            self._output("Is there anything else you'd like to do?")

    def input_transactions(self) -> None:
        """Accept transaction lines until a blank line."""
        while True:
            self._output("Please enter transaction details in <Date> <Account> <Type> <Amount> format")
            self._output("(or enter blank to go back to main menu):")
            line = self._read()
            if not line:
                return
            try:
                parsed = parse_transaction(line)
                self.ledger.record(parsed.account_id, parsed.date, parsed.kind, parsed.amount)
            except LedgerError as exc:
                self._reject("transaction", line, exc)
                continue

            history = self.ledger.transactions(parsed.account_id)
            if self.json_output:
                self._emit(
                    render_json([{**to_dict(t), "transaction_id": t.transaction_id} for t in history])
                )
            else:
                self._emit(render_transactions(parsed.account_id, history))

    def define_interest_rules(self) -> None:
        """Accept interest rule lines until a blank line."""
        while True:
            self._output("Please enter interest rules details in <Date> <RuleId> <Rate in %> format")
            self._output("(or enter blank to go back to main menu):")
            line = self._read()
            if not line:
                return
            try:
                parsed = parse_rule(line)
                self.rules.upsert(parsed.date, parsed.rule_id, parsed.rate)
            except LedgerError as exc:
                self._reject("interest rule", line, exc)
                continue

            if self.json_output:
                self._emit(render_json(self.rules.rules()))
            else:
                self._emit(render_rules(self.rules.rules()))

    def print_statement(self) -> None:
        """Read one statement request and print the statement."""
        self._output("Please enter account and month to generate the statement <Account> <Year><Month>")
        self._output("(or enter blank to go back to main menu):")
        line = self._read()
        if not line:
            return
        try:
            request = parse_statement_request(line)
            statement = self.statements.build(request.account_id, request.month)
        except LedgerError as exc:
            self._reject("statement request", line, exc)
            return

        if self.json_output:
            self._emit(render_json(statement))
        else:
            self._emit(render_statement(statement))
