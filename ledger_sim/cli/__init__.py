"""Console front end: parsing, rendering and the menu loop."""

from ledger_sim.cli.app import LedgerApp
from ledger_sim.cli.main import main

__all__ = ["LedgerApp", "main"]
