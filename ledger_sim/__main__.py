"""Allow ``python -m ledger_sim``."""

import sys

from ledger_sim.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
