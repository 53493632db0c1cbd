"""Run the infoquant calculators from a source checkout.

Installed copies get the ``infoquant`` console script (see ``pyproject.toml``);
from the repository root the same subcommands are available as:

  python cli.py info 0.5 0.25
  python cli.py entropy 0.5 0.25 0.25 --unit nat
  python cli.py plot information --output curve.png

"""

from __future__ import annotations

import sys

from infoquant.cli import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
