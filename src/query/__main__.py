"""Entry point for running the query runner as a module.

Allows running with: python -m src.query
"""

import sys

from src.query.cli import main

if __name__ == "__main__":
    sys.exit(main())
