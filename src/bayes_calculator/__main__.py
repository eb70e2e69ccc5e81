"""Allow ``python -m bayes_calculator``."""

import sys

from bayes_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())
