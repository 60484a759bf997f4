"""Allow ``python -m guideplan``."""

import sys

from guideplan.cli import main

if __name__ == "__main__":
    sys.exit(main())
