"""Main entry point for the WBS Schedule Engine."""

import sys

from wbs_engine.cli import main


if __name__ == "__main__":
    sys.exit(main())
