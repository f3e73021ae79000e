"""Allow ``python -m tankvent``."""
import sys

from tankvent.cli import main

if __name__ == "__main__":
    sys.exit(main())
