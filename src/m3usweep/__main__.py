"""Allow ``python -m m3usweep``."""

import sys

from m3usweep.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
