# =============================================================================
# mailrender Entry Point for `python -m mailrender`
# =============================================================================
# This is equivalent to running the 'mailrender' command after installation.
# =============================================================================

import sys

from mailrender.app import main

if __name__ == "__main__":
    sys.exit(main())
