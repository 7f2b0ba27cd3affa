"""Allow `python -m dhkeygen`."""

import sys

from dhkeygen.cli import main

sys.exit(main())
