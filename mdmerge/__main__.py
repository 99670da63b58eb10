"""Allow ``python -m mdmerge``."""

import sys

from mdmerge.cli import main

sys.exit(main())
