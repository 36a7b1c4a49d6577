"""Allow running git-tidy with `python -m gittidy`."""

import sys

from gittidy.cli import main

sys.exit(main())
