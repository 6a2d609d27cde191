"""Allow ``python -m devcmd``."""

import sys

from devcmd.cli.commands import main

sys.exit(main())
