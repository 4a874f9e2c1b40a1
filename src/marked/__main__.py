"""Allow ``python -m marked``."""

import sys

from marked.cli import main

sys.exit(main())
