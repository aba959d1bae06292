"""Allow ``python -m colocale``."""

import sys

from colocale.cli import main

sys.exit(main())
