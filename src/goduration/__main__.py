"""Allow ``python -m goduration``."""

import sys

from goduration.cli import main

sys.exit(main())
