"""Allow ``python -m prime_sequence``."""

import sys

from prime_sequence.cli import main

sys.exit(main())
