"""Allow running the converter with ``python -m unc_token``."""

import sys

from unc_token.cli import main

sys.exit(main())
