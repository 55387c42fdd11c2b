"""Allow ``python -m charset_validator``."""

import sys

from charset_validator.cli.main import main

sys.exit(main())
