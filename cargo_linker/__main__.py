"""Allow ``python -m cargo_linker``."""

import sys

from cargo_linker.cli.commands import main

sys.exit(main())
