"""Allow ``python -m rn_arch_gen``."""

import sys

from rn_arch_gen.cli import main

sys.exit(main())
