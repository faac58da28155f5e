"""Allow ``python -m heavyrmsd``."""

import sys

from .presentation.cli.compute_rmsd import main

sys.exit(main())
