"""Allow `python -m seedport`."""

import sys

from seedport.cli import main

sys.exit(main())
