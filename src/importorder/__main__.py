"""Allow `python -m importorder`."""

import sys

from importorder.presentation.cli import main

sys.exit(main())
