"""Allow `python -m exactnum`."""

import sys

from exactnum.cli import main

sys.exit(main())
