"""Allow running as `python -m emission_testing`."""

import sys

from .app.main import main

sys.exit(main())
