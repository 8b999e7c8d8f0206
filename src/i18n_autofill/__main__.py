"""
Entry point for module execution (``python -m i18n_autofill``).

This module delegates execution to the CLI handler in ``i18n_autofill.cli.__main__``.
"""

import sys
from i18n_autofill.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
