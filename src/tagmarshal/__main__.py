"""
Entry point for running tagmarshal as a module.

Allows running the CLI via:
    python -m tagmarshal data.yaml
"""

import sys

from tagmarshal.cli import main

if __name__ == "__main__":
    sys.exit(main())
