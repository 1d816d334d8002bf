"""
Entry point: python -m lab_ciphers
"""

import sys

from lab_ciphers.cli import main

if __name__ == "__main__":
    sys.exit(main())
