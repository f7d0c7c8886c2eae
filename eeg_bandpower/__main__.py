"""
Main entry point for EEG Band Power package

This allows running the package with: python -m eeg_bandpower
"""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
