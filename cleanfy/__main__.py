#!/usr/bin/env python3
"""
Module: cleanfy.__main__

This module allows the cleanfy package to be executed as a module using:
    python -m cleanfy
"""

import sys

from cleanfy.main import main

if __name__ == "__main__":
    sys.exit(main())
