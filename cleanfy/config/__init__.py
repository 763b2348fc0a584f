"""Module: cleanfy.config

Author: Michael Economou
Date: 2026-09-14

Configuration package for cleanfy.

This package organizes configuration into logical modules:
- app: Application info, CLI defaults, logging, parallel preview
- naming: Character classes, fold placeholder, reserved device names

All settings are re-exported from this module:
    from cleanfy.config import APP_NAME, RESERVED_NAMES
"""

from cleanfy.config.app import *  # noqa: F401, F403
from cleanfy.config.naming import *  # noqa: F401, F403
