"""Module: cleanfy.config.app

Author: Michael Economou
Date: 2026-09-14

Application-level configuration: app info, CLI defaults, logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "cleanfy"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Normalize file and directory names to portable, POSIX-safe ASCII"

# =====================================
# TRANSFORM DEFAULTS
# =====================================

DEFAULT_CASE_MODE = "none"  # none | lower | upper | title
DEFAULT_DATE_MODE = "none"  # none | mtime | now
DEFAULT_DATE_STYLE = "iso"  # iso | compact | month | short | withtime
DEFAULT_DELIMITER = "_"  # Between date prefix and name

# =====================================
# RENAME BEHAVIOUR DEFAULTS
# =====================================

DEFAULT_DRY_RUN = True  # Preview only unless --do is given
DEFAULT_UNIQUE = True  # Append _2, _3, ... when the target exists
DEFAULT_DOTFILES = False  # Hidden entries are left alone

# =====================================
# PARALLEL PREVIEW
# =====================================

PARALLEL_PREVIEW_MAX_WORKERS = None  # None = auto-detect (2x CPU cores, max 8)
PARALLEL_PREVIEW_WORKER_CAP = 8

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_CONSOLE_LEVEL = "ERROR"  # Results go to stdout, keep stderr quiet by default
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file (rotation trigger)
LOG_FILE_BACKUP_COUNT = 3

# =====================================
# OUTPUT
# =====================================

JSON_INDENT = 2  # Used by --pretty
