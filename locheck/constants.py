"""Shared constants for locheck."""

LOCHECK_HOME_EXT = ".locheck"  # user-level state directory suffix

LOG_FILE_NAME = "locheck.log"

# Rotating log file limits
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Encoding of resource files and scanned files
FILE_ENCODING = "utf-8"

DISPLAY_FORMATS = ("text", "json", "yaml")
