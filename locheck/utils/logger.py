import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_BACKUP_COUNT, LOG_FILE_NAME, LOG_MAX_BYTES

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(locheck_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified locheck logging.

    Args:
        locheck_home: Directory holding the log file. If None, derived from environment.
        level: Level of the ``locheck`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if locheck_home is None:
        from ..api.config.get_home_dir import get_home_dir

        locheck_home = get_home_dir()

    locheck_home.mkdir(parents=True, exist_ok=True)
    log_file = locheck_home / LOG_FILE_NAME

    root_logger = logging.getLogger("locheck")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Remove locheck handlers so the next call configures logging again."""
    global _CONFIGURED
    root_logger = logging.getLogger("locheck")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
