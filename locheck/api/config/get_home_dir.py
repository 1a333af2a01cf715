"""Get locheck home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LOCHECK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get locheck home directory path or path under it.

    Checks LOCHECK_HOME environment variable first, defaults to ~/.locheck if not set.

    Args:
        *parts: Optional path components to join (e.g., "locheck.log")

    Returns:
        Absolute path to locheck home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.locheck")
        >>> get_home_dir("locheck.log")
        Path("/Users/user/.locheck/locheck.log")
    """
    home_env = os.environ.get("LOCHECK_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / LOCHECK_HOME_EXT if user_home else Path.home() / LOCHECK_HOME_EXT

    return home / Path(*parts) if parts else home
