"""Error raised when a directory of the scanned tree cannot be listed."""

from pathlib import Path


class DirectoryUnreadableError(OSError):
    """A directory could not be listed, so the scan cannot be complete."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not open directory {path}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
