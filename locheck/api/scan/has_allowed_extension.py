"""Extension filter for scanned files."""

from collections.abc import Collection
from pathlib import Path


def has_allowed_extension(file_path: Path, allowed_extensions: Collection[str]) -> bool:
    """Check a file against the allowed extensions.

    An empty collection allows every file. Otherwise the extension, lowercased
    and without its dot, must be one of ``allowed_extensions``.
    """
    if not allowed_extensions:
        return True
    return file_path.suffix[1:].lower() in allowed_extensions
