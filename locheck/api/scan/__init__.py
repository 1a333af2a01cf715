"""Project tree traversal."""

from .DirectoryUnreadableError import DirectoryUnreadableError
from .has_allowed_extension import has_allowed_extension
from .iter_files import iter_files

__all__ = ["DirectoryUnreadableError", "has_allowed_extension", "iter_files"]
