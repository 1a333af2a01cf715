"""Key occurrence counting."""

from .count_occurrences import count_occurrences
from .LineIndex import LineIndex

__all__ = ["LineIndex", "count_occurrences"]
