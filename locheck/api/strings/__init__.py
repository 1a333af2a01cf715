"""Resource file parsing."""

from .extract_entry import extract_entry
from .is_key_value_line import is_key_value_line
from .iter_entries import iter_entries
from .iter_lines import iter_lines
from .ResourceEntry import ResourceEntry

__all__ = ["ResourceEntry", "extract_entry", "is_key_value_line", "iter_entries", "iter_lines"]
