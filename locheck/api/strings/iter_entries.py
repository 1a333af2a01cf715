"""Iterate over the entries of a resource file."""

from collections.abc import Iterator
from pathlib import Path

from .extract_entry import extract_entry
from .iter_lines import iter_lines
from .ResourceEntry import ResourceEntry


def iter_entries(source_file_path: Path, detect_empty_values: bool = False) -> Iterator[ResourceEntry]:
    """Yield one ResourceEntry per key and value line, in file order.

    Lines that are not key and value lines (comments, blank lines, multi-line
    values) are skipped silently.
    """
    for line in iter_lines(source_file_path):
        entry = extract_entry(line, detect_empty_value=detect_empty_values)
        if entry is not None:
            yield entry
