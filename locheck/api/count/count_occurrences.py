"""Count the lines of a project tree that contain a key."""

from collections.abc import Collection
from pathlib import Path

from ..scan.iter_files import iter_files
from ..strings.iter_lines import iter_lines


def count_occurrences(
    key: str,
    directory: Path,
    allowed_extensions: Collection[str] = frozenset(),
    recursive: bool = True,
) -> int:
    """Return the number of lines containing ``key``, across every matched file.

    Matching is a case-sensitive substring test. A line holding the key
    several times counts once. The tree is walked again on every call.

    Raises:
        DirectoryUnreadableError: If a directory of the tree cannot be listed.
    """
    nb_found = 0
    for file_path in iter_files(directory, allowed_extensions, recursive=recursive):
        for line in iter_lines(file_path):
            if key in line:
                nb_found += 1
    return nb_found
