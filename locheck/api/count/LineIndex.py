"""In-memory copy of the lines of a project tree."""

from collections.abc import Collection
from dataclasses import dataclass, field
from pathlib import Path

from ..scan.iter_files import iter_files
from ..strings.iter_lines import iter_lines


@dataclass
class LineIndex:
    """Every line of every matched file, read once and queried per key.

    ``count`` gives the same result as ``count_occurrences`` over the same tree.
    """

    lines: list[str] = field(default_factory=list)
    files_indexed: int = 0

    @classmethod
    def build(
        cls,
        directory: Path,
        allowed_extensions: Collection[str] = frozenset(),
        recursive: bool = True,
    ) -> "LineIndex":
        """Read the tree once.

        Raises:
            DirectoryUnreadableError: If a directory of the tree cannot be listed.
        """
        index = cls()
        for file_path in iter_files(directory, allowed_extensions, recursive=recursive):
            index.lines.extend(iter_lines(file_path))
            index.files_indexed += 1
        return index

    def count(self, key: str) -> int:
        return sum(1 for line in self.lines if key in line)
