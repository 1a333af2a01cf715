"""Iterate over the lines of a text file."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ...constants import FILE_ENCODING

logger = logging.getLogger(__name__)


def iter_lines(file_path: Path) -> Iterator[str]:
    """Yield the non-empty lines of a file, without their ``\\n`` terminator.

    Only ``\\n`` ends a line; a ``\\r`` stays part of the line it is on.
    A file that cannot be opened or decoded yields nothing. The failure is
    logged and never raised.
    """
    try:
        with file_path.open(encoding=FILE_ENCODING, newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Cannot read {file_path}: {exc}")
        return

    for line in text.split("\n"):
        if line:
            yield line
