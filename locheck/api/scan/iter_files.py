"""Walk a directory tree."""

import logging
import os
from collections.abc import Collection, Iterator
from pathlib import Path

from .DirectoryUnreadableError import DirectoryUnreadableError
from .has_allowed_extension import has_allowed_extension

logger = logging.getLogger(__name__)


def iter_files(
    directory: Path,
    allowed_extensions: Collection[str] = frozenset(),
    recursive: bool = False,
) -> Iterator[Path]:
    """Yield the files of ``directory``, depth first, in listing order.

    Directories are entered regardless of ``allowed_extensions`` when
    ``recursive`` is set; the filter only applies to files. A directory
    reached through several symlinks is walked once per path, except when it
    is one of its own ancestors (a symlink cycle), which is skipped.

    Raises:
        DirectoryUnreadableError: If a directory of the tree cannot be listed.
    """
    yield from _walk(directory, allowed_extensions, recursive, set())


def _is_dir(path: Path) -> bool:
    # A path that cannot be stat'ed is handled as a file; reading it then fails softly
    try:
        return path.is_dir()
    except OSError:
        return False


def _walk(
    directory: Path,
    allowed_extensions: Collection[str],
    recursive: bool,
    ancestors: set[str],
) -> Iterator[Path]:
    try:
        items = list(directory.iterdir())
    except OSError as exc:
        logger.error(f"Could not open directory {directory}: {exc}")
        raise DirectoryUnreadableError(directory, exc.strerror or str(exc)) from exc

    real_path = os.path.realpath(directory)
    ancestors.add(real_path)
    try:
        for item in items:
            if _is_dir(item):
                if recursive and os.path.realpath(item) not in ancestors:
                    yield from _walk(item, allowed_extensions, recursive, ancestors)
            elif has_allowed_extension(item, allowed_extensions):
                yield item
    finally:
        ancestors.discard(real_path)
