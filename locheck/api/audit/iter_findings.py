"""Check every key of a resource file against a project tree."""

import logging
from collections.abc import Iterator

from ..config.ScanConfig import ScanConfig
from ..count.count_occurrences import count_occurrences
from ..count.LineIndex import LineIndex
from ..strings.iter_entries import iter_entries
from .Finding import Finding
from .FindingKind import FindingKind

logger = logging.getLogger(__name__)


def iter_findings(config: ScanConfig) -> Iterator[Finding]:
    """Yield findings key by key, in resource file order.

    For each key, an EMPTY_VALUE finding comes first when the key has an
    empty value and ``report_empty_values`` is set. Then exactly one verdict
    follows: UNUSED when the key is found ``min_occurrence_threshold`` times
    or fewer, USED otherwise. USED findings are yielded whatever the
    ``verbose`` setting; reporting them is up to the caller.

    Raises:
        DirectoryUnreadableError: If a directory of the project tree cannot be listed.
    """
    index = None
    if config.use_index:
        index = LineIndex.build(config.project_path, config.allowed_extensions, recursive=config.recursive)
        logger.info(f"Indexed {len(index.lines)} lines from {index.files_indexed} files")

    for entry in iter_entries(config.source_file_path, detect_empty_values=config.report_empty_values):
        if entry.has_empty_value:
            yield Finding(FindingKind.EMPTY_VALUE, entry.key)

        if index is not None:
            nb_found = index.count(entry.key)
        else:
            nb_found = count_occurrences(
                entry.key,
                config.project_path,
                config.allowed_extensions,
                recursive=config.recursive,
            )
        logger.debug(f"{entry.key} found {nb_found} times")

        if nb_found <= config.min_occurrence_threshold:
            yield Finding(FindingKind.UNUSED, entry.key, nb_found)
        else:
            yield Finding(FindingKind.USED, entry.key, nb_found)
