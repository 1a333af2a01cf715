"""Check command - audit the keys of a resource file given on the command line."""

from pathlib import Path

from pydantic import ValidationError

from ..config.ScanConfig import ScanConfig
from ..StageResult import StageResult
from ._config_error_result import _config_error_result
from .run_audit import run_audit


def cmd_check(
    source_file_path: str,
    project_path: str,
    allow_nb_times: int,
    extensions: list[str] | None = None,
    log_empty_values: bool = False,
    anxious_mode: bool = False,
    recursive: bool = True,
    use_index: bool = False,
) -> StageResult:
    """Report the keys of ``source_file_path`` found ``allow_nb_times`` times or fewer in ``project_path``.

    Args:
        source_file_path: Resource file holding the keys to check
        project_path: Directory in which each key is searched
        allow_nb_times: Occurrences a key is expected to have even when unused,
            e.g. 2 when the tree holds two Localizable.strings files
        extensions: Extensions of the files to search; each item may be a comma-separated list
        log_empty_values: Also warn about keys whose value is an empty string
        anxious_mode: Also report every key that is used
        recursive: Descend into subdirectories
        use_index: Read the tree once instead of once per key

    Returns:
        StageResult streaming one Finding per report line
    """
    try:
        config = ScanConfig(
            source_file_path=Path(source_file_path).expanduser(),
            project_path=Path(project_path).expanduser(),
            min_occurrence_threshold=allow_nb_times,
            allowed_extensions=extensions or [],
            report_empty_values=log_empty_values,
            verbose=anxious_mode,
            recursive=recursive,
            use_index=use_index,
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(x) for x in first.get("loc", ()))
        return _config_error_result(
            f"Invalid argument {field}: {first.get('msg', str(e))}",
            source_file_path=source_file_path,
            project_path=project_path,
        )

    return run_audit(config)
