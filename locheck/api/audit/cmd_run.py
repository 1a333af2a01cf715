"""Run command - audit described by a JSON configuration file."""

from pathlib import Path

from ..config.ScanConfig import ScanConfig
from ..StageResult import StageResult
from ._config_error_result import _config_error_result
from .run_audit import run_audit


def cmd_run(config_path: str) -> StageResult:
    """Load a ScanConfig from ``config_path`` and run the audit it describes."""
    try:
        config = ScanConfig.load(Path(config_path).expanduser())
    except ValueError as e:
        return _config_error_result(str(e))

    return run_audit(config)
