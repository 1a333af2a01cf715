"""StageResult for an audit whose configuration could not be built."""

from collections.abc import Iterator

from .._output_schemas.audit import AuditCheckOutput
from ..StageResult import StageResult


def _config_error_result(message: str, source_file_path: str = "", project_path: str = "") -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator:
        result_obj.result = message
        result_obj.output = AuditCheckOutput(
            errors=[message],
            source_file_path=source_file_path,
            project_path=project_path,
        ).model_dump(mode="python")
        result_obj.success = False
        yield from ()

    return StageResult(
        announce="Loading audit configuration...",
        progress_callback=do_work,
    )
