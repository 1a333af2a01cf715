"""Run one audit and collect its report."""

import logging
from collections.abc import Iterator

from .._output_schemas.audit import AuditCheckOutput
from ..config.ScanConfig import ScanConfig
from ..scan.DirectoryUnreadableError import DirectoryUnreadableError
from ..StageResult import StageResult
from .describe_config import describe_config
from .Finding import Finding
from .FindingKind import FindingKind
from .iter_findings import iter_findings

logger = logging.getLogger(__name__)


def run_audit(config: ScanConfig) -> StageResult:
    """Audit the keys of ``config.source_file_path`` against ``config.project_path``.

    The progress callback yields each Finding to report as soon as it is
    known. USED findings are only yielded in verbose mode. Missing inputs and
    unreadable directories end the run with ``success`` set to False.
    """

    def do_work(result_obj: StageResult) -> Iterator[Finding]:
        output = AuditCheckOutput(
            source_file_path=str(config.source_file_path),
            project_path=str(config.project_path),
        )

        def fail(message: str) -> None:
            output.errors.append(message)
            result_obj.result = message
            result_obj.output = output.model_dump(mode="python")
            result_obj.success = False

        if not config.source_file_path.exists():
            logger.error(f"Source file not found: {config.source_file_path}")
            fail(f"File {config.source_file_path} does not exist. Could not start tool.")
            return

        if not config.project_path.exists():
            logger.error(f"Project directory not found: {config.project_path}")
            fail(f"Directory {config.project_path} does not exist. Could not start tool.")
            return

        logger.info(f"Audit started: {config.to_dict()}")

        try:
            for finding in iter_findings(config):
                if finding.kind is FindingKind.EMPTY_VALUE:
                    output.empty_value_keys.append(finding.key)
                    output.warnings.append(finding.message)
                    yield finding
                    continue

                output.keys_checked += 1
                if finding.kind is FindingKind.UNUSED:
                    output.unused_keys[finding.key] = finding.count
                    yield finding
                elif config.verbose:
                    output.used_keys[finding.key] = finding.count
                    yield finding
        except DirectoryUnreadableError as exc:
            fail(f"Could not open directory {exc.path}.")
            return

        logger.info(f"Audit finished: {output.keys_checked} keys checked, {len(output.unused_keys)} unused")
        result_obj.result = "finished!"
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="\n".join(describe_config(config)),
        progress_callback=do_work,
    )
