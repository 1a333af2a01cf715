"""Version command - returns locheck version information."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult
from .get_package_version import get_package_version


def cmd_version() -> StageResult:
    """Get locheck version information.

    Returns:
        StageResult with version information
    """

    def do_work(result_obj: StageResult) -> Iterator[str]:
        version = get_package_version()
        result_obj.result = f"locheck version: {version}"
        result_obj.output = ConfigVersionOutput(errors=[], warnings=[], version=version).model_dump(mode="python")
        result_obj.success = True
        yield from ()

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
