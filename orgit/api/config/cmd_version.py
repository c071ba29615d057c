"""Version command - returns orgit version information."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult


def cmd_version() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        yield (1.0, "Complete")
        result_obj.output = ConfigVersionOutput(version=version).model_dump(mode="python")
        result_obj.result = f"orgit {version}"
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
