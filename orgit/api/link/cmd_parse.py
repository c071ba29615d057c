"""Link parse API command.

CLI: orgit link parse <link>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkParseOutput
from ..StageResult import StageResult
from .MalformedLinkAddress import MalformedLinkAddress
from .parse_link import parse_link


def cmd_parse(link: str) -> StageResult:
    """Split link text into kind, repository path and revision."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Parsing link...")
        try:
            kind, address = parse_link(link)
        except MalformedLinkAddress as e:
            output = LinkParseOutput(link=link, kind="", repository_path="").model_dump(mode="python")
            result_obj.fail(e.message, output)
            return

        yield (1.0, "Complete")
        result_obj.output = LinkParseOutput(
            link=link,
            kind=kind.value,
            repository_path=address.repository_path,
            revision=address.revision,
        ).model_dump(mode="python")
        result_obj.result = f"Parsed {kind.scheme} link"
        result_obj.success = True

    return StageResult(announce=f"Parsing {link}...", progress_callback=do_work)
