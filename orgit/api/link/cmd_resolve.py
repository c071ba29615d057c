"""Link resolve API command.

CLI: orgit link resolve <link> [--format html|latex|text] [--description D]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkResolveOutput
from ..git.ConfigStore import ConfigStore
from ..git.ConfigStoreError import ConfigStoreError
from ..StageResult import StageResult
from .OutputFormat import OutputFormat
from .ResolutionError import ResolutionError


def cmd_resolve(
    link: str,
    format: str = "text",
    description: str | None = None,
    store: ConfigStore | None = None,
) -> StageResult:
    """Resolve stored link text to its public URL.

    Args:
        link: Link text such as ``orgit-rev:~/src/proj::deadbeef``.
        format: Export backend name (html, latex, text, ...).
        description: Visible text for HTML/LaTeX output.
        store: Repository config source; defaults to git.
    """
    output_format = OutputFormat.from_name(format)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.OrgitConfig import OrgitConfig
        from .LinkResolver import LinkResolver

        output = {"link": link, "format": output_format.value, "url": ""}

        yield (0.2, "Loading configuration...")
        try:
            config = OrgitConfig.load()
        except ValueError as e:
            result_obj.fail(f"Failed to load config: {e}", LinkResolveOutput(**output).model_dump(mode="python"))
            return

        yield (0.5, "Resolving link...")
        resolver = LinkResolver.from_config(config, store=store)
        try:
            url = resolver.resolve_link(link, output_format, description)
        except ResolutionError as e:
            output["error_kind"] = e.kind.value
            result_obj.fail(e.message, LinkResolveOutput(**output).model_dump(mode="python"))
            return
        except ConfigStoreError as e:
            result_obj.fail(str(e), LinkResolveOutput(**output).model_dump(mode="python"))
            return

        yield (1.0, "Complete")
        output["url"] = url
        result_obj.output = LinkResolveOutput(**output).model_dump(mode="python")
        result_obj.result = f"Resolved {link}"
        result_obj.success = True

    return StageResult(announce=f"Resolving {link}...", progress_callback=do_work)
