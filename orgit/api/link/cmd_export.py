"""Link export API command.

CLI: orgit link export <file> --format html [--output OUT]
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkExportOutput
from ..git.ConfigStore import ConfigStore
from ..git.ConfigStoreError import ConfigStoreError
from ..StageResult import StageResult
from .OutputFormat import OutputFormat
from .ResolutionError import ResolutionError


def cmd_export(
    path: str,
    format: str = "text",
    output_path: str | None = None,
    store: ConfigStore | None = None,
) -> StageResult:
    """Rewrite the orgit links of a document into public URLs.

    Args:
        path: Document to read.
        format: Export backend name (html, latex, text, ...).
        output_path: File to write the result to; when omitted the text is
            returned in the command output.
        store: Repository config source; defaults to git.
    """
    output_format = OutputFormat.from_name(format)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ...utils.normalize_path import normalize_path
        from ..config.OrgitConfig import OrgitConfig
        from .export_document import export_document
        from .LinkResolver import LinkResolver

        output = {"path": path, "format": output_format.value, "output_path": output_path or ""}

        yield (0.1, "Loading configuration...")
        try:
            config = OrgitConfig.load()
        except ValueError as e:
            result_obj.fail(f"Failed to load config: {e}", LinkExportOutput(**output).model_dump(mode="python"))
            return

        yield (0.3, f"Reading {path}...")
        source: Path = normalize_path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            result_obj.fail(f"Cannot read {path}: {e}", LinkExportOutput(**output).model_dump(mode="python"))
            return

        yield (0.6, "Resolving links...")
        resolver = LinkResolver.from_config(config, store=store)
        try:
            exported = export_document(text, output_format, resolver)
        except (ResolutionError, ConfigStoreError) as e:
            result_obj.fail(str(e), LinkExportOutput(**output).model_dump(mode="python"))
            return

        output["links"] = exported.links
        if output_path:
            yield (0.9, f"Writing {output_path}...")
            normalize_path(output_path).write_text(exported.text, encoding="utf-8")
        else:
            output["text"] = exported.text

        yield (1.0, "Complete")
        result_obj.output = LinkExportOutput(**output).model_dump(mode="python")
        result_obj.result = f"Rewrote {exported.rewritten} link(s) in {path}"
        result_obj.success = True

    return StageResult(announce=f"Exporting {path} as {output_format.value}...", progress_callback=do_work)
