"""Link store API command.

CLI: orgit link store <status|log|commit> <path> [--rev R ...]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkStoreOutput
from ..StageResult import StageResult
from .MalformedLinkAddress import MalformedLinkAddress
from .RepositoryView import RepositoryView
from .store_link import store_link
from .ViewKind import ViewKind


def cmd_store(view: str, path: str, revisions: list[str] | None = None) -> StageResult:
    """Build the link text for a repository view.

    Args:
        view: View kind (status, log, commit).
        path: Repository working directory.
        revisions: Revisions shown by the view; log views link the first one.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        empty = LinkStoreOutput(link="", description="").model_dump(mode="python")
        try:
            view_kind = ViewKind(view)
        except ValueError:
            choices = ", ".join(kind.value for kind in ViewKind)
            result_obj.fail(f"Unknown view kind {view!r} (expected one of: {choices})", empty)
            return

        yield (0.5, "Building link...")
        repository_view = RepositoryView(kind=view_kind, repository_path=path, revisions=tuple(revisions or ()))
        try:
            stored = store_link(repository_view)
        except MalformedLinkAddress as e:
            result_obj.fail(e.message, empty)
            return

        warnings = []
        if view_kind is ViewKind.LOG and len(repository_view.revisions) > 1:
            warnings.append(f"Only the first of {len(repository_view.revisions)} revisions is stored")

        yield (1.0, "Complete")
        result_obj.output = LinkStoreOutput(
            link=stored.link,
            description=stored.description,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.result = f"Stored {stored.link}"
        result_obj.success = True

    return StageResult(announce=f"Storing link to {view} view of {path}...", progress_callback=do_work)
