"""Turn stored link text back into the view it points at."""

from ...utils.normalize_path import normalize_path
from .parse_link import parse_link
from .RepositoryView import RepositoryView
from .ViewKind import ViewKind


def follow_link(link: str) -> RepositoryView:
    """Parse ``link`` and return the view the environment should open.

    The repository path is expanded (``~``) and made absolute.
    """
    kind, address = parse_link(link)
    revisions = (address.revision,) if address.revision is not None else ()
    return RepositoryView(
        kind=ViewKind.from_link_kind(kind),
        repository_path=str(normalize_path(address.repository_path)),
        revisions=revisions,
    )
