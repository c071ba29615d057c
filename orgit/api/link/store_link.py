"""Build link text for the view the environment currently shows."""

import logging
from collections.abc import Callable
from pathlib import PurePosixPath

from ...utils.abbreviate_path import abbreviate_path
from ...utils.normalize_path import normalize_path
from .format_link import format_link
from .LinkAddress import LinkAddress
from .LinkKind import LinkKind
from .MalformedLinkAddress import MalformedLinkAddress
from .RepositoryView import RepositoryView
from .StoredLink import StoredLink
from .ViewKind import ViewKind

logger = logging.getLogger(__name__)


def _repo_name(path: str) -> str:
    return PurePosixPath(path.rstrip("/")).name or path


def _require_revision(view: RepositoryView, path: str) -> str:
    revision = view.revision
    if not revision:
        raise MalformedLinkAddress(f"A {view.kind.value} view of {path} has no revision to link to")
    return revision


def _store_status(view: RepositoryView, path: str) -> StoredLink:
    link = format_link(LinkKind.STATUS, LinkAddress(path))
    return StoredLink(link=link, description=f"{_repo_name(path)} (status)")


def _store_log(view: RepositoryView, path: str) -> StoredLink:
    revision = _require_revision(view, path)
    if len(view.revisions) > 1:
        # Link text holds a single revision; the rest of the view is lost.
        logger.warning(f"Log view of {path} shows {len(view.revisions)} revisions, linking only {revision}")
    link = format_link(LinkKind.LOG, LinkAddress(path, revision))
    return StoredLink(link=link, description=f"{_repo_name(path)} (log {revision})")


def _store_commit(view: RepositoryView, path: str) -> StoredLink:
    revision = _require_revision(view, path)
    link = format_link(LinkKind.COMMIT, LinkAddress(path, revision))
    return StoredLink(link=link, description=f"{_repo_name(path)} ({revision})")


_HANDLERS: dict[ViewKind, Callable[[RepositoryView, str], StoredLink]] = {
    ViewKind.STATUS: _store_status,
    ViewKind.LOG: _store_log,
    ViewKind.COMMIT: _store_commit,
}


def store_link(view: RepositoryView, abbreviate_home: bool = True) -> StoredLink:
    """Return the link text and description for ``view``.

    Relative paths are made absolute against the current directory.

    Args:
        view: The view to link to.
        abbreviate_home: Store paths under the home directory as ``~/...``.

    Raises:
        MalformedLinkAddress: If a log or commit view has no revision, or
            the repository path contains ``::``.
    """
    path = str(normalize_path(view.repository_path))
    if abbreviate_home:
        path = abbreviate_path(path)
    return _HANDLERS[view.kind](view, path)
