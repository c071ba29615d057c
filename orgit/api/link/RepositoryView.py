"""Description of a repository view supplied by the calling environment."""

from dataclasses import dataclass

from .ViewKind import ViewKind


@dataclass(frozen=True)
class RepositoryView:
    """A view the environment has open, or should open.

    ``revisions`` is empty for status views. Log views may show several
    revisions at once; commit views show exactly one.
    """

    kind: ViewKind
    repository_path: str
    revisions: tuple[str, ...] = ()

    @property
    def revision(self) -> str | None:
        return self.revisions[0] if self.revisions else None
