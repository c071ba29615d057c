"""LinkAddress value object: ``path[::revision]``."""

from dataclasses import dataclass

from .LinkKind import LinkKind
from .MalformedLinkAddress import MalformedLinkAddress

SEPARATOR = "::"


@dataclass(frozen=True)
class LinkAddress:
    """Repository path plus optional revision, as stored in link text.

    The path is kept exactly as written (it may be ``~``-abbreviated);
    expansion happens when the repository is queried.
    """

    repository_path: str
    revision: str | None = None

    def __post_init__(self):
        if not isinstance(self.repository_path, str):
            raise TypeError("LinkAddress repository_path must be a string")
        if not self.repository_path:
            raise MalformedLinkAddress("Link address has an empty repository path")
        if SEPARATOR in self.repository_path:
            raise MalformedLinkAddress(
                f"Repository path must not contain '{SEPARATOR}': {self.repository_path}"
            )
        if self.revision is not None and not self.revision:
            raise MalformedLinkAddress(f"Link address has an empty revision: {self.repository_path}")

    def __str__(self):
        return self.serialize()

    def serialize(self) -> str:
        if self.revision is None:
            return self.repository_path
        return f"{self.repository_path}{SEPARATOR}{self.revision}"

    @classmethod
    def parse(cls, text: str, kind: LinkKind) -> "LinkAddress":
        """Parse the part of a link after its scheme.

        Args:
            text: ``path`` for STATUS links, ``path::revision`` otherwise.
            kind: Kind of the link the text was stored under.

        Raises:
            MalformedLinkAddress: If the text does not have the shape ``kind`` requires.
        """
        if not kind.requires_revision:
            if SEPARATOR in text:
                raise MalformedLinkAddress(f"Status link must not carry a revision: {kind.scheme}:{text}")
            return cls(text)

        path, sep, revision = text.partition(SEPARATOR)
        if not sep:
            raise MalformedLinkAddress(f"Missing '{SEPARATOR}revision' in link: {kind.scheme}:{text}")
        if not revision:
            raise MalformedLinkAddress(f"Empty revision in link: {kind.scheme}:{text}")
        return cls(path, revision)
