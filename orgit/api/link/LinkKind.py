"""LinkKind enum: which repository view a link points at."""

from enum import Enum


class LinkKind(str, Enum):
    """Kind of stored link.

    The value is the repository config key (``orgit.<value>``) holding a
    direct URL template for the kind.
    """

    STATUS = "status"
    LOG = "log"
    COMMIT = "rev"

    @property
    def scheme(self) -> str:
        """Link text scheme, e.g. ``orgit-rev``."""
        return _SCHEMES[self]

    @property
    def requires_revision(self) -> bool:
        return self is not LinkKind.STATUS

    @classmethod
    def from_scheme(cls, scheme: str) -> "LinkKind | None":
        """Return the kind stored under ``scheme``, or None for foreign schemes."""
        for kind, kind_scheme in _SCHEMES.items():
            if kind_scheme == scheme:
                return kind
        return None


_SCHEMES = {
    LinkKind.STATUS: "orgit",
    LinkKind.LOG: "orgit-log",
    LinkKind.COMMIT: "orgit-rev",
}
