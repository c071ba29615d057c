"""Kinds of repository views a link can be stored from."""

from enum import Enum

from .LinkKind import LinkKind


class ViewKind(str, Enum):
    STATUS = "status"
    LOG = "log"
    COMMIT = "commit"

    @property
    def link_kind(self) -> LinkKind:
        return _LINK_KINDS[self]

    @classmethod
    def from_link_kind(cls, kind: LinkKind) -> "ViewKind":
        for view_kind, link_kind in _LINK_KINDS.items():
            if link_kind is kind:
                return view_kind
        raise ValueError(f"No view for link kind {kind.value!r}")


_LINK_KINDS = {
    ViewKind.STATUS: LinkKind.STATUS,
    ViewKind.LOG: LinkKind.LOG,
    ViewKind.COMMIT: LinkKind.COMMIT,
}
