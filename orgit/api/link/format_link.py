"""Build stored link text from a kind and an address."""

from .LinkAddress import LinkAddress
from .LinkKind import LinkKind
from .MalformedLinkAddress import MalformedLinkAddress


def format_link(kind: LinkKind, address: LinkAddress) -> str:
    """Return ``<scheme>:<address>``.

    Raises:
        MalformedLinkAddress: If the address' revision does not fit ``kind``.
    """
    if kind.requires_revision and address.revision is None:
        raise MalformedLinkAddress(f"{kind.scheme} link requires a revision: {address}")
    if not kind.requires_revision and address.revision is not None:
        raise MalformedLinkAddress(f"{kind.scheme} link must not carry a revision: {address}")
    return f"{kind.scheme}:{address}"
