"""Split stored link text into its kind and address."""

from .LinkAddress import LinkAddress
from .LinkKind import LinkKind
from .MalformedLinkAddress import MalformedLinkAddress


def parse_link(link: str) -> tuple[LinkKind, LinkAddress]:
    """Parse ``orgit:``, ``orgit-log:`` or ``orgit-rev:`` link text.

    Raises:
        MalformedLinkAddress: On a foreign scheme or a bad address.
    """
    scheme, sep, rest = link.partition(":")
    kind = LinkKind.from_scheme(scheme) if sep else None
    if kind is None:
        raise MalformedLinkAddress(f"Not an orgit link: {link}")
    return kind, LinkAddress.parse(rest, kind)
