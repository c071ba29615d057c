"""MalformedLinkAddress error."""

from .ErrorKind import ErrorKind
from .ResolutionError import ResolutionError


class MalformedLinkAddress(ResolutionError):
    """Raised when stored link text does not have the path[::revision] shape of its kind."""

    kind = ErrorKind.MALFORMED_LINK_ADDRESS
