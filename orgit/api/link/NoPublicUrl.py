"""NoPublicUrl error."""

from .ErrorKind import ErrorKind
from .ResolutionError import ResolutionError


class NoPublicUrl(ResolutionError):
    """Raised when a remote was selected but no URL template applies to it."""

    kind = ErrorKind.NO_PUBLIC_URL
