"""NoPublicRemote error."""

from .ErrorKind import ErrorKind
from .ResolutionError import ResolutionError


class NoPublicRemote(ResolutionError):
    """Raised when no remote can be selected as the public remote of a repository."""

    kind = ErrorKind.NO_PUBLIC_REMOTE
