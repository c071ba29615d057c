"""MalformedTemplate error."""

from .ErrorKind import ErrorKind
from .ResolutionError import ResolutionError


class MalformedTemplate(ResolutionError):
    """Raised when a template references a placeholder with no binding."""

    kind = ErrorKind.MALFORMED_TEMPLATE
