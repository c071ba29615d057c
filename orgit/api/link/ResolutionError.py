"""Base error for link parsing and resolution."""

from typing import ClassVar

from .ErrorKind import ErrorKind


class ResolutionError(Exception):
    """Raised when a link cannot be parsed or resolved to a public URL.

    Subclasses fix ``kind``; all of them are terminal for the call that
    raised them. The base class itself cannot be raised.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        if not isinstance(getattr(type(self), "kind", None), ErrorKind):
            raise TypeError(f"{type(self).__name__} has no error kind; raise one of its subclasses")
        self.message = message
        super().__init__(message)
