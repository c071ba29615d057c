"""Link API domain: stored link text and its public URLs."""

from .ErrorKind import ErrorKind
from .format_link import format_link
from .format_url import format_url
from .LinkAddress import LinkAddress
from .LinkKind import LinkKind
from .MalformedLinkAddress import MalformedLinkAddress
from .MalformedTemplate import MalformedTemplate
from .NoPublicRemote import NoPublicRemote
from .NoPublicUrl import NoPublicUrl
from .OutputFormat import OutputFormat
from .parse_link import parse_link
from .RemotePattern import RemotePattern
from .RemotePatternTable import DEFAULT_REMOTE_PATTERNS, RemotePatternTable
from .ResolutionError import ResolutionError
from .select_remote import select_remote
from .substitute import substitute

__all__ = [
    "DEFAULT_REMOTE_PATTERNS",
    "ErrorKind",
    "LinkAddress",
    "LinkKind",
    "MalformedLinkAddress",
    "MalformedTemplate",
    "NoPublicRemote",
    "NoPublicUrl",
    "OutputFormat",
    "RemotePattern",
    "RemotePatternTable",
    "ResolutionError",
    "format_link",
    "format_url",
    "parse_link",
    "select_remote",
    "substitute",
]
