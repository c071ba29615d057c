"""Kinds of link resolution failures."""

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_TEMPLATE = "malformed_template"
    NO_PUBLIC_REMOTE = "no_public_remote"
    NO_PUBLIC_URL = "no_public_url"
    MALFORMED_LINK_ADDRESS = "malformed_link_address"
