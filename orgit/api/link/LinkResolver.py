"""Resolve stored links to public web URLs at export time."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..git.ConfigStore import ConfigStore
from ..git.GitConfigStore import GitConfigStore
from .format_link import format_link
from .format_url import format_url
from .LinkAddress import LinkAddress
from .LinkKind import LinkKind
from .MalformedTemplate import MalformedTemplate
from .NoPublicRemote import NoPublicRemote
from .NoPublicUrl import NoPublicUrl
from .OutputFormat import OutputFormat
from .parse_link import parse_link
from .RemotePatternTable import RemotePatternTable
from .select_remote import select_remote
from .substitute import substitute

if TYPE_CHECKING:
    from ..config.OrgitConfig import OrgitConfig

logger = logging.getLogger(__name__)

# Repository config section holding orgit.remote / orgit.status / orgit.log / orgit.rev
CONFIG_SECTION = "orgit"


class LinkResolver:
    """Turn (repository, revision, link kind) into a public web URL.

    A per-kind override template in the repository's config
    (``orgit.status``, ``orgit.log``, ``orgit.rev``) takes the place of
    the pattern table entirely: when it is set the remote URL is never
    matched against the table.
    """

    def __init__(
        self,
        store: ConfigStore,
        patterns: RemotePatternTable | None = None,
        default_remote: str = "origin",
    ):
        self.store = store
        self.patterns = patterns if patterns is not None else RemotePatternTable()
        self.default_remote = default_remote

    @classmethod
    def from_config(cls, config: OrgitConfig, store: ConfigStore | None = None) -> LinkResolver:
        if store is None:
            store = GitConfigStore(timeout=config.git_timeout)
        return cls(store, patterns=config.pattern_table(), default_remote=config.remote)

    def resolve(
        self,
        address: LinkAddress,
        kind: LinkKind,
        output_format: OutputFormat,
        description: str | None = None,
    ) -> str:
        """Resolve ``address`` to a URL and format it for ``output_format``.

        Raises:
            NoPublicRemote: No remote of the repository can be selected.
            NoPublicUrl: Neither an override nor the pattern table yields a URL.
            MalformedTemplate: The chosen template references an unbound placeholder.
        """
        url = self.resolve_url(address, kind)
        return format_url(url, output_format, description)

    def resolve_link(self, link: str, output_format: OutputFormat, description: str | None = None) -> str:
        """Parse stored link text and resolve it."""
        kind, address = parse_link(link)
        return self.resolve(address, kind, output_format, description)

    def resolve_url(self, address: LinkAddress, kind: LinkKind) -> str:
        """Resolve ``address`` to the raw public URL for ``kind``."""
        repo = address.repository_path
        link = format_link(kind, address)

        remotes = self.store.list_remotes(repo)
        preferred = self.store.get_config(repo, CONFIG_SECTION, "remote")
        remote = select_remote(remotes, preferred, self.default_remote)
        if remote is None:
            raise NoPublicRemote(f"Cannot determine public remote for {repo}")
        logger.debug(f"Selected remote {remote!r} for {repo} (remotes: {remotes})")

        bindings: dict[str, str] = {}
        if address.revision is not None:
            bindings["r"] = address.revision

        override = self.store.get_config(repo, CONFIG_SECTION, kind.value)
        if override is not None:
            logger.debug(f"Using {CONFIG_SECTION}.{kind.value} override for {link}")
            template = override
        else:
            remote_url = self.store.get_remote_url(repo, remote)
            found = self.patterns.match(remote_url) if remote_url else None
            if found is None:
                raise NoPublicUrl(f"Cannot determine public url for {link}")
            logger.debug(f"Remote URL {remote_url} matched {found.pattern.host_pattern!r} ({found.identifier})")
            template = found.pattern.template_for(kind)
            bindings["n"] = found.identifier

        try:
            return substitute(template, bindings)
        except MalformedTemplate as e:
            raise MalformedTemplate(f"{e.message} (resolving {link})") from e
