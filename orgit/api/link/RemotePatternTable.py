"""Ordered table of remote URL patterns; first match wins."""

from collections.abc import Iterable, Iterator

from .RemoteMatch import RemoteMatch
from .RemotePattern import RemotePattern


def _row(host_pattern: str, status: str, log: str, commit: str) -> RemotePattern:
    return RemotePattern(
        host_pattern=host_pattern,
        status_template=status,
        log_template=log,
        commit_template=commit,
    )


DEFAULT_REMOTE_PATTERNS: tuple[RemotePattern, ...] = (
    _row(
        r"github\.com[:/](.+?)(?:\.git)?$",
        "https://github.com/%n",
        "https://github.com/%n/commits/%r",
        "https://github.com/%n/commit/%r",
    ),
    _row(
        r"gitlab\.com[:/](.+?)(?:\.git)?$",
        "https://gitlab.com/%n",
        "https://gitlab.com/%n/commits/%r",
        "https://gitlab.com/%n/commit/%r",
    ),
    _row(
        r"codeberg\.org[:/](.+?)(?:\.git)?$",
        "https://codeberg.org/%n",
        "https://codeberg.org/%n/commits/branch/%r",
        "https://codeberg.org/%n/commit/%r",
    ),
    _row(
        r"git\.sr\.ht[:/](.+?)(?:\.git)?$",
        "https://git.sr.ht/%n",
        "https://git.sr.ht/%n/log/%r",
        "https://git.sr.ht/%n/commit/%r",
    ),
    _row(
        r"bitbucket\.org[:/](.+?)(?:\.git)?$",
        "https://bitbucket.org/%n",
        "https://bitbucket.org/%n/commits/branch/%r",
        "https://bitbucket.org/%n/commits/%r",
    ),
    _row(
        r"git\.kernel\.org/pub/scm[:/](.+)$",
        "https://git.kernel.org/cgit/%n",
        "https://git.kernel.org/cgit/%n/log/?h=%r",
        "https://git.kernel.org/cgit/%n/commit/?id=%r",
    ),
    _row(
        r"repo\.or\.cz[:/](.+?)(?:\.git)?$",
        "https://repo.or.cz/%n.git",
        "https://repo.or.cz/%n.git/shortlog/%r",
        "https://repo.or.cz/%n.git/commit/%r",
    ),
    _row(
        r"git\.savannah\.(?:non)?gnu\.org[:/](?:git/)?(.+?)(?:\.git)?$",
        "https://git.savannah.gnu.org/cgit/%n.git/",
        "https://git.savannah.gnu.org/cgit/%n.git/log/?h=%r",
        "https://git.savannah.gnu.org/cgit/%n.git/commit/?id=%r",
    ),
)


class RemotePatternTable:
    """Ordered list of RemotePattern rows.

    There is no ambiguity resolution beyond order: the first row whose
    ``host_pattern`` is found in the remote URL wins.
    """

    def __init__(self, patterns: Iterable[RemotePattern] = DEFAULT_REMOTE_PATTERNS):
        self.patterns = tuple(patterns)

    def __iter__(self) -> Iterator[RemotePattern]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    def match(self, remote_url: str) -> RemoteMatch | None:
        """Return the first matching row and the captured identifier, or None."""
        for pattern in self.patterns:
            found = pattern.search(remote_url)
            if found is not None:
                return RemoteMatch(pattern=pattern, identifier=found.group(1))
        return None
