"""Pick the public remote of a repository."""

from collections.abc import Sequence


def select_remote(
    configured_remotes: Sequence[str],
    preferred_override: str | None,
    default_remote_name: str,
) -> str | None:
    """Select which configured remote is the public one.

    Precedence, first hit wins:

    1. A repository with exactly one remote uses it, whatever the
       override or default say.
    2. The repository's ``orgit.remote`` override, if it names a remote.
    3. The process-wide default remote name, if it names a remote.

    Returns:
        The remote name, or None when no remote can be selected.
    """
    if len(configured_remotes) == 1:
        return configured_remotes[0]
    if preferred_override and preferred_override in configured_remotes:
        return preferred_override
    if default_remote_name in configured_remotes:
        return default_remote_name
    return None
