"""One row of the remote pattern table."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .LinkKind import LinkKind


class RemotePattern(BaseModel):
    """Maps remote URLs of one hosting provider to its web URL templates.

    ``host_pattern`` is searched in the remote's fetch URL and must have
    exactly one capturing group, the repository identifier (``%n``).
    Templates may also use ``%r``, the revision.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    host_pattern: str = Field(..., description="Regex over the remote URL with one capturing group")
    status_template: str = Field(..., description="URL of the repository's main page")
    log_template: str = Field(..., description="URL of the log at revision %r")
    commit_template: str = Field(..., description="URL of commit %r")

    @field_validator("host_pattern")
    @classmethod
    def validate_host_pattern(cls, v: str) -> str:
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"host_pattern is not a valid regular expression ({v!r}): {e}") from e
        if compiled.groups != 1:
            raise ValueError(f"host_pattern must define exactly one capturing group (found {compiled.groups}): {v!r}")
        return v

    def template_for(self, kind: LinkKind) -> str:
        if kind is LinkKind.STATUS:
            return self.status_template
        if kind is LinkKind.LOG:
            return self.log_template
        return self.commit_template

    def search(self, remote_url: str) -> re.Match | None:
        return re.search(self.host_pattern, remote_url)
