"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class LinkResolveOutput(BaseOutputSchema):
    link: str = Field(..., description="Stored link text that was resolved")
    format: str = Field(..., description="Output format the URL was embedded into")
    url: str = Field(..., description="Formatted public URL, empty string on failure")
    error_kind: str = Field("", description="Kind of resolution failure, empty string on success")


class LinkParseOutput(BaseOutputSchema):
    link: str = Field(..., description="Stored link text that was parsed")
    kind: str = Field(..., description="Link kind (status, log, rev), empty string on failure")
    repository_path: str = Field(..., description="Repository path as stored")
    revision: str | None = Field(None, description="Revision, None for status links")


class LinkStoreOutput(BaseOutputSchema):
    """Output schema for link store command.

    Output structure:
    - link: str - link text to store in a document
    - description: str - default description for the link
    """

    link: str = Field(..., description="Link text, empty string on failure")
    description: str = Field(..., description="Default link description")


class LinkExportOutput(BaseOutputSchema):
    path: str = Field(..., description="Document that was exported")
    format: str = Field(..., description="Output format")
    output_path: str = Field("", description="File the exported text was written to, empty string for stdout")
    links: list[str] = Field(default_factory=list, description="Links that were rewritten")
    text: str = Field("", description="Exported text when no output file is given")
