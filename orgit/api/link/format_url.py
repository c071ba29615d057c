"""Embed a resolved URL into an output format."""

from .OutputFormat import OutputFormat


def format_url(url: str, output_format: OutputFormat, description: str | None = None) -> str:
    """Wrap ``url`` for ``output_format``.

    HTML and LaTeX get a hyperlink showing ``description`` (or the URL
    itself when there is none). Plain text and other formats get the bare
    URL and drop the description.
    """
    text = description if description else url
    if output_format is OutputFormat.HTML:
        return f'<a href="{url}">{text}</a>'
    if output_format is OutputFormat.LATEX:
        return f"\\href{{{url}}}{{{text}}}"
    return url
