"""Tests for output-format wrapping of resolved URLs."""

from orgit.api.link.format_url import format_url
from orgit.api.link.OutputFormat import OutputFormat

URL = "https://github.com/alice/proj/commit/deadbeef"


def test_html_anchor():
    assert format_url(URL, OutputFormat.HTML, "DESC") == f'<a href="{URL}">DESC</a>'


def test_latex_href():
    assert format_url(URL, OutputFormat.LATEX, "DESC") == f"\\href{{{URL}}}{{DESC}}"


def test_plain_text_drops_description():
    assert format_url(URL, OutputFormat.PLAIN_TEXT, "DESC") == URL


def test_other_drops_description():
    assert format_url(URL, OutputFormat.OTHER, "DESC") == URL


def test_missing_description_shows_url():
    assert format_url(URL, OutputFormat.HTML) == f'<a href="{URL}">{URL}</a>'
    assert format_url(URL, OutputFormat.LATEX, "") == f"\\href{{{URL}}}{{{URL}}}"
