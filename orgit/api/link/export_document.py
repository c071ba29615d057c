"""Rewrite orgit bracket links in a document for export."""

import logging
import re

from .ExportResult import ExportResult
from .LinkKind import LinkKind
from .LinkResolver import LinkResolver
from .OutputFormat import OutputFormat

logger = logging.getLogger(__name__)

# [[LINK][DESCRIPTION]] or [[LINK]]
BRACKET_LINK_PATTERN = re.compile(r"\[\[([^\]\[]+)\](?:\[([^\]]*)\])?\]")


def _is_orgit_link(target: str) -> bool:
    scheme, sep, _ = target.partition(":")
    return bool(sep) and LinkKind.from_scheme(scheme) is not None


def export_document(text: str, output_format: OutputFormat, resolver: LinkResolver) -> ExportResult:
    """Replace every orgit bracket link in ``text`` with its resolved form.

    Links with other schemes, and everything outside bracket links, are
    left untouched. Resolution errors propagate; the first bad link aborts
    the export.
    """
    result = ExportResult(text="")

    def replace(match: re.Match) -> str:
        target = match.group(1).strip()
        if not _is_orgit_link(target):
            return match.group(0)
        description = match.group(2)
        resolved = resolver.resolve_link(target, output_format, description)
        result.links.append(target)
        return resolved

    result.text = BRACKET_LINK_PATTERN.sub(replace, text)
    logger.debug(f"Rewrote {result.rewritten} link(s) for {output_format.value} export")
    return result
