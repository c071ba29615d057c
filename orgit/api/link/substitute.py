"""Placeholder substitution for URL templates."""

import re
from collections.abc import Mapping

from .MalformedTemplate import MalformedTemplate

# A '%' followed by exactly one specifier character, or a trailing lone '%'
_PLACEHOLDER_PATTERN = re.compile(r"%(.|$)", re.DOTALL)


def substitute(template: str, bindings: Mapping[str, str]) -> str:
    """Replace ``%c`` placeholders in ``template`` with ``bindings[c]``.

    ``%%`` yields a literal ``%``. Any other specifier that is not bound
    raises MalformedTemplate. Bound values are inserted verbatim.

    Args:
        template: Format string, e.g. ``"https://github.com/%n/commit/%r"``.
        bindings: Specifier character to replacement string.

    Raises:
        MalformedTemplate: If the template references an unbound specifier.
    """

    def replace(match: re.Match) -> str:
        specifier = match.group(1)
        if specifier == "%":
            return "%"
        if specifier in bindings:
            return bindings[specifier]
        if specifier == "":
            raise MalformedTemplate(f"Template {template!r} ends with a lone '%'")
        raise MalformedTemplate(f"Template {template!r} references unbound placeholder '%{specifier}'")

    return _PLACEHOLDER_PATTERN.sub(replace, template)
