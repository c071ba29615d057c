"""Output formats a resolved URL can be embedded into."""

from enum import Enum


class OutputFormat(str, Enum):
    PLAIN_TEXT = "text"
    HTML = "html"
    LATEX = "latex"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Map an export backend name (``html``, ``latex``, ``ascii``...) to a format.

        Unknown names map to OTHER.
        """
        return _BACKEND_NAMES.get(name.strip().lower(), cls.OTHER)


_BACKEND_NAMES = {
    "html": OutputFormat.HTML,
    "latex": OutputFormat.LATEX,
    "text": OutputFormat.PLAIN_TEXT,
    "plain": OutputFormat.PLAIN_TEXT,
    "ascii": OutputFormat.PLAIN_TEXT,
    "other": OutputFormat.OTHER,
}
