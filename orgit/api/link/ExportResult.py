"""Result of exporting a document."""

from dataclasses import dataclass, field


@dataclass
class ExportResult:
    text: str
    links: list[str] = field(default_factory=list)

    @property
    def rewritten(self) -> int:
        return len(self.links)
