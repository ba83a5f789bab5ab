"""Plain-data rendering of an answer and its sources."""
from dataclasses import dataclass
from typing import List, Sequence

from core.models.search import SearchResult


@dataclass(frozen=True)
class SourceCard:
    label: str
    link: str
    display_link: str
    snippet: str


def render_paragraphs(text: str) -> List[str]:
    """One paragraph per non-empty line. Citation markers stay literal text."""
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip()]


def render_sources(sources: Sequence[SearchResult]) -> List[SourceCard]:
    """Source cards numbered the same way the answer cites them."""
    return [
        SourceCard(
            label=f"[{i}] {source.title}",
            link=source.link,
            display_link=source.display_link,
            snippet=source.snippet,
        )
        for i, source in enumerate(sources, 1)
    ]
