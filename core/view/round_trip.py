"""Two-stage round trip: retrieve search results, then synthesize from them."""
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from core.models.answer import AnswerPayload
from core.models.search import SearchResult


class QABackend(Protocol):
    """Anything that can serve the two stages, e.g. QAApiClient."""
    
    async def search(self, query: str) -> List[SearchResult]:
        ...
    
    async def generate(self, query: str, sources: Sequence[SearchResult]) -> AnswerPayload:
        ...


@dataclass(frozen=True)
class RetrievedContext:
    """Output of stage 1 and the only accepted input of stage 2."""
    query: str
    sources: Tuple[SearchResult, ...]


async def retrieve(backend: QABackend, query: str) -> RetrievedContext:
    """Stage 1: fetch search results for the query."""
    results = await backend.search(query)
    return RetrievedContext(query=query, sources=tuple(results))


async def synthesize(backend: QABackend, context: RetrievedContext) -> AnswerPayload:
    """Stage 2: answer the query from a completed retrieval."""
    if not isinstance(context, RetrievedContext):
        raise TypeError("synthesize() requires the RetrievedContext returned by retrieve()")
    return await backend.generate(context.query, list(context.sources))
