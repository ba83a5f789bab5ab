"""Async HTTP client for the /search and /generate endpoints."""
from typing import List, Optional, Sequence

import httpx

from core.models.answer import AnswerPayload
from core.models.search import SearchResult
from core.services.errors.exceptions import SearchFailedError, SynthesisFailedError
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class QAApiClient:
    """Talks to the askweb API the way the browser view does."""
    
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
    
    async def __aenter__(self) -> "QAApiClient":
        return self
    
    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
    
    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()
    
    async def search(self, query: str) -> List[SearchResult]:
        """POST /search; any non-2xx answer or transport error is a search failure."""
        message = FallbackResponses.get_response("search_failed")
        try:
            response = await self.http_client.post("/search", json={"query": query})
            response.raise_for_status()
            data = response.json()
            return [SearchResult.model_validate(item) for item in data.get("results", [])]
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error(f"Search request failed: {str(e)}")
            raise SearchFailedError(message, cause=e) from e
    
    async def generate(self, query: str, sources: Sequence[SearchResult]) -> AnswerPayload:
        """POST /generate with the results of a previous search."""
        message = FallbackResponses.get_response("synthesis_failed")
        body = {
            "query": query,
            "searchResults": [source.model_dump(by_alias=True) for source in sources],
        }
        try:
            response = await self.http_client.post("/generate", json=body)
            response.raise_for_status()
            return AnswerPayload.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Generate request failed: {str(e)}")
            raise SynthesisFailedError(message, cause=e) from e
