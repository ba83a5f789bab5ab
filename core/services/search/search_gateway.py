"""Search gateway for querying the SerpAPI web search provider."""
from typing import Any, Dict, List, Optional

import httpx

from core.models.search import SearchResult
from core.services.errors.exceptions import (
    InvalidRequestError,
    MisconfiguredError,
    SearchFailedError,
)
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger, truncate_for_log


class SearchGateway:
    """Service for fetching organic web results for a free-text query."""
    
    def __init__(
        self,
        api_key: Optional[str],
        endpoint: str = "https://serpapi.com/search",
        engine: str = "google",
        num_results: int = 10,
        timeout: float = 15.0,
        http_client: Optional[httpx.Client] = None
    ):
        self.api_key = api_key
        self.endpoint = endpoint
        self.engine = engine
        self.num_results = num_results
        self.timeout = timeout
        self.http_client = http_client
        if not api_key:
            logger.warning("SerpAPI credentials not configured")
    
    @classmethod
    def from_settings(cls, settings, http_client: Optional[httpx.Client] = None) -> "SearchGateway":
        """Build a gateway from application settings."""
        return cls(
            api_key=settings.SERPAPI_KEY,
            endpoint=settings.SERPAPI_ENDPOINT,
            engine=settings.SERPAPI_ENGINE,
            num_results=settings.SEARCH_NUM_RESULTS,
            timeout=settings.SEARCH_TIMEOUT_SECONDS,
            http_client=http_client
        )
    
    def search(self, query: Optional[str]) -> List[SearchResult]:
        """
        Search the web for a query.
        
        Args:
            query: Free-text user query
        
        Returns:
            Normalized results in provider relevance order
        
        Raises:
            InvalidRequestError: query is missing or blank
            MisconfiguredError: no provider credential
            SearchFailedError: transport or provider error
        """
        if not query or not query.strip():
            raise InvalidRequestError(FallbackResponses.get_response("query_required"))
        
        if not self.api_key:
            raise MisconfiguredError(FallbackResponses.get_response("search_misconfigured"))
        
        params = {
            "q": query,
            "api_key": self.api_key,
            "engine": self.engine,
            "num": self.num_results,
        }
        
        logger.info(f"Searching web for: {truncate_for_log(query)}")
        try:
            data = self._fetch(params)
        except httpx.HTTPError as e:
            raise SearchFailedError(FallbackResponses.get_response("search_failed"), cause=e) from e
        except ValueError as e:
            # Body was not JSON
            raise SearchFailedError(FallbackResponses.get_response("search_failed"), cause=e) from e
        
        if not isinstance(data, dict):
            raise SearchFailedError(FallbackResponses.get_response("search_failed"))
        
        organic = data.get("organic_results") or []
        results = [self._to_search_result(record) for record in organic if isinstance(record, dict)]
        logger.debug(f"Search returned {len(results)} organic results")
        return results
    
    def _fetch(self, params: Dict[str, Any]) -> Any:
        """Issue the provider request and decode its JSON body."""
        if self.http_client is not None:
            response = self.http_client.get(self.endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        
        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(self.endpoint, params=params)
            response.raise_for_status()
            return response.json()
    
    @staticmethod
    def _to_search_result(record: Dict[str, Any]) -> SearchResult:
        """Map a provider record, substituting empty strings for missing fields."""
        return SearchResult(
            title=record.get("title") or "",
            link=record.get("link") or "",
            snippet=record.get("snippet") or "",
            displayLink=record.get("displayed_link") or ""
        )
