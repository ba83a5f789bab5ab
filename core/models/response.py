"""Response data models."""
from pydantic import BaseModel
from typing import List

from core.models.search import SearchResult


class SearchResponse(BaseModel):
    """Search endpoint response model."""
    results: List[SearchResult]


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
