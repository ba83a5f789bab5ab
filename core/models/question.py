"""Request body models."""
from pydantic import BaseModel, Field
from typing import Optional, List

from core.models.search import SearchResult


class SearchRequest(BaseModel):
    """Search request model."""
    query: Optional[str] = None


class GenerateRequest(BaseModel):
    """Answer generation request model."""
    query: Optional[str] = None
    search_results: Optional[List[SearchResult]] = Field(default=None, alias="searchResults")
    
    class Config:
        populate_by_name = True
