"""Search result data models."""
from pydantic import BaseModel, Field, field_validator


class SearchResult(BaseModel):
    """Single organic web search result, in provider relevance order.
    
    Unknown keys sent by a client are kept so that results echo back unchanged.
    """
    title: str = ""
    link: str = ""
    snippet: str = ""
    display_link: str = Field(default="", alias="displayLink")
    
    class Config:
        frozen = True
        populate_by_name = True
        extra = "allow"
    
    @field_validator("title", "link", "snippet", "display_link", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value
