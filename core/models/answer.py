"""Answer response models."""
from pydantic import BaseModel, Field
from typing import List

from core.models.search import SearchResult


class AnswerPayload(BaseModel):
    """Cited answer with the sources it was grounded on and follow-up questions.
    
    `response` contains bracketed citation markers like [1] that refer to the
    1-based position in `sources`. The markers come from the model and are not
    checked against the number of sources.
    """
    response: str
    sources: List[SearchResult]
    related_questions: List[str] = Field(default_factory=list, alias="relatedQuestions")
    
    class Config:
        populate_by_name = True
