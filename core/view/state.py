"""Conversation states. Each query replaces the previous state entirely."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from core.models.search import SearchResult


class Tab(str, Enum):
    ANSWER = "answer"
    SOURCES = "sources"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    request_id: int
    question: str
    # Filled in once the search stage has returned
    sources: Tuple[SearchResult, ...] = ()


@dataclass(frozen=True)
class Answered:
    request_id: int
    question: str
    response: str
    sources: Tuple[SearchResult, ...]
    related_questions: Tuple[str, ...]


@dataclass(frozen=True)
class Failed:
    request_id: int
    question: str
    error: str
    sources: Tuple[SearchResult, ...] = ()


ConversationState = Union[Idle, Loading, Answered, Failed]
