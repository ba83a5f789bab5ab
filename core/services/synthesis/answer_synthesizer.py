"""Answer synthesizer: cited answer plus related questions from two model calls."""
from typing import Any, List, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from core.models.answer import AnswerPayload
from core.models.search import SearchResult
from core.services.errors.exceptions import (
    InvalidRequestError,
    MisconfiguredError,
    SynthesisFailedError,
)
from core.services.errors.fallback_responses import FallbackResponses
from core.services.prompts.prompt_builder import PromptBuilder
from core.utils.logger import logger, truncate_for_log


def parse_related_questions(text: Optional[str], limit: int = 5) -> List[str]:
    """Split raw model output into at most `limit` non-empty, trimmed lines."""
    if not text:
        return []
    questions = [line.strip() for line in text.splitlines()]
    return [q for q in questions if q][:limit]


def _message_text(message: Any) -> str:
    content = message.content if hasattr(message, "content") else message
    if content is None:
        return ""
    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, dict):
                parts.append(str(item.get("text", "")))
            else:
                parts.append(str(item))
        return "".join(parts)
    return str(content)


class AnswerSynthesizer:
    """
    Generates a cited answer for a query from web search results.
    
    Two independent model calls are made: one for the answer and one for
    follow-up questions. They succeed or fail together.
    """
    
    def __init__(
        self,
        answer_llm: Optional[BaseChatModel],
        related_llm: Optional[BaseChatModel],
        prompt_builder: Optional[PromptBuilder] = None,
        related_limit: int = 5
    ):
        self.answer_llm = answer_llm
        self.related_llm = related_llm
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.related_limit = related_limit
    
    @classmethod
    def from_settings(cls, settings) -> "AnswerSynthesizer":
        """Build a synthesizer backed by OpenAI chat models."""
        if not settings.OPENAI_API_KEY:
            logger.warning("OpenAI credentials not configured")
            return cls(None, None, related_limit=settings.RELATED_QUESTIONS_LIMIT)
        
        answer_llm = ChatOpenAI(
            model=settings.OPENAI_MODEL,
            api_key=settings.OPENAI_API_KEY,  # type: ignore
            temperature=settings.ANSWER_TEMPERATURE,
            max_tokens=settings.ANSWER_MAX_TOKENS,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0
        )
        related_llm = ChatOpenAI(
            model=settings.OPENAI_MODEL,
            api_key=settings.OPENAI_API_KEY,  # type: ignore
            temperature=settings.RELATED_TEMPERATURE,
            max_tokens=settings.RELATED_MAX_TOKENS,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0
        )
        return cls(answer_llm, related_llm, related_limit=settings.RELATED_QUESTIONS_LIMIT)
    
    def synthesize(self, query: Optional[str], sources: Optional[Sequence[SearchResult]]) -> AnswerPayload:
        """
        Answer a query using the supplied search results.
        
        Args:
            query: User question
            sources: Search results in relevance order; may be empty
        
        Returns:
            AnswerPayload whose sources are exactly the given results
        
        Raises:
            InvalidRequestError: query or sources missing
            MisconfiguredError: no model credential
            SynthesisFailedError: either model call failed
        """
        if not query or not query.strip() or sources is None:
            raise InvalidRequestError(FallbackResponses.get_response("generate_fields_required"))
        
        if self.answer_llm is None or self.related_llm is None:
            raise MisconfiguredError(FallbackResponses.get_response("llm_misconfigured"))
        
        logger.info(f"Synthesizing answer from {len(sources)} sources for: {truncate_for_log(query)}")
        try:
            response = self._generate_answer(query, sources)
            related_questions = self._generate_related_questions(query)
        except Exception as e:
            raise SynthesisFailedError(FallbackResponses.get_response("synthesis_failed"), cause=e) from e
        
        return AnswerPayload(
            response=response,
            sources=sources,
            relatedQuestions=related_questions
        )
    
    def _generate_answer(self, query: str, sources: Sequence[SearchResult]) -> str:
        messages = self.prompt_builder.build_answer_messages(query, sources)
        result = self.answer_llm.invoke(messages)
        text = _message_text(result).strip()
        if not text:
            logger.warning("Model returned an empty answer, using fallback text")
            return FallbackResponses.get_response("no_response")
        return text
    
    def _generate_related_questions(self, query: str) -> List[str]:
        messages = self.prompt_builder.build_related_messages(query, self.related_limit)
        result = self.related_llm.invoke(messages)
        questions = parse_related_questions(_message_text(result), self.related_limit)
        logger.debug(f"Generated {len(questions)} related questions")
        return questions
