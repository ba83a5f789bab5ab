"""Conversation view state machine: Idle -> Loading -> Answered | Failed."""
from typing import List, Optional, Tuple

from core.models.search import SearchResult
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger, truncate_for_log
from core.view.rendering import SourceCard, render_paragraphs, render_sources
from core.view.round_trip import QABackend, retrieve, synthesize
from core.view.state import Answered, ConversationState, Failed, Idle, Loading, Tab


class ConversationView:
    """
    Drives one conversation slot through search and synthesis.
    
    Every accepted query gets a new request id. A response is applied only if
    its request id is still the current one, so results of a cancelled or
    superseded request never overwrite newer state.
    """
    
    def __init__(self, backend: QABackend):
        self.backend = backend
        self._state: ConversationState = Idle()
        self._request_id = 0
        self._active_tab = Tab.ANSWER
    
    @property
    def state(self) -> ConversationState:
        return self._state
    
    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)
    
    @property
    def active_tab(self) -> Tab:
        return self._active_tab
    
    @property
    def question(self) -> Optional[str]:
        return getattr(self._state, "question", None)
    
    @property
    def sources(self) -> Tuple[SearchResult, ...]:
        return getattr(self._state, "sources", ())
    
    @property
    def error(self) -> Optional[str]:
        return self._state.error if isinstance(self._state, Failed) else None
    
    @property
    def related_questions(self) -> Tuple[str, ...]:
        return self._state.related_questions if isinstance(self._state, Answered) else ()
    
    def can_submit(self, text: Optional[str]) -> bool:
        """Whether the search trigger is enabled for this input."""
        return bool(text and text.strip()) and not self.loading
    
    async def submit(self, text: str) -> bool:
        """
        Run one round trip for `text`.
        
        Returns False without touching state when the input is blank or a
        request is already in flight.
        """
        if not self.can_submit(text):
            return False
        
        self._request_id += 1
        request_id = self._request_id
        self._state = Loading(request_id=request_id, question=text)
        logger.info(f"Request {request_id}: {truncate_for_log(text)}")
        
        try:
            context = await retrieve(self.backend, text)
        except Exception as e:
            logger.error(f"Request {request_id} search stage failed: {str(e)}")
            self._apply(request_id, Failed(
                request_id=request_id,
                question=text,
                error=FallbackResponses.get_response("search_failed")
            ))
            return True
        
        if not self._apply(request_id, Loading(request_id=request_id, question=text, sources=context.sources)):
            return True
        
        try:
            payload = await synthesize(self.backend, context)
        except Exception as e:
            logger.error(f"Request {request_id} synthesis stage failed: {str(e)}")
            self._apply(request_id, Failed(
                request_id=request_id,
                question=text,
                error=FallbackResponses.get_response("synthesis_failed"),
                sources=context.sources
            ))
            return True
        
        if self._apply(request_id, Answered(
            request_id=request_id,
            question=text,
            response=payload.response,
            sources=tuple(payload.sources),
            related_questions=tuple(payload.related_questions)
        )):
            self._active_tab = Tab.ANSWER
        return True
    
    async def click_related_question(self, question: str) -> bool:
        """Ask a suggested question as a brand new query."""
        return await self.submit(question)
    
    def cancel(self) -> None:
        """Abandon the in-flight request, if any; its response will be dropped."""
        if self.loading:
            logger.info(f"Request {self._request_id} cancelled")
            self._request_id += 1
            self._state = Idle()
    
    def select_tab(self, tab: Tab) -> None:
        self._active_tab = Tab(tab)
    
    def answer_paragraphs(self) -> List[str]:
        if isinstance(self._state, Answered):
            return render_paragraphs(self._state.response)
        return []
    
    def source_cards(self) -> List[SourceCard]:
        return render_sources(self.sources)
    
    def _apply(self, request_id: int, new_state: ConversationState) -> bool:
        if request_id != self._request_id:
            logger.debug(f"Discarding stale response for request {request_id}")
            return False
        self._state = new_state
        return True
