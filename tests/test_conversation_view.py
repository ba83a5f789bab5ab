"""Tests for the conversation view state machine."""
import asyncio

import httpx
import pytest

from app.main import app
from core.models.answer import AnswerPayload
from core.models.search import SearchResult
from core.services.errors.exceptions import SearchFailedError, SynthesisFailedError
from core.services.synthesis.answer_synthesizer import AnswerSynthesizer
from core.view import (
    Answered,
    ConversationView,
    Failed,
    Idle,
    Loading,
    QAApiClient,
    RetrievedContext,
    Tab,
    render_paragraphs,
    render_sources,
    retrieve,
    synthesize,
)
from tests.fakes import make_chat_model

PARIS = SearchResult(title="Paris", link="https://x", snippet="Paris is the capital of France", displayLink="x")


class FakeBackend:
    """In-memory backend recording the calls the view makes."""
    
    def __init__(self, results=None, response="Paris [1]", related=("Q1", "Q2"), search_error=None, generate_error=None):
        self.results = list(results if results is not None else [PARIS])
        self.response = response
        self.related = list(related)
        self.search_error = search_error
        self.generate_error = generate_error
        self.search_calls = []
        self.generate_calls = []
    
    async def search(self, query):
        self.search_calls.append(query)
        if self.search_error:
            raise self.search_error
        return self.results
    
    async def generate(self, query, sources):
        self.generate_calls.append((query, list(sources)))
        if self.generate_error:
            raise self.generate_error
        return AnswerPayload(response=self.response, sources=list(sources), relatedQuestions=self.related)


class GatedBackend(FakeBackend):
    """Backend whose search blocks until released, one gate per query."""
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.gates = {}
    
    async def search(self, query):
        gate = self.gates.setdefault(query, asyncio.Event())
        await gate.wait()
        return [SearchResult(title=f"result for {query}")]
    
    async def generate(self, query, sources):
        self.generate_calls.append((query, list(sources)))
        return AnswerPayload(response=f"answer to {query}", sources=list(sources), relatedQuestions=[])


class TestRoundTrip:
    """Test cases for the two-stage pipeline."""
    
    @pytest.mark.asyncio
    async def test_retrieve_then_synthesize(self):
        backend = FakeBackend()
        context = await retrieve(backend, "capital of France")
        assert context == RetrievedContext(query="capital of France", sources=(PARIS,))
        
        payload = await synthesize(backend, context)
        assert payload.response == "Paris [1]"
        assert backend.generate_calls == [("capital of France", [PARIS])]
    
    @pytest.mark.asyncio
    async def test_synthesize_requires_retrieved_context(self):
        backend = FakeBackend()
        with pytest.raises(TypeError):
            await synthesize(backend, ("capital of France", [PARIS]))
        assert backend.generate_calls == []


class TestConversationView:
    """Test cases for ConversationView."""
    
    def test_starts_idle(self):
        view = ConversationView(FakeBackend())
        assert isinstance(view.state, Idle)
        assert view.loading is False
        assert view.active_tab == Tab.ANSWER
        assert view.question is None
    
    @pytest.mark.asyncio
    async def test_successful_round_trip(self):
        backend = FakeBackend(related=("What is the population of Paris",))
        view = ConversationView(backend)
        view.select_tab(Tab.SOURCES)
        
        assert await view.submit("What is the capital of France?") is True
        
        state = view.state
        assert isinstance(state, Answered)
        assert state.question == "What is the capital of France?"
        assert state.response == "Paris [1]"
        assert state.sources == (PARIS,)
        assert view.related_questions == ("What is the population of Paris",)
        assert view.active_tab == Tab.ANSWER
        assert view.error is None
        assert backend.generate_calls == [("What is the capital of France?", [PARIS])]
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", None])
    async def test_blank_input_is_ignored(self, text):
        backend = FakeBackend()
        view = ConversationView(backend)
        assert view.can_submit(text) is False
        assert await view.submit(text) is False
        assert isinstance(view.state, Idle)
        assert backend.search_calls == []
    
    @pytest.mark.asyncio
    async def test_search_failure_never_calls_generate(self):
        """Test a failed search leaves synthesis unissued."""
        backend = FakeBackend(search_error=SearchFailedError("Search failed"))
        view = ConversationView(backend)
        
        await view.submit("anything")
        
        assert isinstance(view.state, Failed)
        assert view.error == "Search failed"
        assert view.sources == ()
        assert backend.generate_calls == []
    
    @pytest.mark.asyncio
    async def test_synthesis_failure_keeps_sources(self):
        backend = FakeBackend(generate_error=SynthesisFailedError("Failed to generate response"))
        view = ConversationView(backend)
        
        await view.submit("anything")
        
        assert isinstance(view.state, Failed)
        assert view.error == "Failed to generate response"
        assert view.sources == (PARIS,)
        assert view.answer_paragraphs() == []
        assert [card.label for card in view.source_cards()] == ["[1] Paris"]
    
    @pytest.mark.asyncio
    async def test_new_query_clears_previous_failure(self):
        backend = FakeBackend(search_error=SearchFailedError("Search failed"))
        view = ConversationView(backend)
        await view.submit("first")
        
        backend.search_error = None
        await view.submit("second")
        assert isinstance(view.state, Answered)
        assert view.error is None
        assert view.question == "second"
    
    @pytest.mark.asyncio
    async def test_related_question_replaces_conversation(self):
        backend = FakeBackend()
        view = ConversationView(backend)
        await view.submit("What is the capital of France?")
        
        await view.click_related_question("What is the population of Paris")
        
        assert view.question == "What is the population of Paris"
        assert backend.search_calls == ["What is the capital of France?", "What is the population of Paris"]
        assert backend.generate_calls[-1][0] == "What is the population of Paris"
    
    @pytest.mark.asyncio
    async def test_submit_is_rejected_while_loading(self):
        backend = GatedBackend()
        view = ConversationView(backend)
        
        first = asyncio.create_task(view.submit("first"))
        await asyncio.sleep(0)
        assert isinstance(view.state, Loading)
        assert view.can_submit("second") is False
        assert await view.submit("second") is False
        
        backend.gates["first"].set()
        await first
        assert isinstance(view.state, Answered)
        assert view.state.response == "answer to first"
    
    @pytest.mark.asyncio
    async def test_cancelled_request_response_is_discarded(self):
        """Test a late response from a superseded request never lands."""
        backend = GatedBackend()
        view = ConversationView(backend)
        
        stale = asyncio.create_task(view.submit("first"))
        await asyncio.sleep(0)
        view.cancel()
        assert isinstance(view.state, Idle)
        
        fresh = asyncio.create_task(view.submit("second"))
        await asyncio.sleep(0)
        backend.gates["second"].set()
        await fresh
        assert view.state.response == "answer to second"
        
        backend.gates["first"].set()
        await stale
        assert view.state.response == "answer to second"
        assert [call[0] for call in backend.generate_calls] == ["second"]
    
    @pytest.mark.asyncio
    async def test_answer_rendering(self):
        backend = FakeBackend(response="Paris is the capital [1].\n\nIt lies on the Seine [1].\n")
        view = ConversationView(backend)
        await view.submit("q")
        assert view.answer_paragraphs() == ["Paris is the capital [1].", "It lies on the Seine [1]."]


class TestRendering:
    """Test cases for rendering helpers."""
    
    def test_paragraphs_skip_blank_lines(self):
        assert render_paragraphs("a\n\n  \nb [2]") == ["a", "b [2]"]
        assert render_paragraphs("") == []
    
    def test_paragraphs_handle_crlf(self):
        assert render_paragraphs("Paris [1].\r\n\r\nSeine [1].\r\n") == ["Paris [1].", "Seine [1]."]
    
    def test_source_cards_are_numbered(self):
        second = SearchResult(title="France", link="https://y", snippet="A country", displayLink="y")
        cards = render_sources([PARIS, second])
        assert [card.label for card in cards] == ["[1] Paris", "[2] France"]
        assert cards[1].display_link == "y"
        assert cards[0].snippet == "Paris is the capital of France"


class TestViewAgainstApi:
    """Round trips through the real app over an in-process transport."""
    
    @pytest.mark.asyncio
    async def test_full_round_trip(self, make_gateway, override_services):
        answer_llm = make_chat_model("The capital of France is Paris [1].")
        related_llm = make_chat_model("What is the population of Paris\n\nWhat river runs through Paris")
        override_services(
            gateway=make_gateway({"organic_results": [{
                "title": "Paris",
                "link": "https://x",
                "snippet": "Paris is the capital of France",
                "displayed_link": "x",
            }]}),
            synthesizer=AnswerSynthesizer(answer_llm, related_llm)
        )
        
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
            view = ConversationView(QAApiClient(http_client=http_client))
            await view.submit("What is the capital of France?")
        
        assert isinstance(view.state, Answered)
        assert view.sources == (PARIS,)
        assert view.related_questions == ("What is the population of Paris", "What river runs through Paris")
        assert "[1] Paris\nParis is the capital of France\nSource: https://x" in answer_llm.invoke.call_args.args[0][1].content
    
    @pytest.mark.asyncio
    async def test_search_failure_never_reaches_model(self, make_gateway, override_services):
        """Test the model client is never called when search fails."""
        answer_llm = make_chat_model("unused")
        related_llm = make_chat_model("unused")
        override_services(
            gateway=make_gateway({"error": "quota"}, status_code=429),
            synthesizer=AnswerSynthesizer(answer_llm, related_llm)
        )
        
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
            view = ConversationView(QAApiClient(http_client=http_client))
            await view.submit("anything")
        
        assert view.error == "Search failed"
        assert answer_llm.invoke.call_count == 0
        assert related_llm.invoke.call_count == 0
