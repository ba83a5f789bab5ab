"""Shared fixtures for the test suite."""
import httpx
import pytest

from app.dependencies import get_answer_synthesizer, get_search_gateway
from app.main import app
from core.models.search import SearchResult
from core.services.search.search_gateway import SearchGateway
from core.services.synthesis.answer_synthesizer import AnswerSynthesizer
from tests.fakes import make_chat_model, serp_transport


@pytest.fixture
def paris_result():
    return SearchResult(
        title="Paris",
        link="https://x",
        snippet="Paris is the capital of France",
        displayLink="x"
    )


@pytest.fixture
def organic_results():
    return [
        {
            "title": f"Result {i}",
            "link": f"https://example.com/{i}",
            "snippet": f"Snippet {i}",
            "displayed_link": f"example.com/{i}",
        }
        for i in range(1, 4)
    ]


@pytest.fixture
def make_gateway():
    def _make(payload=None, status_code=200, api_key="serp-key", calls=None):
        client = httpx.Client(transport=serp_transport(payload, status_code, calls))
        return SearchGateway(api_key=api_key, http_client=client)
    return _make


@pytest.fixture
def override_services():
    """Swap the app's service providers for test doubles."""
    def _override(gateway=None, synthesizer=None):
        if gateway is not None:
            app.dependency_overrides[get_search_gateway] = lambda: gateway
        if synthesizer is not None:
            app.dependency_overrides[get_answer_synthesizer] = lambda: synthesizer
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def make_synthesizer():
    def _make(answer="Paris is the capital of France [1].", related="Q1\nQ2\nQ3\nQ4\nQ5"):
        return AnswerSynthesizer(make_chat_model(answer), make_chat_model(related))
    return _make
