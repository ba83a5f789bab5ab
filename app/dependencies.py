"""FastAPI dependency providers for the gateway services."""
from functools import lru_cache

from app.config import settings
from core.services.search.search_gateway import SearchGateway
from core.services.synthesis.answer_synthesizer import AnswerSynthesizer


@lru_cache(maxsize=1)
def get_search_gateway() -> SearchGateway:
    """Search gateway configured from the environment."""
    return SearchGateway.from_settings(settings)


@lru_cache(maxsize=1)
def get_answer_synthesizer() -> AnswerSynthesizer:
    """Answer synthesizer configured from the environment."""
    return AnswerSynthesizer.from_settings(settings)
