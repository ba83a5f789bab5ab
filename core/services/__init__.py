"""Core services package, organized by concern.

Main Services:
- SearchGateway: web search through SerpAPI
- AnswerSynthesizer: cited answer and related questions through OpenAI
- PromptBuilder: prompt templates for both model calls

Usage:
    from core.services import SearchGateway, AnswerSynthesizer
    from app.config import settings

    gateway = SearchGateway.from_settings(settings)
    results = gateway.search("What is the capital of France?")

    synthesizer = AnswerSynthesizer.from_settings(settings)
    payload = synthesizer.synthesize("What is the capital of France?", results)
"""
from core.services.search import SearchGateway
from core.services.synthesis import AnswerSynthesizer
from core.services.prompts import PromptBuilder

__all__ = [
    "SearchGateway",
    "AnswerSynthesizer",
    "PromptBuilder",
]
