"""Answer synthesis services."""
from core.services.synthesis.answer_synthesizer import AnswerSynthesizer, parse_related_questions

__all__ = ["AnswerSynthesizer", "parse_related_questions"]
