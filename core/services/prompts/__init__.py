"""Prompt templates and builders."""
from core.services.prompts.prompt_builder import PromptBuilder

__all__ = ["PromptBuilder"]
