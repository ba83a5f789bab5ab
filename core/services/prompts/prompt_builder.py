"""Prompt builder for cited answers and related questions."""
from functools import lru_cache
from pathlib import Path
from typing import List, Sequence

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from core.models.search import SearchResult
from core.utils.logger import logger

_PROMPTS_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=None)
def _read_template(path: Path) -> str:
    content = path.read_text(encoding="utf-8")
    # Extract content after YAML frontmatter (after ---\n---\n)
    if content.startswith("---\n"):
        parts = content.split("---\n", 2)
        if len(parts) >= 3:
            return parts[2].strip()
    return content.strip()


class PromptBuilder:
    """Formats search results and the user question into chat messages."""
    
    def __init__(self, prompts_dir: Path = _PROMPTS_DIR):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = prompts_dir
    
    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        prompt_path = self._prompts_dir / filename
        try:
            return _read_template(prompt_path)
        except OSError as e:
            logger.error(f"Failed to load prompt {filename}: {str(e)}")
            raise
    
    def build_context(self, sources: Sequence[SearchResult]) -> str:
        """Number each source from 1 and join the blocks with a blank line."""
        blocks = [
            f"[{i}] {source.title}\n{source.snippet}\nSource: {source.link}\n"
            for i, source in enumerate(sources, 1)
        ]
        return "\n".join(blocks)
    
    def build_answer_messages(self, question: str, sources: Sequence[SearchResult]) -> List[BaseMessage]:
        """Build (system, user) messages for the cited answer call."""
        template = self._load_prompt("answer_prompt_template.promptly")
        prompt = template.format(question=question, context=self.build_context(sources))
        return [
            SystemMessage(content=self._load_prompt("answer_system_prompt.promptly")),
            HumanMessage(content=prompt)
        ]
    
    def build_related_messages(self, question: str, count: int = 5) -> List[BaseMessage]:
        """Build (system, user) messages for the related questions call."""
        template = self._load_prompt("related_questions_template.promptly")
        prompt = template.format(question=question, count=count)
        return [
            SystemMessage(content=self._load_prompt("related_system_prompt.promptly")),
            HumanMessage(content=prompt)
        ]
