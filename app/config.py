"""Configuration management for the application."""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # API Configuration
    API_TITLE: str = "askweb"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # SerpAPI (web search provider)
    SERPAPI_KEY: Optional[str] = None
    SERPAPI_ENDPOINT: str = "https://serpapi.com/search"
    SERPAPI_ENGINE: str = "google"
    SEARCH_NUM_RESULTS: int = 10
    SEARCH_TIMEOUT_SECONDS: float = 15.0
    
    # OpenAI (model provider)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    ANSWER_MAX_TOKENS: int = 1000
    ANSWER_TEMPERATURE: float = 0.7
    RELATED_MAX_TOKENS: int = 200
    RELATED_TEMPERATURE: float = 0.8
    RELATED_QUESTIONS_LIMIT: int = 5
    LLM_TIMEOUT_SECONDS: float = 30.0
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
