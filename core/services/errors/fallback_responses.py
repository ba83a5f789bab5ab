"""Fallback responses for error scenarios."""


class FallbackResponses:
    """Fixed human-readable messages returned to clients."""
    
    RESPONSES = {
        "no_response": "No response generated",
        "search_failed": "Search failed",
        "synthesis_failed": "Failed to generate response",
        "query_required": "Query is required",
        "generate_fields_required": "Query and search results are required",
        "search_misconfigured": "SERPAPI_KEY not configured",
        "llm_misconfigured": "OPENAI_API_KEY not configured",
        "unexpected": "An error occurred",
    }
    
    @classmethod
    def get_response(cls, error_type: str) -> str:
        """
        Get fallback response for error type.
        
        Args:
            error_type: Key into RESPONSES (search_failed, synthesis_failed, etc.)
        
        Returns:
            Fallback response text
        """
        return cls.RESPONSES.get(error_type, cls.RESPONSES["unexpected"])
