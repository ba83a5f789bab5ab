"""Exception taxonomy for the search and synthesis services."""
from typing import Optional


class AskWebError(Exception):
    """Base class for errors raised by the question answering services."""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidRequestError(AskWebError):
    """A required field is missing or empty. Correctable by the client."""


class MisconfiguredError(AskWebError):
    """A provider credential is missing. Correctable by the operator."""


class ProviderFailureError(AskWebError):
    """Network, auth or quota error reported by an external provider."""


class SearchFailedError(ProviderFailureError):
    """The web search provider call failed."""


class SynthesisFailedError(ProviderFailureError):
    """One of the language model calls failed; the whole synthesis is void."""
