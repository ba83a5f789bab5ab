"""Error taxonomy, handling and fallback responses."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.fallback_responses import FallbackResponses
from core.services.errors.exceptions import (
    AskWebError,
    InvalidRequestError,
    MisconfiguredError,
    ProviderFailureError,
    SearchFailedError,
    SynthesisFailedError,
)

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "AskWebError",
    "InvalidRequestError",
    "MisconfiguredError",
    "ProviderFailureError",
    "SearchFailedError",
    "SynthesisFailedError",
]
