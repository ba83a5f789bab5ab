"""Error handling utilities."""
from typing import Tuple

from core.services.errors.exceptions import (
    InvalidRequestError,
    MisconfiguredError,
    ProviderFailureError,
)
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Maps service exceptions to an HTTP status and a client-facing message."""
    
    @staticmethod
    def handle_invalid_request(error: InvalidRequestError) -> Tuple[int, str]:
        """Client-correctable input problem."""
        logger.warning(f"Invalid request: {error.message}")
        return 400, error.message
    
    @staticmethod
    def handle_misconfigured(error: MisconfiguredError) -> Tuple[int, str]:
        """Missing provider credential."""
        logger.error(f"Misconfigured: {error.message}")
        return 500, error.message
    
    @staticmethod
    def handle_provider_failure(error: ProviderFailureError, fallback_key: str) -> Tuple[int, str]:
        """Provider call failed; the detail stays in the log."""
        cause = error.cause if error.cause is not None else error
        logger.error(f"Provider failure: {error.message} ({type(cause).__name__}: {cause})")
        return 500, FallbackResponses.get_response(fallback_key)
    
    @staticmethod
    def to_http(error: Exception, fallback_key: str) -> Tuple[int, str]:
        """
        Translate any exception raised behind an endpoint.
        
        Args:
            error: Exception caught at the endpoint boundary
            fallback_key: FallbackResponses key used for provider or unexpected failures
        
        Returns:
            (status_code, message)
        """
        if isinstance(error, InvalidRequestError):
            return ErrorHandler.handle_invalid_request(error)
        if isinstance(error, MisconfiguredError):
            return ErrorHandler.handle_misconfigured(error)
        if isinstance(error, ProviderFailureError):
            return ErrorHandler.handle_provider_failure(error, fallback_key)
        logger.error(f"Unexpected error: {str(error)}", exc_info=error)
        return 500, FallbackResponses.get_response(fallback_key)
