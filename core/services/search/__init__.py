"""Web search services."""
from core.services.search.search_gateway import SearchGateway

__all__ = ["SearchGateway"]
