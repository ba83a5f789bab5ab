"""Web search endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_search_gateway
from core.models.question import SearchRequest
from core.models.response import ErrorResponse, SearchResponse
from core.services.errors.error_handler import ErrorHandler
from core.services.search.search_gateway import SearchGateway

router = APIRouter()


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def search(request: SearchRequest, gateway: SearchGateway = Depends(get_search_gateway)):
    """
    Fetch organic web results for a query.
    
    Args:
        request: Body with the user query
    
    Returns:
        Normalized search results in provider order
    """
    try:
        results = gateway.search(request.query)
        return SearchResponse(results=results)
    except Exception as e:
        status_code, message = ErrorHandler.to_http(e, "search_failed")
        return JSONResponse(status_code=status_code, content={"error": message})
