"""Answer generation endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_answer_synthesizer
from core.models.answer import AnswerPayload
from core.models.question import GenerateRequest
from core.models.response import ErrorResponse
from core.services.errors.error_handler import ErrorHandler
from core.services.synthesis.answer_synthesizer import AnswerSynthesizer

router = APIRouter()


@router.post(
    "/generate",
    response_model=AnswerPayload,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def generate(request: GenerateRequest, synthesizer: AnswerSynthesizer = Depends(get_answer_synthesizer)):
    """
    Generate a cited answer and related questions from search results.
    
    The `sources` in the response are the `searchResults` that were sent,
    unchanged and in the same order.
    """
    try:
        return synthesizer.synthesize(request.query, request.search_results)
    except Exception as e:
        status_code, message = ErrorHandler.to_http(e, "synthesis_failed")
        return JSONResponse(status_code=status_code, content={"error": message})
