"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.routes import search, generate
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("askweb Application Starting...")
    logger.info(f"SerpAPI: {'Configured' if settings.SERPAPI_KEY else 'Not Configured'}")
    logger.info(f"OpenAI: {'Configured' if settings.OPENAI_API_KEY else 'Not Configured'} (model: {settings.OPENAI_MODEL})")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed bodies with the same {error} envelope as the routes."""
    logger.warning(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    key = "query_required" if request.url.path.endswith("/search") else "generate_fields_required"
    return JSONResponse(status_code=400, content={"error": FallbackResponses.get_response(key)})

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router, tags=["Search"])
app.include_router(generate.router, tags=["Generate"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "askweb API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
