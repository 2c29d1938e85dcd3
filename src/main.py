"""
SpamGuard AI Engine - FastAPI Application

Main entry point for the spam detection service providing:
- Spam/safe classification with confidence
- Natural-language explanation of a classification
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.dependencies import build_handler
from src.api.errors import ErrorResponse, SpamGuardError
from src.api.middleware import CORSHeadersMiddleware, RequestIDLogFilter, RequestIDMiddleware
from src.api.routes import detect, health
from src.config.settings import settings

# Configure logging; every line carries the request ID ("-" outside requests)
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
)
for log_handler in logging.getLogger().handlers:
    log_handler.addFilter(RequestIDLogFilter())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 60)
    logger.info("Starting SpamGuard AI Engine")
    logger.info("=" * 60)
    logger.info(f"Classification provider: {settings.classification_provider}")
    logger.info(f"Gateway model: {settings.ai_gateway_model}")
    logger.info(f"Port: {settings.api_port}")
    if not settings.gateway_configured:
        logger.warning("AI_GATEWAY_API_KEY not set - requests will fail until configured")
    # Built once; shared read-only by all requests
    app.state.handler = build_handler(settings)
    yield


# Create app
app = FastAPI(
    title="SpamGuard AI Engine",
    description="Spam/safe text classification with AI explanations",
    version="0.1.0",
    lifespan=lifespan,
)

# Request ID middleware (added first, so it runs inside the CORS layer)
app.add_middleware(RequestIDMiddleware)

# CORS headers on every response; OPTIONS answered with 204 before routing
app.add_middleware(CORSHeadersMiddleware, headers=settings.get_cors_headers())


# Client-facing failures all share the {"error": message} shape
@app.exception_handler(SpamGuardError)
async def spamguard_error_handler(request: Request, exc: SpamGuardError) -> JSONResponse:
    """Render SpamGuard exceptions as ``{"error": message}``."""
    logger.info("Request failed with %s (%s)", exc.error_code.value, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(mode="json"),
    )


# Routing errors (unknown path, etc.) from FastAPI itself, reshaped to {"error"}
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors with the service's error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


# Last resort: anything that escaped the handler boundary
@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with the same error shape."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(exc) or "Unknown error").model_dump(mode="json"),
        headers=settings.get_cors_headers(),
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(detect.router, tags=["Spam Detection"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app", host=settings.api_host, port=settings.api_port, reload=settings.debug
    )
