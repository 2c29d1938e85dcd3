"""
Health check API endpoint.

GET /health - Check service configuration.
"""
import time

from fastapi import APIRouter, Depends

from src.api.dependencies import get_handler
from src.api.models.responses import HealthResponse
from src.engine.handler import SpamDetectionHandler

router = APIRouter()

# Track service start time for uptime calculation
_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    handler: SpamDetectionHandler = Depends(get_handler),
) -> HealthResponse:
    """
    Health check endpoint with provider info.

    Returns:
        - status: healthy, or degraded when the gateway key is missing
        - version: API version
        - classification_provider: model_service or gateway
        - explanation_provider: always gateway
        - model: gateway model name
        - gateway_configured: whether the gateway API key is set
        - uptime_seconds: API uptime
    """
    uptime = time.time() - _start_time
    health = handler.health_check()

    return HealthResponse(
        version="0.1.0",
        uptime_seconds=round(uptime, 2),
        **health,
    )
