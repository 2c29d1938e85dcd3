"""
Spam detector API endpoint.

POST /spam-detector - Classify text as spam/safe, or explain a classification.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_handler
from src.api.errors import ErrorResponse, InvalidInputError
from src.api.models.responses import ClassifyResponse, ExplainResponse
from src.engine.handler import INVALID_BODY_MESSAGE, SpamDetectionHandler

logger = logging.getLogger(__name__)
router = APIRouter()


# Every method except OPTIONS (answered by CORSHeadersMiddleware) expects a JSON body
@router.api_route(
    "/spam-detector",
    methods=["POST", "GET", "PUT", "PATCH", "DELETE"],
    response_model=Union[ClassifyResponse, ExplainResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid text/action"},
        402: {"model": ErrorResponse, "description": "AI credits depleted"},
        429: {"model": ErrorResponse, "description": "AI gateway rate limit"},
        500: {"model": ErrorResponse, "description": "Provider or internal error"},
    },
)
async def detect_spam(
    request: Request,
    handler: SpamDetectionHandler = Depends(get_handler),
) -> Union[ClassifyResponse, ExplainResponse]:
    """
    Classify or explain a piece of text.

    Body: ``{"text": "...", "action": "classify" | "explain"}``.
    The body is read raw so that validation failures map to 400 with the
    client-facing messages rather than FastAPI's 422.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidInputError(INVALID_BODY_MESSAGE)
    return await handler.handle(payload)
