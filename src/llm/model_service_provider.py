"""Classification provider backed by a local model-serving endpoint."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .base import BaseClassificationProvider
from .result import Ok, ProviderError, ProviderResult
from .schemas import SpamClassification

logger = logging.getLogger(__name__)


class ModelServiceProvider(BaseClassificationProvider):
    """
    Sends ``{"text": ...}`` to a model-serving HTTP endpoint.

    The endpoint is expected to answer with
    ``{"classification": "spam"|"safe", "confidence": 0-100}``.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

        logger.info(f"Initialized model service provider at: {self.url}")

    @property
    def provider_name(self) -> str:
        return "model_service"

    async def classify(self, text: str) -> ProviderResult[SpamClassification]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(self.url, json={"text": text})
        except httpx.HTTPError as e:
            logger.error(f"Error contacting model service: {e}")
            return ProviderError.unavailable("Backend connection failed")

        if not response.is_success:
            logger.error("Model service error: %s %s", response.status_code, response.text)
            return ProviderError.unavailable("Model service error")

        try:
            result = SpamClassification.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Model service returned invalid payload: {e}")
            return ProviderError.malformed()

        logger.debug(
            "Model service result: %s (%.1f)", result.classification, result.confidence
        )
        return Ok(result)
