"""
Spam detection request handler.

Validates the incoming body, checks the gateway credential, dispatches to
the classification or explanation provider and reshapes the result into
the client contract. One validate -> dispatch -> reshape pass per call; the
handler holds no per-request state.
"""

import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from src.api.errors import (
    InvalidInputError,
    MisconfiguredError,
    SpamGuardError,
    UnknownError,
    error_from_provider,
)
from src.api.models.requests import Action, SpamCheckRequest
from src.api.models.responses import ClassifyResponse, ExplainResponse
from src.config.settings import Settings
from src.llm.base import BaseClassificationProvider, BaseExplanationProvider
from src.llm.result import ProviderError

logger = logging.getLogger(__name__)

TEXT_REQUIRED_MESSAGE = "Text is required and must be a string"
INVALID_ACTION_MESSAGE = "Action must be 'classify' or 'explain'"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"


class SpamDetectionHandler:
    """Mediates between the client and the configured providers."""

    def __init__(
        self,
        settings: Settings,
        classifier: BaseClassificationProvider,
        explainer: BaseExplanationProvider,
    ):
        self.settings = settings
        self.classifier = classifier
        self.explainer = explainer

    def parse_request(self, payload: Any) -> SpamCheckRequest:
        """
        Validate a decoded JSON body.

        Raises:
            InvalidInputError: On the first invalid field, text before action
        """
        if not isinstance(payload, dict):
            raise InvalidInputError(INVALID_BODY_MESSAGE)

        try:
            return SpamCheckRequest.model_validate(
                payload, context={"max_text_length": self.settings.max_text_length}
            )
        except ValidationError as e:
            first = e.errors()[0]
            if first["loc"] and first["loc"][0] == "text":
                if first["type"] == "text_too_long":
                    raise InvalidInputError(first["msg"])
                raise InvalidInputError(TEXT_REQUIRED_MESSAGE)
            raise InvalidInputError(INVALID_ACTION_MESSAGE)

    async def handle(self, payload: Any) -> Union[ClassifyResponse, ExplainResponse]:
        """
        Process one spam detector call.

        Args:
            payload: Decoded JSON request body

        Returns:
            ClassifyResponse for ``classify``, ExplainResponse for ``explain``

        Raises:
            SpamGuardError: For every failure, already mapped to its status code
        """
        request = self.parse_request(payload)

        if not self.settings.gateway_configured:
            logger.error("AI_GATEWAY_API_KEY is not configured")
            raise MisconfiguredError()

        logger.info(
            f"Processing {request.action.value} request for text of length {len(request.text)}"
        )

        try:
            if request.action is Action.CLASSIFY:
                return await self._classify(request.text)
            return await self._explain(request.text)
        except SpamGuardError:
            raise
        except Exception as e:
            logger.exception(f"Error in spam detector handler: {e}")
            raise UnknownError(str(e) or "Unknown error") from e

    async def _classify(self, text: str) -> ClassifyResponse:
        outcome = await self.classifier.classify(text)
        if isinstance(outcome, ProviderError):
            logger.warning("Classification failed: %s (%s)", outcome.message, outcome.kind.value)
            raise error_from_provider(outcome)

        result = outcome.value
        logger.info(f"Classification: {result.classification} ({result.confidence:.1f})")
        return ClassifyResponse(
            classification=result.classification,
            confidence=result.confidence,
        )

    async def _explain(self, text: str) -> ExplainResponse:
        outcome = await self.explainer.explain(text)
        if isinstance(outcome, ProviderError):
            logger.warning("Explanation failed: %s (%s)", outcome.message, outcome.kind.value)
            raise error_from_provider(outcome)

        return ExplainResponse(explanation=outcome.value)

    def health_check(self) -> Dict[str, Any]:
        """Report configuration without calling any backend."""
        return {
            "status": "healthy" if self.settings.gateway_configured else "degraded",
            "classification_provider": self.classifier.provider_name,
            "explanation_provider": self.explainer.provider_name,
            "model": getattr(self.explainer, "model_name", self.settings.ai_gateway_model),
            "gateway_configured": self.settings.gateway_configured,
        }
