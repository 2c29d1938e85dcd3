"""Provider factory: builds the configured classification and explanation backends."""

from src.config.settings import Settings

from .base import BaseClassificationProvider, BaseExplanationProvider
from .gateway_provider import GatewayToolCallProvider
from .model_service_provider import ModelServiceProvider


def build_gateway_provider(settings: Settings) -> GatewayToolCallProvider:
    return GatewayToolCallProvider(
        api_key=settings.ai_gateway_api_key,
        base_url=settings.ai_gateway_url,
        model=settings.ai_gateway_model,
        temperature=settings.ai_gateway_temperature,
        timeout_seconds=settings.llm_timeout_seconds,
        few_shot=settings.gateway_few_shot,
    )

def build_classifier(settings: Settings) -> BaseClassificationProvider:
    """
    Create the classification provider selected by ``classification_provider``.

    Raises:
        ValueError: If the configured provider name is unknown
    """
    if settings.classification_provider == "model_service":
        return ModelServiceProvider(
            url=settings.model_service_url,
            timeout_seconds=settings.llm_timeout_seconds,
        )
    if settings.classification_provider == "gateway":
        return build_gateway_provider(settings)
    raise ValueError(f"Unknown classification provider: {settings.classification_provider}")

def build_explainer(
    settings: Settings, classifier: BaseClassificationProvider
) -> BaseExplanationProvider:
    """Explanations always come from the gateway; reuse the classifier when it is one."""
    if isinstance(classifier, GatewayToolCallProvider):
        return classifier
    return build_gateway_provider(settings)
