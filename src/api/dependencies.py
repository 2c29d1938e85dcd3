"""FastAPI dependencies shared by the routers."""

import logging

from fastapi import Request

from src.config.settings import Settings, settings
from src.engine.handler import SpamDetectionHandler
from src.llm.factory import build_classifier, build_explainer

logger = logging.getLogger(__name__)


def build_handler(app_settings: Settings) -> SpamDetectionHandler:
    """Assemble the handler with the providers selected by configuration."""
    classifier = build_classifier(app_settings)
    explainer = build_explainer(app_settings, classifier)

    logger.info(
        "Handler created with classifier=%s, explainer=%s",
        classifier.provider_name,
        explainer.provider_name,
    )
    return SpamDetectionHandler(settings=app_settings, classifier=classifier, explainer=explainer)


def get_handler(request: Request) -> SpamDetectionHandler:
    """
    Return the process-wide handler, building it on first use.

    Tests replace this dependency through ``app.dependency_overrides``.
    """
    handler = getattr(request.app.state, "handler", None)
    if handler is None:
        handler = build_handler(settings)
        request.app.state.handler = handler
    return handler
