"""LLM gateway provider using LangChain.

The gateway speaks the OpenAI chat-completions protocol, so ``ChatOpenAI``
is pointed at its base URL. Classification forces a ``classify_spam`` tool
call; explanation is a plain completion.
"""

import logging
from typing import Any, List, Optional

import openai
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from src.prompts import (
    CLASSIFY_SPAM_EXAMPLES,
    CLASSIFY_SPAM_SYSTEM,
    CLASSIFY_SPAM_TOOL,
    CLASSIFY_SPAM_USER,
    EXPLAIN_SPAM_SYSTEM,
    EXPLAIN_SPAM_USER,
)

from .base import BaseClassificationProvider, BaseExplanationProvider
from .result import Ok, ProviderError, ProviderResult
from .schemas import SpamClassification

logger = logging.getLogger(__name__)

CLASSIFY_TOOL_NAME = CLASSIFY_SPAM_TOOL["function"]["name"]


def _format_examples() -> str:
    lines = ["Examples:"]
    for text, classification, confidence in CLASSIFY_SPAM_EXAMPLES:
        lines.append(
            f"Message: {text}\n"
            f"Answer: classification={classification}, confidence={confidence}"
        )
    return "\n\n".join(lines)


class GatewayToolCallProvider(BaseClassificationProvider, BaseExplanationProvider):
    """Classifies and explains text through the hosted LLM gateway."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        model: str,
        temperature: float = 0.2,
        timeout_seconds: float = 30,
        few_shot: bool = True,
        chat_model: Optional[Any] = None,
        http_async_client: Optional[Any] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self._model = model
        self._temperature = temperature
        self._timeout_seconds = timeout_seconds
        self.few_shot = few_shot
        # Custom transport (proxies, test doubles); None lets the openai SDK build its own
        self._http_async_client = http_async_client

        # Lazy initialization - the client is created on first use so the app
        # can start without a credential and report it per request instead
        self._chat = chat_model

    @property
    def provider_name(self) -> str:
        return "gateway"

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def chat(self):
        if self._chat is None:
            if not self.api_key:
                raise ValueError("AI_GATEWAY_API_KEY not provided (set via environment or .env file)")
            # Retries disabled: rate limits and outages go straight back to the client
            self._chat = ChatOpenAI(
                model=self._model,
                openai_api_key=self.api_key,
                base_url=self.base_url,
                temperature=self._temperature,
                timeout=self._timeout_seconds,
                max_retries=0,
                http_async_client=self._http_async_client,
            )
            logger.info(f"Initialized gateway provider with model: {self._model}")
        return self._chat

    def _classify_messages(self, text: str) -> List[BaseMessage]:
        system_prompt = CLASSIFY_SPAM_SYSTEM
        if self.few_shot:
            system_prompt = f"{system_prompt}\n\n{_format_examples()}"
        return [
            SystemMessage(content=system_prompt),
            HumanMessage(content=CLASSIFY_SPAM_USER.format(text=text)),
        ]

    async def classify(self, text: str) -> ProviderResult[SpamClassification]:
        runnable = self.chat.bind_tools([CLASSIFY_SPAM_TOOL], tool_choice=CLASSIFY_TOOL_NAME)

        logger.debug("Calling gateway classify: model=%s, few_shot=%s", self._model, self.few_shot)
        try:
            message = await runnable.ainvoke(self._classify_messages(text))
        except openai.APIStatusError as e:
            return self._status_error(e)
        except openai.APIConnectionError as e:
            logger.error(f"Gateway connection failed: {e}")
            return ProviderError.unavailable("Backend connection failed")

        tool_calls = getattr(message, "tool_calls", None) or []
        if not tool_calls:
            # Unparsable arguments end up in invalid_tool_calls
            logger.error(
                "No tool call in gateway response (invalid_tool_calls=%s)",
                getattr(message, "invalid_tool_calls", None),
            )
            return ProviderError.malformed()

        try:
            result = SpamClassification.model_validate(tool_calls[0]["args"])
        except ValidationError as e:
            logger.error(f"Gateway tool call failed validation: {e}")
            return ProviderError.malformed()

        logger.info("Gateway classification: %s (%.1f)", result.classification, result.confidence)
        return Ok(result)

    async def explain(self, text: str) -> ProviderResult[str]:
        messages = [
            SystemMessage(content=EXPLAIN_SPAM_SYSTEM),
            HumanMessage(content=EXPLAIN_SPAM_USER.format(text=text)),
        ]

        logger.debug("Calling gateway explain: model=%s", self._model)
        try:
            message = await self.chat.ainvoke(messages)
        except openai.APIStatusError as e:
            return self._status_error(e)
        except openai.APIConnectionError as e:
            logger.error(f"Gateway connection failed: {e}")
            return ProviderError.unavailable("Backend connection failed")

        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.error("No explanation in gateway response")
            return ProviderError.malformed()

        logger.info("Explanation response received")
        return Ok(content.strip())

    def _status_error(self, e: openai.APIStatusError) -> ProviderError:
        logger.error("AI Gateway error: %s %s", e.status_code, e.message)
        if e.status_code == 429:
            return ProviderError.rate_limited()
        if e.status_code == 402:
            return ProviderError.quota_exhausted()
        return ProviderError.unavailable("AI service error")
