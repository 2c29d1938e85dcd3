"""Base provider abstractions."""

from abc import ABC, abstractmethod

from .result import ProviderResult
from .schemas import SpamClassification


class BaseClassificationProvider(ABC):
    """Abstract base class for spam classification backends."""

    @abstractmethod
    async def classify(self, text: str) -> ProviderResult[SpamClassification]:
        """
        Classify text as spam or safe.

        Args:
            text: Raw user text, forwarded unchanged

        Returns:
            Ok wrapping the classification, or a ProviderError describing
            why the backend could not produce one.
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider name (model_service, gateway, etc.)."""
        pass


class BaseExplanationProvider(ABC):
    """Abstract base class for backends that explain a classification."""

    @abstractmethod
    async def explain(self, text: str) -> ProviderResult[str]:
        """Return a short free-text explanation of why the text is spam or safe."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass
