from typing import Literal, Optional

from pydantic import BaseModel, Field


class ClassifyResponse(BaseModel):
    """Response from spam classification."""
    classification: Literal["spam", "safe"]
    confidence: float = Field(ge=0.0, le=100.0)


class ExplainResponse(BaseModel):
    """Response from classification explanation."""
    explanation: str = Field(min_length=1)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str  # "healthy", "degraded"
    version: str
    classification_provider: str  # "model_service" or "gateway"
    explanation_provider: str
    model: str
    gateway_configured: bool = False
    uptime_seconds: Optional[float] = None
