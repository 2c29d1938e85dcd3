"""
Pydantic models for validating provider responses.

Both the model service and the gateway tool call must produce data matching
``SpamClassification``; anything else is treated as a malformed response.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class SpamClassification(BaseModel):
    """Spam/safe label with a confidence percentage."""

    classification: Literal["spam", "safe"] = Field(
        ...,
        description="Whether the text is spam or safe",
    )
    confidence: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Confidence score between 0 and 100",
    )

    @field_validator("classification", mode="before")
    @classmethod
    def normalize_classification(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
