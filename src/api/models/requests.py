"""
Request models for SpamGuard AI Engine API.

Security:
- text has a configurable max length (passed in validation context) to
  prevent memory exhaustion and runaway LLM costs
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictStr, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError


class Action(str, Enum):
    """What the caller wants done with the text."""

    CLASSIFY = "classify"
    EXPLAIN = "explain"


class SpamCheckRequest(BaseModel):
    """Body of a spam detector call.

    Fields are declared in validation order: text problems are reported
    before action problems.
    """

    text: StrictStr = Field(..., description="Text to analyze")
    action: Action = Field(..., description="classify or explain")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise PydanticCustomError("text_blank", "Text must not be blank")
        max_length = (info.context or {}).get("max_text_length")
        if max_length is not None and len(v) > max_length:
            raise PydanticCustomError(
                "text_too_long",
                "Text exceeds maximum length of {max_length} characters",
                {"max_length": max_length},
            )
        # Forwarded unchanged; trimming is only used for the emptiness check
        return v
