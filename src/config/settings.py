from typing import Dict, Optional

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8001
    debug: bool = False

    # CORS - headers attached to every response, including OPTIONS pre-flight
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    def get_cors_headers(self) -> Dict[str, str]:
        """Headers the browser client needs to call the endpoint cross-origin."""
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }

    # Classification provider selection
    classification_provider: str = "model_service"  # "model_service" or "gateway"

    @field_validator("classification_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower()

    # Model-serving backend (local Flask/ML service)
    model_service_url: str = "http://127.0.0.1:5000/analyze"

    # LLM gateway (OpenAI-compatible chat completions)
    # The API key is required for every request, even when classification
    # goes to the model service, because explanations always use the gateway.
    ai_gateway_api_key: Optional[str] = None
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1"
    ai_gateway_model: str = "google/gemini-2.5-flash"
    ai_gateway_temperature: float = 0.2
    gateway_few_shot: bool = True

    # Timeouts (no retries: a failed upstream call is reported to the client)
    llm_timeout_seconds: int = 30

    # Input limits
    max_text_length: int = 10000

    # Logging
    log_level: str = "INFO"

    model_config = ConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def gateway_configured(self) -> bool:
        return bool(self.ai_gateway_api_key)


settings = Settings()
