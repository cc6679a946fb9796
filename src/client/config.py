"""Client configuration with environment variable loading.

Pydantic-based configuration for the knowledge base API client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _timeout_from_env() -> str | None:
    # Parsed and range-checked by the timeout field
    return os.getenv("API_TIMEOUT", "").strip() or None


class ClientConfig(BaseModel):
    """Configuration for the knowledge base API client.

    Attributes:
        api_base_url: Base URL of the knowledge base server.
        timeout: Request timeout in seconds (None waits indefinitely).
    """

    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8080"),
        description="Base URL of the knowledge base server",
    )
    timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0.0,
        description="Request timeout in seconds, None for no timeout",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate that the base URL is an http(s) URL and drop trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API base URL must start with http:// or https://. Set API_BASE_URL in .env"
            )
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL is not an http(s) URL.
    """
    return ClientConfig()
