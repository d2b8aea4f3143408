"""
Middleware Configuration

Environment-based configuration for the API middleware.

Environment variables use the prefix FLOWPARSE_ (e.g. FLOWPARSE_MAX_RETRIES);
the DeepSeek key is read from DEEPSEEK_API_KEY.

Usage:
    from middleware.config import get_settings

    settings = get_settings()
    connector = DeepSeekConnector(settings.connector_config())

Version: 1.0.0
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from core.llms.constants import (
    DEFAULT_DEEPSEEK_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_DEEPSEEK_API_KEY,
    ENV_DEEPSEEK_BASE_URL,
)
from core.workflows.constants import MAX_RETRIES, RETRY_DELAY_MS
from utils.logging.Enum import LoggingFormat, LogLevel


class Settings(BaseSettings):
    """
    Application settings with automatic environment variable loading.

    Environment variables are automatically loaded with the prefix FLOWPARSE_.
    Example: FLOWPARSE_RETRY_DELAY_MS overrides retry_delay_ms
    """

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    deepseek_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(ENV_DEEPSEEK_API_KEY, "FLOWPARSE_DEEPSEEK_API_KEY"),
        repr=False,
    )
    deepseek_base_url: str = Field(
        default=DEFAULT_DEEPSEEK_BASE_URL,
        validation_alias=AliasChoices(ENV_DEEPSEEK_BASE_URL, "FLOWPARSE_DEEPSEEK_BASE_URL"),
    )
    llm_model: str = Field(default=DEFAULT_MODEL)
    llm_temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    llm_max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    llm_timeout_s: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    # =========================================================================
    # Retry Configuration
    # =========================================================================
    max_retries: int = Field(default=MAX_RETRIES, ge=1)
    retry_delay_ms: int = Field(default=RETRY_DELAY_MS, ge=0)
    parse_timeout_s: float = Field(default=120.0, gt=0)

    # =========================================================================
    # Logging Configuration
    # =========================================================================
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_backend: LoggingFormat = Field(default=LoggingFormat.JSON)

    # =========================================================================
    # API Configuration
    # =========================================================================
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api/v1")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = {
        "env_prefix": "FLOWPARSE_",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    def connector_config(self) -> Dict[str, Any]:
        """Configuration dict for DeepSeekConnector."""
        config: Dict[str, Any] = {
            "base_url": self.deepseek_base_url,
            "timeout": self.llm_timeout_s,
        }
        if self.deepseek_api_key:
            config["api_key"] = self.deepseek_api_key
        return config

    def parser_options(self) -> Dict[str, Any]:
        """Keyword arguments for WorkflowParser."""
        return {
            "max_retries": self.max_retries,
            "retry_delay_ms": self.retry_delay_ms,
            "model": self.llm_model,
            "temperature": self.llm_temperature,
            "max_tokens": self.llm_max_tokens,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (singleton)."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings from environment."""
    get_settings.cache_clear()
    return get_settings()
