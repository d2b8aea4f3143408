"""
DeepSeek Connector Implementation.

This module provides the connector for the DeepSeek chat-completion API.
"""

import asyncio
import json
import os
import time
from typing import Any, Dict

import aiohttp

from ..base.connector import BaseConnector
from ...exceptions import (
    ConfigurationError,
    ProviderError,
    TimeoutError,
)
from ...constants import (
    AUTH_SCHEME_BEARER,
    CONTENT_TYPE_JSON,
    DEFAULT_DEEPSEEK_BASE_URL,
    ENDPOINT_CHAT_COMPLETIONS,
    ENDPOINT_MODELS,
    ENV_DEEPSEEK_API_KEY,
    ENV_DEEPSEEK_BASE_URL,
    ERROR_MSG_HTTP_STATUS,
    ERROR_MSG_MISSING_API_KEY,
    ERROR_MSG_TIMEOUT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    PROVIDER_DEEPSEEK,
    PROVIDER_DEEPSEEK_DISPLAY,
)
from utils.logging.LoggerAdaptor import LoggerAdaptor


class DeepSeekConnector(BaseConnector):
    """
    Connector for the DeepSeek chat-completion API.

    Issues exactly one authenticated POST per ``request`` call. A transport
    failure or a non-2xx status raises; the connector itself never retries.
    Each call opens its own ``aiohttp.ClientSession`` so the socket is scoped
    to a single attempt and cancelling the calling task aborts it.

    Configuration:
        - api_key: DeepSeek API key (falls back to DEEPSEEK_API_KEY)
        - base_url: API root (default: https://api.deepseek.com)
        - timeout: Request timeout in seconds

    Example:
        connector = DeepSeekConnector({"api_key": "sk-..."})
        raw = await connector.request({"model": "deepseek-chat", "messages": [...]})
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize DeepSeek connector.

        Args:
            config: Connector configuration

        Raises:
            ConfigurationError: If the API key is missing
        """
        super().__init__(config)
        self.api_key = self._get_api_key()
        self.base_url = self._get_base_url()
        self.logger = LoggerAdaptor.get_logger("llm.connector.deepseek")

    def _validate_config(self) -> None:
        """Validate DeepSeek-specific configuration."""
        super()._validate_config()

        if not self._get_api_key():
            raise ConfigurationError(
                ERROR_MSG_MISSING_API_KEY,
                provider=PROVIDER_DEEPSEEK,
                details={"env_var": ENV_DEEPSEEK_API_KEY}
            )

    def _get_api_key(self) -> str:
        """Get API key from config or environment."""
        if self.config.get("api_key"):
            return self.config["api_key"]
        return os.environ.get(ENV_DEEPSEEK_API_KEY, "")

    def _get_base_url(self) -> str:
        """Get base URL from config or environment."""
        if self.config.get("base_url"):
            return self.config["base_url"].rstrip("/")
        return os.environ.get(ENV_DEEPSEEK_BASE_URL, DEFAULT_DEEPSEEK_BASE_URL).rstrip("/")

    def _build_url(self, operation: str) -> str:
        """
        Build full URL for an API operation.

        Args:
            operation: API operation (e.g., "v1/chat/completions")

        Returns:
            Full URL
        """
        return f"{self.base_url}/{operation}"

    def _build_headers(self) -> Dict[str, str]:
        return {
            HEADER_AUTHORIZATION: f"{AUTH_SCHEME_BEARER} {self.api_key}",
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
        }

    async def request(
        self,
        payload: Dict[str, Any],
        **kwargs: Any
    ) -> str:
        """
        Send one chat-completion request.

        Args:
            payload: Request body ({model, messages, temperature, max_tokens})
            **kwargs: Additional options (timeout)

        Returns:
            Raw response body text (2xx only)

        Raises:
            ProviderError: On transport failure or non-2xx status. For a bad
                status the message is ``DeepSeek <status>: <body>`` with the
                body copied verbatim.
            TimeoutError: If the request times out
        """
        url = self._build_url(ENDPOINT_CHAT_COMPLETIONS)
        timeout = kwargs.get("timeout", self.get_timeout())
        start_time = time.time()

        try:
            async with aiohttp.ClientSession(headers=self._build_headers()) as session:
                async with session.post(
                    url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=timeout)
                ) as response:
                    body = await response.text()

                    self.logger.log_duration(
                        "deepseek.chat_completions",
                        time.time() - start_time,
                        status_code=response.status,
                    )

                    if not 200 <= response.status < 300:
                        raise ProviderError(
                            ERROR_MSG_HTTP_STATUS.format(status=response.status, body=body),
                            provider=PROVIDER_DEEPSEEK,
                            status_code=response.status,
                            details={"error_body": body, "url": url}
                        )

                    return body

        except asyncio.TimeoutError:
            raise TimeoutError(
                ERROR_MSG_TIMEOUT.format(timeout=timeout),
                provider=PROVIDER_DEEPSEEK,
                timeout_seconds=timeout,
                details={"url": url}
            )

        except aiohttp.ClientError as e:
            raise ProviderError(
                f"{PROVIDER_DEEPSEEK_DISPLAY} request failed: {str(e)}",
                provider=PROVIDER_DEEPSEEK,
                details={"error": str(e), "url": url}
            )

    async def test_connection(self) -> Dict[str, Any]:
        """
        Test connection by listing the available models.

        Returns:
            Dict with ``status`` (HTTP status code) and ``body`` (decoded JSON,
            or raw text when the body is not JSON)

        Raises:
            ProviderError: If the endpoint cannot be reached
            TimeoutError: If the check times out
        """
        url = self._build_url(ENDPOINT_MODELS)
        timeout = self.get_timeout()

        try:
            async with aiohttp.ClientSession(headers=self._build_headers()) as session:
                async with session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=timeout)
                ) as response:
                    text = await response.text()
                    try:
                        body = json.loads(text)
                    except json.JSONDecodeError:
                        body = text

                    self.logger.info(
                        "DeepSeek connectivity check finished",
                        status_code=response.status
                    )
                    return {"status": response.status, "body": body}

        except asyncio.TimeoutError:
            raise TimeoutError(
                ERROR_MSG_TIMEOUT.format(timeout=timeout),
                provider=PROVIDER_DEEPSEEK,
                timeout_seconds=timeout,
                details={"url": url}
            )

        except aiohttp.ClientError as e:
            raise ProviderError(
                f"Failed to connect to {PROVIDER_DEEPSEEK_DISPLAY}: {str(e)}",
                provider=PROVIDER_DEEPSEEK,
                details={"error": str(e), "url": url}
            )
