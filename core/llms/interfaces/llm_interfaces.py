"""
Interfaces for LLM Subsystem.

This module defines the core protocols (interfaces) that the workflow parser
depends on, so connectors and parsers can be swapped (or faked in tests)
without touching the orchestration code.

Pluggable Components:
- IConnector: Provider communication (one HTTP call per request)
- IResponseParser: Completion extraction from the provider envelope
"""

from __future__ import annotations
from typing import Any, Dict, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..spec.llm_result import LLMResponse


# ============================================================================
# CONNECTOR INTERFACE
# ============================================================================

@runtime_checkable
class IConnector(Protocol):
    """
    Connector interface for LLM provider communication.

    Connectors handle the low-level details of communicating with
    LLM providers (authentication, request encoding, status handling).
    Connectors never retry; retry policy belongs to the caller.
    """

    async def request(
        self,
        payload: Dict[str, Any],
        **kwargs: Any
    ) -> str:
        """
        Send one chat-completion request.

        Args:
            payload: Request body
            **kwargs: Additional request options (e.g. timeout)

        Returns:
            Raw response body text

        Raises:
            ProviderError: On transport failure or non-2xx status
            TimeoutError: If the request times out
        """
        ...

    async def test_connection(self) -> Dict[str, Any]:
        """
        Probe the provider with a cheap authenticated call.

        Returns:
            Dict with the HTTP status and decoded body
        """
        ...


# ============================================================================
# RESPONSE PARSER INTERFACE
# ============================================================================

@runtime_checkable
class IResponseParser(Protocol):
    """
    Interface for reading provider responses.

    Example:
        class CustomParser(IResponseParser):
            def extract_content(self, raw_text):
                return json.loads(raw_text)["output"]
    """

    def extract_content(self, raw_text: str) -> str:
        """
        Pull the completion text out of a raw response body.

        Args:
            raw_text: Raw response body

        Returns:
            Cleaned completion text

        Raises:
            InvalidResponseError: If the completion is missing or empty
        """
        ...

    def parse_response(self, raw_text: str, start_time: float) -> 'LLMResponse':
        """
        Parse a raw response body into an LLMResponse.

        Args:
            raw_text: Raw response body
            start_time: Request start time (time.time())

        Returns:
            LLMResponse object
        """
        ...
