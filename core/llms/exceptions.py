"""
LLM Exceptions Module.

This module defines all custom exceptions used throughout the LLM subsystem.
Every exception carries the provider name plus a free-form details dict so
callers can log or serialize the failure without parsing the message.
"""

from typing import Any, Dict, Optional


class LLMError(Exception):
    """Base exception for all LLM-related errors."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "provider": self.provider,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(LLMError):
    """Raised when a connector is missing required configuration."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            provider=provider,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )


class ProviderError(LLMError):
    """Raised when the provider call fails (transport error or non-2xx status)."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        if status_code is not None:
            all_details["status_code"] = status_code
        super().__init__(
            message,
            provider=provider,
            error_code="PROVIDER_ERROR",
            details=all_details,
        )
        self.status_code = status_code


class TimeoutError(LLMError):
    """Raised when a provider request exceeds its timeout."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        if timeout_seconds is not None:
            all_details["timeout_seconds"] = timeout_seconds
        super().__init__(
            message,
            provider=provider,
            error_code="TIMEOUT_ERROR",
            details=all_details,
        )
        self.timeout_seconds = timeout_seconds


class InvalidResponseError(LLMError):
    """Raised when the provider envelope cannot be read or has no completion."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            provider=provider,
            error_code="INVALID_RESPONSE",
            details=details,
        )
