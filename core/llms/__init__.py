"""
LLM Subsystem.

This module provides the pieces needed to talk to a chat-completion provider:
a connector that performs the HTTP call and a parser that extracts the
completion text from the provider envelope.

Architecture:
=============
- IConnector: one authenticated request per call, no retry
- IResponseParser: envelope decoding + markdown fence stripping

Usage:
======
    from core.llms import DeepSeekConnector, ChatCompletionParser

    connector = DeepSeekConnector({"api_key": "sk-..."})
    raw = await connector.request(payload)
    content = ChatCompletionParser().extract_content(raw)
"""

from .interfaces import IConnector, IResponseParser

from .enum import FinishReason

from .exceptions import (
    LLMError,
    ConfigurationError,
    ProviderError,
    TimeoutError,
    InvalidResponseError,
)

from .spec import LLMResponse, LLMUsage

from .runtimes import ChatCompletionParser, strip_code_fences

from .providers import BaseConnector, DeepSeekConnector

__all__ = [
    # Interfaces
    "IConnector",
    "IResponseParser",
    # Enums
    "FinishReason",
    # Exceptions
    "LLMError",
    "ConfigurationError",
    "ProviderError",
    "TimeoutError",
    "InvalidResponseError",
    # Spec
    "LLMResponse",
    "LLMUsage",
    # Parsers
    "ChatCompletionParser",
    "strip_code_fences",
    # Providers
    "BaseConnector",
    "DeepSeekConnector",
]
