"""
Specifications for LLM Subsystem.

This module exports the response types produced by parsers.
"""

from .llm_result import LLMResponse, LLMUsage

__all__ = [
    "LLMResponse",
    "LLMUsage",
]
