"""
Interfaces for LLM Subsystem.

Exports all protocol interfaces for pluggable components.
"""

from .llm_interfaces import (
    IConnector,
    IResponseParser,
)

__all__ = [
    "IConnector",
    "IResponseParser",
]
