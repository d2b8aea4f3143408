"""
LLM Providers.

Each provider package exposes a connector implementing IConnector.
"""

from .base import BaseConnector
from .deepseek import DeepSeekConnector

__all__ = [
    "BaseConnector",
    "DeepSeekConnector",
]
