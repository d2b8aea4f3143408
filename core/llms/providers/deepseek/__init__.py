"""
DeepSeek provider.

Usage:
    from core.llms.providers.deepseek import DeepSeekConnector

    connector = DeepSeekConnector({"api_key": "sk-..."})
"""

from .connector import DeepSeekConnector

__all__ = ["DeepSeekConnector"]
