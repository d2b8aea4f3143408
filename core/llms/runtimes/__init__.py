"""
LLM Runtimes - Pluggable Components.

- parsers: Response parsing and completion extraction

All components implement interfaces from llms.interfaces for easy swapping.
"""

from .parsers import ChatCompletionParser, strip_code_fences

__all__ = [
    "ChatCompletionParser",
    "strip_code_fences",
]
