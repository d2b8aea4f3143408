"""
LLM Response Parsers.

Provides parsers for extracting content from provider responses.

Available parsers:
- ChatCompletionParser: OpenAI-compatible chat-completion envelopes

Usage:
    from core.llms.runtimes.parsers import ChatCompletionParser

    content = ChatCompletionParser().extract_content(raw_text)
"""

from .chat_completion_parser import ChatCompletionParser, strip_code_fences

__all__ = [
    "ChatCompletionParser",
    "strip_code_fences",
]
