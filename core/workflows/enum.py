"""
Workflow Module Enumerations

Version: 1.0.0
"""

from enum import Enum

from .constants import (
    # Node types
    NODE_TYPE_TRIGGER,
    NODE_TYPE_ACTION,
    NODE_TYPE_FILTER,
    NODE_TYPE_LLM_AGENT,
    # Error codes
    CODE_INVALID_PROMPT,
    CODE_PARSE_ERROR,
    CODE_MAX_RETRIES_EXCEEDED,
    CODE_INTERNAL_ERROR,
)


class NodeType(str, Enum):
    """Kinds of step a workflow node can represent."""
    TRIGGER = NODE_TYPE_TRIGGER
    ACTION = NODE_TYPE_ACTION
    FILTER = NODE_TYPE_FILTER
    LLM_AGENT = NODE_TYPE_LLM_AGENT


class ParseErrorCode(str, Enum):
    """
    Error codes carried by a failed parse.

    INVALID_PROMPT: Prompt rejected before any network call.
    PARSE_ERROR: Every attempt failed; the last failure's message is kept.
    MAX_RETRIES_EXCEEDED: Reserved; no current path produces it.
    INTERNAL_ERROR: Unexpected fault in the HTTP layer.
    """
    INVALID_PROMPT = CODE_INVALID_PROMPT
    PARSE_ERROR = CODE_PARSE_ERROR
    MAX_RETRIES_EXCEEDED = CODE_MAX_RETRIES_EXCEEDED
    INTERNAL_ERROR = CODE_INTERNAL_ERROR
