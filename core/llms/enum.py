"""
Enumerations for LLM Subsystem.

All enum values are imported from constants.py to maintain single source of truth.
"""

from enum import Enum
from .constants import (
    FINISH_REASON_STOP,
    FINISH_REASON_LENGTH,
    FINISH_REASON_CONTENT_FILTER,
    FINISH_REASON_TOOL_CALLS,
)


class FinishReason(str, Enum):
    """Reasons why LLM generation stopped."""
    STOP = FINISH_REASON_STOP
    LENGTH = FINISH_REASON_LENGTH
    CONTENT_FILTER = FINISH_REASON_CONTENT_FILTER
    TOOL_CALLS = FINISH_REASON_TOOL_CALLS
