"""
Workflow Prompts

Versioned system instruction and payload builders for workflow parsing.
"""

from .workflow_prompt import (
    WORKFLOW_SYSTEM_PROMPT,
    build_workflow_messages,
    build_workflow_payload,
    get_prompt_version,
    normalize_prompt,
)

__all__ = [
    "WORKFLOW_SYSTEM_PROMPT",
    "build_workflow_messages",
    "build_workflow_payload",
    "get_prompt_version",
    "normalize_prompt",
]
