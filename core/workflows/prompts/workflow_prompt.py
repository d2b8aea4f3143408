"""
Workflow Prompt Builder

Assembles the chat-completion messages that ask the LLM to turn a prose
description into a workflow graph.

The system instruction is versioned: any edit to ``WORKFLOW_SYSTEM_PROMPT``
changes model behavior and must bump ``WORKFLOW_PROMPT_VERSION``.

Usage:
    from core.workflows.prompts import build_workflow_payload

    payload = build_workflow_payload("When a lead arrives, email sales")

Version: 1.0.0
"""

from typing import Any, Dict, List

from core.llms.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    MESSAGE_FIELD_CONTENT,
    MESSAGE_FIELD_ROLE,
    PAYLOAD_FIELD_MAX_TOKENS,
    PAYLOAD_FIELD_MESSAGES,
    PAYLOAD_FIELD_MODEL,
    PAYLOAD_FIELD_TEMPERATURE,
    ROLE_SYSTEM,
    ROLE_USER,
)
from ..constants import ERROR_PROMPT_REQUIRED, WORKFLOW_PROMPT_VERSION
from ..exceptions import InvalidPromptError


WORKFLOW_SYSTEM_PROMPT = """You are a workflow parsing assistant. Your task is to convert natural language workflow descriptions into structured JSON format.
The output should be a valid JSON object with two arrays: 'nodes' and 'edges'.

Node types can be: 'trigger', 'action', 'filter', or 'llmAgent'.
Each node must have: id (string), type (one of the allowed types), label (string), and config (object).
Each edge must have: source (string), target (string), and optional label (string).

Example output format:
{
  "nodes": [
    {
      "id": "node-1",
      "type": "trigger",
      "label": "New Lead Trigger",
      "config": {
        "source": "LinkedIn",
        "event": "newConnection"
      }
    }
  ],
  "edges": [
    {
      "source": "node-1",
      "target": "node-2",
      "label": "onNewConnection"
    }
  ]
}"""


def normalize_prompt(prompt: Any) -> str:
    """
    Return the trimmed prompt.

    Raises:
        InvalidPromptError: If ``prompt`` is not a string or is blank
    """
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidPromptError(
            ERROR_PROMPT_REQUIRED,
            details={"prompt_type": type(prompt).__name__},
        )
    return prompt.strip()


def build_workflow_messages(prompt: Any) -> List[Dict[str, str]]:
    """
    Build the two-message conversation for a workflow parse.

    Args:
        prompt: User's prose description of the automation

    Returns:
        ``[{"role": "system", ...}, {"role": "user", ...}]``

    Raises:
        InvalidPromptError: If ``prompt`` is not a string or is blank
    """
    return [
        {MESSAGE_FIELD_ROLE: ROLE_SYSTEM, MESSAGE_FIELD_CONTENT: WORKFLOW_SYSTEM_PROMPT},
        {MESSAGE_FIELD_ROLE: ROLE_USER, MESSAGE_FIELD_CONTENT: normalize_prompt(prompt)},
    ]


def build_workflow_payload(
    prompt: Any,
    model: str = DEFAULT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> Dict[str, Any]:
    """
    Build the chat-completion request body.

    Returns:
        ``{model, messages, temperature, max_tokens}``
    """
    return {
        PAYLOAD_FIELD_MODEL: model,
        PAYLOAD_FIELD_MESSAGES: build_workflow_messages(prompt),
        PAYLOAD_FIELD_TEMPERATURE: temperature,
        PAYLOAD_FIELD_MAX_TOKENS: max_tokens,
    }


def get_prompt_version() -> str:
    """Version of the system instruction currently in use."""
    return WORKFLOW_PROMPT_VERSION
