"""
Workflows Module

Turns a prose description of an automation into a validated workflow graph.

Version: 1.0.0

Components:
- Prompt Builder: Versioned system instruction plus the user's prompt
- Graph Validator: JSON decoding and schema validation with aggregated errors
- Workflow Parser: Attempt state machine with linear backoff

Usage:
    from core.workflows import parse_workflow

    result = await parse_workflow("When a lead signs up, summarize it with an LLM and email sales")
    if result.success:
        for node in result.data.nodes:
            print(node.id, node.type, node.label)
    else:
        print(result.error.code, result.error.message)
"""

# =============================================================================
# ENUMS
# =============================================================================

from .enum import (
    NodeType,
    ParseErrorCode,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================

from .exceptions import (
    WorkflowError,
    InvalidPromptError,
    WorkflowValidationError,
)

# =============================================================================
# SPEC MODELS
# =============================================================================

from .spec import (
    Node,
    Edge,
    WorkflowGraph,
    ParseError,
    ParseSuccess,
    ParseFailure,
    ParseResult,
)

# =============================================================================
# PROMPTS
# =============================================================================

from .prompts import (
    WORKFLOW_SYSTEM_PROMPT,
    build_workflow_messages,
    build_workflow_payload,
)

# =============================================================================
# RUNTIMES
# =============================================================================

from .runtimes import (
    GraphValidator,
    WorkflowParser,
    parse_workflow,
)

__all__ = [
    # Enums
    "NodeType",
    "ParseErrorCode",
    # Exceptions
    "WorkflowError",
    "InvalidPromptError",
    "WorkflowValidationError",
    # Spec
    "Node",
    "Edge",
    "WorkflowGraph",
    "ParseError",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    # Prompts
    "WORKFLOW_SYSTEM_PROMPT",
    "build_workflow_messages",
    "build_workflow_payload",
    # Runtimes
    "GraphValidator",
    "WorkflowParser",
    "parse_workflow",
]
