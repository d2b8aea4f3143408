"""
Workflow Runtimes

Validation, attempt state machine and the parsing orchestrator.
"""

from .graph_validator import GraphValidator, format_validation_issue
from .parse_state import (
    Attempting,
    Succeeded,
    Failed,
    ParseState,
)
from .workflow_parser import WorkflowParser, parse_workflow

__all__ = [
    "GraphValidator",
    "format_validation_issue",
    "Attempting",
    "Succeeded",
    "Failed",
    "ParseState",
    "WorkflowParser",
    "parse_workflow",
]
