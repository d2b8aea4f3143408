"""
Workflow Specification Models

This module contains the data models for parsed workflow graphs and parse results.
"""

from .graph_models import (
    Node,
    Edge,
    WorkflowGraph,
)
from .parse_result import (
    ParseError,
    ParseSuccess,
    ParseFailure,
    ParseResult,
)

__all__ = [
    # Graph models
    "Node",
    "Edge",
    "WorkflowGraph",
    # Result models
    "ParseError",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
]
