"""
Graph Validator Module.

Turns cleaned LLM output into a validated WorkflowGraph.
"""

import json
from typing import Any, Dict

from pydantic import ValidationError

from ..spec import WorkflowGraph
from ..exceptions import WorkflowValidationError
from ..constants import (
    PYDANTIC_MISSING_TYPE,
    VALIDATION_PATH_SEPARATOR,
    VALIDATION_PREFIX,
    VALIDATION_REQUIRED,
    VALIDATION_ROOT_PATH,
    VALIDATION_SEPARATOR,
)


def format_validation_issue(error: Dict[str, Any]) -> str:
    """
    Render one pydantic error as ``"<dotted.path>: <reason>"``.

    List indices appear as path segments (``nodes.0.id``). A missing field
    reads ``Required``; an error on the document itself uses ``(root)``.
    """
    path = VALIDATION_PATH_SEPARATOR.join(str(part) for part in error.get("loc", ()))
    if not path:
        path = VALIDATION_ROOT_PATH
    if error.get("type") == PYDANTIC_MISSING_TYPE:
        reason = VALIDATION_REQUIRED
    else:
        reason = error.get("msg", "")
    return f"{path}: {reason}"


class GraphValidator:
    """
    Validates cleaned completion text against the workflow graph schema.

    Validation runs in two steps:
    1. JSON decoding; a syntax error surfaces the decoder's own message
    2. Schema validation; every violated field is reported, not only the first

    The validator holds no state and never mutates its input.
    """

    def parse_json(self, cleaned_text: str) -> Any:
        """
        Decode ``cleaned_text`` as JSON.

        Raises:
            WorkflowValidationError: With the raw decoder message
        """
        try:
            return json.loads(cleaned_text)
        except (json.JSONDecodeError, TypeError) as e:
            raise WorkflowValidationError(str(e), details={"stage": "json"})

    def validate(self, cleaned_text: str) -> WorkflowGraph:
        """
        Validate cleaned completion text.

        Args:
            cleaned_text: Completion text with fences already stripped

        Returns:
            Validated WorkflowGraph

        Raises:
            WorkflowValidationError: On malformed JSON or any schema violation.
                For schema violations the message is
                ``"Invalid workflow structure: "`` followed by every issue
                joined with ``", "``.
        """
        data = self.parse_json(cleaned_text)

        try:
            return WorkflowGraph.from_dict(data)
        except ValidationError as e:
            issues = [format_validation_issue(err) for err in e.errors()]
            raise WorkflowValidationError(
                VALIDATION_PREFIX + VALIDATION_SEPARATOR.join(issues),
                validation_errors=issues,
                details={"stage": "schema"},
            )
