"""
Workflow Exceptions Module.

This module defines all custom exceptions used throughout the workflows subsystem.
"""

from typing import Any, Dict, Optional, List


class WorkflowError(Exception):
    """Base exception for all workflow-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class InvalidPromptError(WorkflowError):
    """Raised when a prompt is missing, not a string, or blank."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="INVALID_PROMPT",
            details=details,
        )


class WorkflowValidationError(WorkflowError):
    """
    Raised when LLM output is not a valid workflow graph.

    ``message`` is the aggregate shown to callers; ``validation_errors``
    keeps the individual ``"<path>: <reason>"`` entries. A JSON syntax
    failure carries the decoder message and no entries.
    """

    def __init__(
        self,
        message: str,
        validation_errors: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        all_details["validation_errors"] = validation_errors or []
        super().__init__(
            message,
            error_code="WORKFLOW_VALIDATION_ERROR",
            details=all_details,
        )
        self.validation_errors = validation_errors or []
