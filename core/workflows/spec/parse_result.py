"""
Parse Result Models

Outcome of one parse call: either a validated graph or an error carrying a
message and a code. Results are built once and never mutated.

Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field

from ..enum import ParseErrorCode
from .graph_models import WorkflowGraph


class ParseError(BaseModel):
    """Failure description surfaced to callers."""
    message: str = Field(..., description="Human-readable failure message")
    code: ParseErrorCode = Field(..., description="Failure code")

    model_config = {"frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code.value}


class ParseSuccess(BaseModel):
    """Successful parse carrying the validated graph."""
    success: Literal[True] = True
    data: WorkflowGraph

    model_config = {"frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the HTTP response shape ``{success, data}``."""
        return {"success": True, "data": self.data.to_dict()}


class ParseFailure(BaseModel):
    """Failed parse carrying the error."""
    success: Literal[False] = False
    error: ParseError

    model_config = {"frozen": True}

    @classmethod
    def of(cls, message: str, code: ParseErrorCode) -> ParseFailure:
        return cls(error=ParseError(message=message, code=code))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the HTTP response shape ``{success, error: {message, code}}``."""
        return {"success": False, "error": self.error.to_dict()}


ParseResult = Union[ParseSuccess, ParseFailure]
