"""
Parse State Machine.

States for one parse invocation:

    Attempting(1) -> Attempting(2) -> ... -> Attempting(max_attempts)
          |               |                         |
          +---------------+--> Succeeded            +--> Failed

Every attempt either succeeds (terminal) or fails; a failure below the
attempt limit moves to the next attempt after ``retry_delay_ms * n``
milliseconds, a failure at the limit is terminal.
"""

from dataclasses import dataclass
from typing import Union

from ..enum import ParseErrorCode
from ..spec import ParseFailure, ParseResult, ParseSuccess, WorkflowGraph
from ..constants import ERROR_PARSE_FAILED


@dataclass(frozen=True)
class Attempting:
    """Running attempt number ``n`` (1-based)."""
    n: int


@dataclass(frozen=True)
class Succeeded:
    """Terminal: an attempt produced a valid graph."""
    graph: WorkflowGraph


@dataclass(frozen=True)
class Failed:
    """Terminal: the last attempt failed."""
    message: str
    code: ParseErrorCode = ParseErrorCode.PARSE_ERROR


ParseState = Union[Attempting, Succeeded, Failed]


def is_terminal(state: ParseState) -> bool:
    return isinstance(state, (Succeeded, Failed))


def on_success(state: Attempting, graph: WorkflowGraph) -> Succeeded:
    return Succeeded(graph=graph)


def on_failure(state: Attempting, message: str, max_attempts: int) -> ParseState:
    """
    Transition after a failed attempt.

    Returns ``Attempting(n + 1)`` while attempts remain, otherwise ``Failed``
    with ``message`` (or the generic fallback when it is empty).
    """
    if state.n < max_attempts:
        return Attempting(n=state.n + 1)
    return Failed(message=message or ERROR_PARSE_FAILED)


def backoff_ms(state: Attempting, retry_delay_ms: int) -> int:
    """Delay before the attempt after ``state``; grows linearly with ``n``."""
    return retry_delay_ms * state.n


def to_result(state: ParseState) -> ParseResult:
    """
    Convert a terminal state into the caller-facing result.

    Raises:
        ValueError: If ``state`` is not terminal
    """
    if isinstance(state, Succeeded):
        return ParseSuccess(data=state.graph)
    if isinstance(state, Failed):
        return ParseFailure.of(state.message, state.code)
    raise ValueError(f"Non-terminal parse state: {state!r}")
