"""
Workflow Parser Module.

Public entry point of the prose-to-graph pipeline. One ``parse`` call walks
the attempt state machine: build payload, call the LLM, extract the
completion, validate the graph. Any failure along the way is a failed
attempt; the caller always receives exactly one ParseResult.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Optional

from core.llms.interfaces import IConnector, IResponseParser
from core.llms.providers import DeepSeekConnector
from core.llms.runtimes import ChatCompletionParser
from core.llms.constants import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from utils.logging.LoggerAdaptor import LoggerAdaptor

from ..constants import MAX_RETRIES, RETRY_DELAY_MS
from ..enum import ParseErrorCode
from ..exceptions import InvalidPromptError
from ..prompts import build_workflow_payload, normalize_prompt
from ..spec import ParseFailure, ParseResult, WorkflowGraph
from .graph_validator import GraphValidator
from .parse_state import (
    Attempting,
    ParseState,
    backoff_ms,
    is_terminal,
    on_failure,
    on_success,
    to_result,
)


SleepFn = Callable[[float], Awaitable[Any]]


class WorkflowParser:
    """
    Converts a prose prompt into a validated workflow graph.

    Attempts run strictly one after another. After failed attempt ``n`` the
    parser waits ``retry_delay_ms * n`` before attempt ``n + 1``; after
    ``max_retries`` failures it returns ``PARSE_ERROR`` with the last
    failure's message. The first valid graph ends the loop.

    Usage:
        parser = WorkflowParser(connector=DeepSeekConnector({"api_key": "sk-..."}))
        result = await parser.parse("When a form is submitted, notify Slack")
        if result.success:
            graph = result.data
    """

    def __init__(
        self,
        connector: Optional[IConnector] = None,
        connector_config: Optional[Dict[str, Any]] = None,
        response_parser: Optional[IResponseParser] = None,
        validator: Optional[GraphValidator] = None,
        max_retries: int = MAX_RETRIES,
        retry_delay_ms: int = RETRY_DELAY_MS,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        sleep: SleepFn = asyncio.sleep,
    ):
        """
        Initialize the parser.

        Args:
            connector: LLM connector; when omitted a DeepSeekConnector is
                created on first use from ``connector_config`` (or the environment)
            connector_config: Configuration for the default connector
            response_parser: Completion extractor (default: ChatCompletionParser)
            validator: Graph validator (default: GraphValidator)
            max_retries: Total number of attempts (>= 1)
            retry_delay_ms: Base backoff delay in milliseconds (>= 0)
            model: Model identifier sent with each request
            temperature: Sampling temperature sent with each request
            max_tokens: Completion token limit sent with each request
            sleep: Awaitable sleep taking seconds
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        if retry_delay_ms < 0:
            raise ValueError(f"retry_delay_ms must be non-negative, got {retry_delay_ms}")

        self._connector = connector
        self._connector_config = dict(connector_config or {})
        self._response_parser = response_parser or ChatCompletionParser()
        self._validator = validator or GraphValidator()
        self.max_retries = max_retries
        self.retry_delay_ms = retry_delay_ms
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._sleep = sleep
        self.logger = LoggerAdaptor.get_logger("workflows.parser")

    def _get_connector(self) -> IConnector:
        # Built lazily so a missing API key fails an attempt instead of the caller.
        if self._connector is None:
            self._connector = DeepSeekConnector(self._connector_config)
        return self._connector

    async def _attempt(self, prompt: str, n: int) -> WorkflowGraph:
        payload = build_workflow_payload(
            prompt,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        start_time = time.time()
        raw_text = await self._get_connector().request(payload)
        response = self._response_parser.parse_response(raw_text, start_time)
        self.logger.debug(
            "Completion received",
            attempt=n,
            finish_reason=response.finish_reason.value if response.finish_reason else None,
            total_tokens=response.usage.total_tokens if response.usage else None,
        )
        return self._validator.validate(response.content)

    async def parse(self, prompt: Any) -> ParseResult:
        """
        Parse a prose prompt into a workflow graph.

        Args:
            prompt: User's description of the automation

        Returns:
            ParseSuccess with the graph, or ParseFailure with
            ``INVALID_PROMPT`` (blank/non-string prompt, no network call) or
            ``PARSE_ERROR`` (every attempt failed)
        """
        try:
            prompt = normalize_prompt(prompt)
        except InvalidPromptError as e:
            self.logger.warning("Rejected workflow prompt", reason=e.message)
            return ParseFailure.of(e.message, ParseErrorCode.INVALID_PROMPT)

        state: ParseState = Attempting(n=1)
        self.logger.info(
            "Parsing workflow",
            prompt_length=len(prompt),
            max_retries=self.max_retries,
        )

        while not is_terminal(state):
            try:
                graph = await self._attempt(prompt, state.n)
                self.logger.info(
                    "Workflow parsed",
                    attempt=state.n,
                    nodes=len(graph.nodes),
                    edges=len(graph.edges),
                )
                state = on_success(state, graph)
            except Exception as e:
                message = str(e)
                self.logger.warning(
                    "Workflow parse attempt failed",
                    attempt=state.n,
                    error_type=type(e).__name__,
                    error=message,
                )
                next_state = on_failure(state, message, self.max_retries)
                if isinstance(next_state, Attempting):
                    delay_ms = backoff_ms(state, self.retry_delay_ms)
                    self.logger.info(
                        "Retrying workflow parse",
                        next_attempt=next_state.n,
                        delay_ms=delay_ms,
                    )
                    await self._sleep(delay_ms / 1000)
                else:
                    self.logger.error(
                        "Workflow parse failed",
                        attempts=state.n,
                        error=next_state.message,
                    )
                state = next_state

        return to_result(state)


async def parse_workflow(prompt: Any, **kwargs: Any) -> ParseResult:
    """
    Parse a prose prompt with a fresh WorkflowParser.

    Args:
        prompt: User's description of the automation
        **kwargs: Forwarded to WorkflowParser

    Returns:
        ParseResult
    """
    return await WorkflowParser(**kwargs).parse(prompt)
