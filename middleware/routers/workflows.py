"""
Workflows API Router

Endpoints for turning prose into workflow graphs.

Endpoints:
- POST /workflows/parse - Parse a prompt into a workflow graph
- GET /llm/ping - Check connectivity to the LLM provider

Version: 1.0.0
"""

import asyncio

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.llms.exceptions import ConfigurationError, LLMError
from core.llms.providers import DeepSeekConnector
from core.workflows import ParseErrorCode, ParseFailure, WorkflowParser
from core.workflows.constants import (
    ERROR_INTERNAL,
    ERROR_PARSE_TIMEOUT,
    ERROR_PROMPT_REQUIRED,
)
from utils.logging.LoggerAdaptor import LoggerAdaptor

from ..config import Settings, get_settings


router = APIRouter()
logger = LoggerAdaptor.get_logger("middleware.workflows")


# =============================================================================
# Dependencies
# =============================================================================

def get_workflow_parser(settings: Settings = Depends(get_settings)) -> WorkflowParser:
    """Build a parser for one request; nothing is shared between requests."""
    return WorkflowParser(
        connector_config=settings.connector_config(),
        **settings.parser_options(),
    )


def _failure(status_code: int, message: str, code: ParseErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ParseFailure.of(message, code).to_dict(),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/workflows/parse")
async def parse_workflow_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    parser: WorkflowParser = Depends(get_workflow_parser),
):
    """
    Parse a prose prompt into a workflow graph.

    Body: ``{"prompt": "..."}``

    Returns:
        200 ``{success: true, data: {nodes, edges}}`` on success,
        400 ``{success: false, error: {message, code}}`` on a rejected
        prompt, parse failure or timeout, 500 on an unexpected error
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    prompt = body.get("prompt") if isinstance(body, dict) else None
    if not isinstance(prompt, str) or not prompt.strip():
        return _failure(400, ERROR_PROMPT_REQUIRED, ParseErrorCode.INVALID_PROMPT)

    try:
        result = await asyncio.wait_for(parser.parse(prompt), timeout=settings.parse_timeout_s)
    except asyncio.TimeoutError:
        logger.warning("Workflow parse timed out", timeout_s=settings.parse_timeout_s)
        return _failure(400, ERROR_PARSE_TIMEOUT, ParseErrorCode.PARSE_ERROR)
    except Exception as e:
        logger.error("Workflow parse raised", error_type=type(e).__name__, error=str(e))
        return _failure(500, ERROR_INTERNAL, ParseErrorCode.INTERNAL_ERROR)

    if result.success:
        return JSONResponse(status_code=200, content=result.to_dict())
    return JSONResponse(status_code=400, content=result.to_dict())


@router.get("/llm/ping")
async def ping_llm(settings: Settings = Depends(get_settings)):
    """
    Probe the LLM provider by listing its models.

    Returns:
        200 ``{ok: true, status, body}`` when the provider answered,
        503 when no API key is configured, 502 when the provider is unreachable
    """
    try:
        connector = DeepSeekConnector(settings.connector_config())
        result = await connector.test_connection()
    except ConfigurationError as e:
        return JSONResponse(status_code=503, content={"ok": False, "error": e.to_dict()})
    except LLMError as e:
        logger.warning("LLM connectivity check failed", error=e.message)
        return JSONResponse(status_code=502, content={"ok": False, "error": e.to_dict()})

    return {"ok": True, "status": result["status"], "body": result["body"]}
