"""
Tests for the workflow parser (attempt loop, backoff and result shape).

A scripted connector replaces the network and a recorder replaces
asyncio.sleep, so retry timing is asserted without waiting.
"""

import asyncio
import json

import pytest

from core.llms.exceptions import ProviderError, TimeoutError
from core.workflows import ParseErrorCode, ParseFailure, ParseSuccess, WorkflowParser, parse_workflow
from core.workflows.runtimes.parse_state import (
    Attempting,
    Failed,
    Succeeded,
    backoff_ms,
    is_terminal,
    on_failure,
    to_result,
)
from core.workflows.spec import WorkflowGraph


def http_500(n: int) -> ProviderError:
    body = json.dumps({"error": f"Attempt {n} fail"}, separators=(",", ":"))
    return ProviderError(f"DeepSeek 500: {body}", provider="deepseek", status_code=500)


# ============================================================================
# Success Paths
# ============================================================================

@pytest.mark.asyncio
async def test_valid_response_returns_graph(fake_connector, sleep_recorder, envelope, valid_graph):
    connector = fake_connector([envelope(json.dumps(valid_graph))])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("A simple workflow")

    assert isinstance(result, ParseSuccess)
    assert result.success is True
    assert result.data.to_dict() == valid_graph
    assert connector.call_count == 1
    assert sleep_recorder.delays == []


@pytest.mark.asyncio
async def test_fenced_and_plain_responses_match(fake_connector, sleep_recorder, envelope, valid_graph):
    text = json.dumps(valid_graph)
    plain = await WorkflowParser(
        connector=fake_connector([envelope(text)]), sleep=sleep_recorder
    ).parse("Workflow")
    fenced = await WorkflowParser(
        connector=fake_connector([envelope(f"```json\n{text}\n```")]), sleep=sleep_recorder
    ).parse("Workflow")

    assert plain.success and fenced.success
    assert fenced.to_dict() == plain.to_dict()


@pytest.mark.asyncio
async def test_payload_sent_to_connector(fake_connector, sleep_recorder, envelope):
    connector = fake_connector([envelope('{"nodes": [], "edges": []}')])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder, model="deepseek-chat")

    await parser.parse("  email me daily  ")

    payload = connector.payloads[0]
    assert payload["model"] == "deepseek-chat"
    assert payload["temperature"] == 0.3
    assert payload["max_tokens"] == 1000
    assert payload["messages"][0]["role"] == "system"
    assert payload["messages"][1] == {"role": "user", "content": "email me daily"}


@pytest.mark.asyncio
@pytest.mark.parametrize("usage, finish_reason", [
    ({"prompt_tokens": 12.5, "completion_tokens": 40, "total_tokens": 52.5}, "stop"),
    ({"prompt_tokens": -1, "completion_tokens": 40, "total_tokens": 39}, "stop"),
    ({"prompt_tokens": 12, "completion_tokens": 40, "total_tokens": 52}, ["stop"]),
])
async def test_odd_completion_metadata_still_succeeds(fake_connector, sleep_recorder, valid_graph, usage, finish_reason):
    raw = json.dumps({
        "choices": [{
            "message": {"role": "assistant", "content": json.dumps(valid_graph)},
            "finish_reason": finish_reason,
        }],
        "usage": usage,
    })
    connector = fake_connector([raw])

    result = await WorkflowParser(connector=connector, sleep=sleep_recorder).parse("A simple workflow")

    assert isinstance(result, ParseSuccess)
    assert result.data.to_dict() == valid_graph
    assert connector.call_count == 1


# ============================================================================
# Retry Logic
# ============================================================================

@pytest.mark.asyncio
async def test_retry_succeeds_on_second_attempt(fake_connector, sleep_recorder, envelope):
    graph = {"nodes": [{"id": "n1", "type": "action", "label": "Do", "config": {}}], "edges": []}
    connector = fake_connector([http_500(1), envelope(json.dumps(graph))])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("Retry test")

    assert result.success is True
    assert result.data.nodes[0].label == "Do"
    assert connector.call_count == 2
    assert sleep_recorder.delays == [1.0]


@pytest.mark.asyncio
async def test_fails_after_max_retries(fake_connector, sleep_recorder):
    connector = fake_connector([http_500(1), http_500(2), http_500(3)])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("Max retries test")

    assert isinstance(result, ParseFailure)
    assert result.success is False
    assert result.error.code == ParseErrorCode.PARSE_ERROR
    assert result.error.message == 'DeepSeek 500: {"error":"Attempt 3 fail"}'
    assert connector.call_count == 3
    assert sleep_recorder.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_backoff_grows_linearly_with_custom_policy(fake_connector, sleep_recorder):
    connector = fake_connector([http_500(n) for n in range(1, 6)])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder, max_retries=5, retry_delay_ms=10)

    result = await parser.parse("x")

    assert result.success is False
    assert connector.call_count == 5
    assert sleep_recorder.delays == [0.01, 0.02, 0.03, 0.04]


@pytest.mark.asyncio
async def test_single_attempt_policy_never_sleeps(fake_connector, sleep_recorder):
    connector = fake_connector([TimeoutError("Request timed out after 60 seconds", provider="deepseek")])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder, max_retries=1)

    result = await parser.parse("x")

    assert result.error.message == "Request timed out after 60 seconds"
    assert sleep_recorder.delays == []


@pytest.mark.asyncio
async def test_mixed_failures_report_last_message(fake_connector, sleep_recorder, envelope):
    connector = fake_connector([
        http_500(1),
        envelope(None),
        envelope('{"edges": []}'),
    ])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("x")

    assert result.error.message == "Invalid workflow structure: nodes: Required"
    assert connector.call_count == 3


def test_invalid_retry_policy_rejected():
    with pytest.raises(ValueError):
        WorkflowParser(max_retries=0)
    with pytest.raises(ValueError):
        WorkflowParser(retry_delay_ms=-1)


# ============================================================================
# Bad Responses
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize("content, expected", [
    (None, "Empty response from DeepSeek"),
    ("", "Empty response from DeepSeek"),
    (json.dumps({"nodes": [{"type": "trigger", "label": "No ID", "config": {}}], "edges": []}), "nodes.0.id"),
    (json.dumps({"edges": []}), "nodes: Required"),
    (json.dumps({"nodes": [], "edges": [{"target": "t2"}]}), "edges.0.source"),
])
async def test_bad_completion_fails_after_retries(fake_connector, sleep_recorder, envelope, content, expected):
    connector = fake_connector([envelope(content)] * 3)
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("bad completion")

    assert result.success is False
    assert result.error.code == ParseErrorCode.PARSE_ERROR
    assert expected in result.error.message
    assert connector.call_count == 3


@pytest.mark.asyncio
async def test_non_json_completion_reports_decoder_message(fake_connector, sleep_recorder, envelope):
    connector = fake_connector([envelope("Not JSON")] * 3)
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse("invalid json")

    assert result.error.message.startswith("Expecting value")


@pytest.mark.asyncio
async def test_missing_api_key_is_an_attempt_failure(sleep_recorder):
    parser = WorkflowParser(sleep=sleep_recorder)

    result = await parser.parse("no key configured")

    assert result.error.code == ParseErrorCode.PARSE_ERROR
    assert "DEEPSEEK_API_KEY" in result.error.message
    assert sleep_recorder.delays == [1.0, 2.0]


# ============================================================================
# Prompt Rejection
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize("prompt", ["", "   ", None, 42])
async def test_invalid_prompt_makes_no_call(fake_connector, sleep_recorder, prompt):
    connector = fake_connector([])
    parser = WorkflowParser(connector=connector, sleep=sleep_recorder)

    result = await parser.parse(prompt)

    assert result.success is False
    assert result.error.code == ParseErrorCode.INVALID_PROMPT
    assert connector.call_count == 0
    assert result.to_dict() == {
        "success": False,
        "error": {
            "message": "Prompt is required and must be a non-empty string",
            "code": "INVALID_PROMPT",
        },
    }


# ============================================================================
# Module Entry Point & Cancellation
# ============================================================================

@pytest.mark.asyncio
async def test_parse_workflow_function(fake_connector, sleep_recorder, envelope, valid_graph):
    connector = fake_connector([envelope(json.dumps(valid_graph))])

    result = await parse_workflow("Lead flow", connector=connector, sleep=sleep_recorder)

    assert result.success is True
    assert len(result.data.nodes) == 3


@pytest.mark.asyncio
async def test_caller_timeout_cancels_in_flight_attempt(fake_connector, envelope):
    connector = fake_connector([envelope('{"nodes": [], "edges": []}')], delay_s=5)
    parser = WorkflowParser(connector=connector)

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(parser.parse("slow"), timeout=0.05)

    assert connector.call_count == 1


@pytest.mark.asyncio
async def test_concurrent_parses_are_independent(fake_connector, sleep_recorder, envelope):
    good = {"nodes": [{"id": "a", "type": "trigger", "label": "A", "config": {}}], "edges": []}
    ok_connector = fake_connector([envelope(json.dumps(good))])
    bad_connector = fake_connector([http_500(1), http_500(2), http_500(3)])

    ok, bad = await asyncio.gather(
        WorkflowParser(connector=ok_connector, sleep=sleep_recorder).parse("one"),
        WorkflowParser(connector=bad_connector, sleep=sleep_recorder).parse("two"),
    )

    assert ok.success is True
    assert bad.success is False
    assert ok_connector.call_count == 1
    assert bad_connector.call_count == 3


# ============================================================================
# State Machine
# ============================================================================

def test_state_transitions():
    graph = WorkflowGraph(nodes=[], edges=[])

    assert on_failure(Attempting(1), "boom", 3) == Attempting(2)
    assert on_failure(Attempting(3), "boom", 3) == Failed("boom")
    assert on_failure(Attempting(3), "", 3) == Failed("Failed to parse workflow")
    assert is_terminal(Succeeded(graph)) and is_terminal(Failed("x"))
    assert not is_terminal(Attempting(1))


def test_backoff_uses_previous_attempt_number():
    assert [backoff_ms(Attempting(n), 1000) for n in (1, 2, 3)] == [1000, 2000, 3000]


def test_terminal_states_convert_to_results():
    graph = WorkflowGraph(nodes=[], edges=[])

    assert to_result(Succeeded(graph)).to_dict() == {"success": True, "data": {"nodes": [], "edges": []}}
    assert to_result(Failed("bad")).error.code == ParseErrorCode.PARSE_ERROR
    with pytest.raises(ValueError):
        to_result(Attempting(1))


def test_reserved_error_code_exists():
    assert ParseErrorCode.MAX_RETRIES_EXCEEDED.value == "MAX_RETRIES_EXCEEDED"
