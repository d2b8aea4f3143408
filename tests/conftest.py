"""
Shared fixtures for the flowparse test suite.
"""

import asyncio
import json
from typing import Any, Dict, List, Union

import pytest


# ============================================================================
# Helpers
# ============================================================================

class FakeConnector:
    """
    In-memory connector that replays scripted outcomes.

    Each item in ``outcomes`` is either a raw response body (returned) or an
    exception instance (raised). Every request payload is recorded.
    """

    def __init__(self, outcomes: List[Union[str, Exception]], delay_s: float = 0.0):
        self.outcomes = list(outcomes)
        self.delay_s = delay_s
        self.payloads: List[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.payloads)

    async def request(self, payload: Dict[str, Any], **kwargs: Any) -> str:
        self.payloads.append(payload)
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def test_connection(self) -> Dict[str, Any]:
        return {"status": 200, "body": {}}


class SleepRecorder:
    """Stand-in for asyncio.sleep that records requested delays (seconds)."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_envelope(content: Any, **extra: Any) -> str:
    """Raw chat-completion body with ``content`` as the first choice."""
    body = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    body.update(extra)
    return json.dumps(body)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def envelope():
    """Factory for raw chat-completion response bodies."""
    return make_envelope


@pytest.fixture
def fake_connector():
    """Factory for scripted connectors."""
    return FakeConnector


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def valid_graph() -> Dict[str, Any]:
    return {
        "nodes": [
            {
                "id": "node-1",
                "type": "trigger",
                "label": "New Lead Trigger",
                "config": {"source": "LinkedIn", "event": "newConnection"},
            },
            {
                "id": "node-2",
                "type": "llmAgent",
                "label": "Summarize Lead",
                "config": {"model": "deepseek-chat"},
            },
            {
                "id": "node-3",
                "type": "action",
                "label": "Email Sales",
                "config": {},
            },
        ],
        "edges": [
            {"source": "node-1", "target": "node-2", "label": "onNewConnection"},
            {"source": "node-2", "target": "node-3"},
        ],
    }


@pytest.fixture(autouse=True)
def no_deepseek_env(monkeypatch):
    """Keep tests independent of any real DeepSeek credentials in the environment."""
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    monkeypatch.delenv("DEEPSEEK_BASE_URL", raising=False)
