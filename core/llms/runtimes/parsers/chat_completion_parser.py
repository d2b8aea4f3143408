"""
Chat Completion Response Parser.

Reads OpenAI-compatible chat-completion envelopes (as returned by DeepSeek)
and extracts the completion text.
"""

import json
import time
from typing import Any, Dict, Optional
from ...interfaces.llm_interfaces import IResponseParser
from ...spec.llm_result import LLMResponse, LLMUsage
from ...exceptions import InvalidResponseError
from ...enum import FinishReason
from ...constants import (
    CODE_FENCE,
    CODE_FENCE_JSON,
    DEFAULT_RESPONSE_ROLE,
    ERROR_MSG_EMPTY_COMPLETION,
    FINISH_REASON_CONTENT_FILTER,
    FINISH_REASON_LENGTH,
    FINISH_REASON_STOP,
    FINISH_REASON_TOOL_CALLS,
    MESSAGE_FIELD_ROLE,
    META_ID,
    META_MODEL,
    PROVIDER_DEEPSEEK,
    RESPONSE_FIELD_CHOICES,
    RESPONSE_FIELD_COMPLETION_TOKENS,
    RESPONSE_FIELD_CONTENT,
    RESPONSE_FIELD_FINISH_REASON,
    RESPONSE_FIELD_MESSAGE,
    RESPONSE_FIELD_PROMPT_TOKENS,
    RESPONSE_FIELD_TOTAL_TOKENS,
    RESPONSE_FIELD_USAGE,
)


def strip_code_fences(content: str) -> str:
    """
    Trim whitespace and remove every markdown fence marker.

    Both "```json" and "```" are removed wherever they appear, not only at
    the edges, so ``'```json\\n{...}\\n```'`` becomes ``'\\n{...}\\n'``.

    Args:
        content: Raw completion text

    Returns:
        Text with all fence markers removed
    """
    cleaned = content.strip()
    cleaned = cleaned.replace(CODE_FENCE_JSON, "")
    cleaned = cleaned.replace(CODE_FENCE, "")
    return cleaned


class ChatCompletionParser(IResponseParser):
    """
    Response parser for chat-completion responses.

    Handles:
    - Envelope decoding (raw body text -> dict)
    - ``choices[0].message.content`` extraction
    - Markdown fence stripping
    - Usage statistics and finish reasons

    Usage:
        parser = ChatCompletionParser()
        content = parser.extract_content(raw_text)
    """

    def __init__(self, provider: str = PROVIDER_DEEPSEEK):
        self.provider = provider

    def _decode(self, raw_text: str) -> Dict[str, Any]:
        try:
            envelope = json.loads(raw_text)
        except (json.JSONDecodeError, TypeError) as e:
            raise InvalidResponseError(
                str(e),
                provider=self.provider,
                details={"raw_preview": str(raw_text)[:200]}
            )
        if not isinstance(envelope, dict):
            raise InvalidResponseError(
                ERROR_MSG_EMPTY_COMPLETION,
                provider=self.provider,
                details={"raw_preview": str(raw_text)[:200]}
            )
        return envelope

    def _first_choice(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        choices = envelope.get(RESPONSE_FIELD_CHOICES)
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return {}
        return choices[0]

    def _read_content(self, envelope: Dict[str, Any]) -> str:
        message = self._first_choice(envelope).get(RESPONSE_FIELD_MESSAGE)
        content = message.get(RESPONSE_FIELD_CONTENT) if isinstance(message, dict) else None

        if not content or not isinstance(content, str):
            raise InvalidResponseError(
                ERROR_MSG_EMPTY_COMPLETION,
                provider=self.provider,
                details={"response": envelope}
            )
        return content

    def extract_content(self, raw_text: str) -> str:
        """
        Pull the cleaned completion text out of a raw response body.

        Args:
            raw_text: Raw response body

        Returns:
            Completion text with whitespace trimmed and fences removed

        Raises:
            InvalidResponseError: If the body is not JSON or the completion
                is absent/empty
        """
        envelope = self._decode(raw_text)
        return strip_code_fences(self._read_content(envelope))

    def parse_response(self, raw_text: str, start_time: float) -> LLMResponse:
        """
        Parse a raw response body into LLMResponse.

        Usage, role and finish reason are best effort: values of the wrong
        type are dropped so they never fail an otherwise usable completion.

        Args:
            raw_text: Raw response body
            start_time: Request start time

        Returns:
            LLMResponse with cleaned content, usage and finish reason

        Raises:
            InvalidResponseError: If the body is not JSON or the completion
                is absent/empty
        """
        envelope = self._decode(raw_text)
        content = strip_code_fences(self._read_content(envelope))
        choice = self._first_choice(envelope)
        message = choice.get(RESPONSE_FIELD_MESSAGE) or {}
        role = message.get(MESSAGE_FIELD_ROLE)

        usage_data = envelope.get(RESPONSE_FIELD_USAGE)
        if not isinstance(usage_data, dict):
            usage_data = {}
        usage = LLMUsage(
            prompt_tokens=self._token_count(usage_data.get(RESPONSE_FIELD_PROMPT_TOKENS)),
            completion_tokens=self._token_count(usage_data.get(RESPONSE_FIELD_COMPLETION_TOKENS)),
            total_tokens=self._token_count(usage_data.get(RESPONSE_FIELD_TOTAL_TOKENS)),
            duration_ms=max(int((time.time() - start_time) * 1000), 0),
        )

        return LLMResponse(
            content=content,
            role=role if isinstance(role, str) and role else DEFAULT_RESPONSE_ROLE,
            finish_reason=self._map_finish_reason(choice.get(RESPONSE_FIELD_FINISH_REASON)),
            usage=usage,
            metadata={
                META_MODEL: envelope.get(META_MODEL),
                META_ID: envelope.get(META_ID),
            }
        )

    @staticmethod
    def _token_count(value: Any) -> int:
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return 0
        return value

    def _map_finish_reason(self, reason: Any) -> Optional[FinishReason]:
        """Map provider finish reason to standard enum."""
        if not reason or not isinstance(reason, str):
            return None
        mapping = {
            FINISH_REASON_STOP: FinishReason.STOP,
            FINISH_REASON_LENGTH: FinishReason.LENGTH,
            FINISH_REASON_CONTENT_FILTER: FinishReason.CONTENT_FILTER,
            FINISH_REASON_TOOL_CALLS: FinishReason.TOOL_CALLS,
        }
        return mapping.get(reason, FinishReason.STOP)
