import re
from typing import Any

from utils.logging.Enum import RedactionConfig


DEFAULT_PATTERNS = [
    r"Bearer\s+[A-Za-z0-9\-_.]+",
    r"sk-[A-Za-z0-9]{8,}",
]

DEFAULT_KEYS = [
    "api_key",
    "apikey",
    "x_api_key",
    "authorization",
    "access_token",
    "refresh_token",
    "token",
    "password",
    "secret",
    "client_secret",
]

DEFAULT_REPLACEMENT = "***REDACTED***"


def _normalize_key(key: Any) -> str:
    return str(key).lower().replace("-", "_")


class RedactionManager:
    """
    Masks credentials in log messages and structured log fields.

    Messages are scanned with regex patterns. A keyword field is replaced
    outright when its name, lowercased with dashes read as underscores,
    equals one of the configured keys; ``total_tokens`` stays visible while
    ``token`` and ``X-Api-Key`` do not.
    """

    def __init__(self, config: dict[str, Any]):
        patterns = config.get(RedactionConfig.PATTERNS.value) or DEFAULT_PATTERNS
        self.patterns = [re.compile(p) for p in patterns]
        self.keys = {_normalize_key(k) for k in (config.get(RedactionConfig.KEYS.value) or DEFAULT_KEYS)}
        self.replacement = config.get(RedactionConfig.REPLACEMENT.value, DEFAULT_REPLACEMENT)

    def is_sensitive_key(self, key: Any) -> bool:
        return _normalize_key(key) in self.keys

    def redact_message(self, message: str) -> str:
        for pattern in self.patterns:
            message = pattern.sub(self.replacement, message)
        return message

    def redact_data(self, data: Any) -> Any:
        if isinstance(data, dict):
            redacted = {}
            for key, value in data.items():
                if self.is_sensitive_key(key):
                    redacted[key] = self.replacement
                else:
                    redacted[key] = self.redact_data(value)
            return redacted
        if isinstance(data, list):
            return [self.redact_data(item) for item in data]
        if isinstance(data, str):
            return self.redact_message(data)
        return data
