"""
Base Connector.

Common configuration handling shared by all provider connectors.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from ...constants import DEFAULT_TIMEOUT_SECONDS
from ...exceptions import ConfigurationError


class BaseConnector(ABC):
    """
    Abstract base class for provider connectors.

    Subclasses implement ``request`` (one call, no retry) and
    ``test_connection``. Configuration is a plain dict so connectors can be
    built from settings, tests, or ad-hoc scripts alike.

    Common Configuration:
        - timeout: Request timeout in seconds (default: 60)
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize connector.

        Args:
            config: Connector configuration

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = dict(config or {})
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate shared configuration fields."""
        timeout = self.config.get("timeout", DEFAULT_TIMEOUT_SECONDS)
        if not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(
                f"timeout must be a positive number, got {timeout!r}",
                details={"timeout": timeout}
            )

    def get_timeout(self) -> float:
        """Get request timeout in seconds."""
        return self.config.get("timeout", DEFAULT_TIMEOUT_SECONDS)

    @abstractmethod
    async def request(self, payload: Dict[str, Any], **kwargs: Any) -> str:
        """Send one request and return the raw response body."""

    @abstractmethod
    async def test_connection(self) -> Dict[str, Any]:
        """Probe the provider."""
