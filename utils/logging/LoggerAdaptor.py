import json
import logging
import os
from datetime import datetime
from typing import Any

from utils.logging.RedactionManager import RedactionManager
from utils.logging.Enum import Environment, LoggingFormat, RedactionConfig


ENV_LOG_ENVIRONMENT = "FLOWPARSE_ENVIRONMENT"

DEFAULT_CONFIG: dict[str, Any] = {
    "backend": LoggingFormat.JSON.value,
    "level": "INFO",
    "propagate": False,
    "formatters": {
        "default": {"format": "%(message)s"},
    },
    "handlers": {
        "console": {"type": "console", "formatter": "default", "level": "DEBUG"},
    },
    "redaction": {RedactionConfig.ENABLED.value: True},
}


class LoggerAdaptor:
    """
    Unified Logger Adaptor that provides a consistent interface across different logging mechanisms.

    The adaptor wraps a stdlib ``logging.Logger`` and renders every record through
    one of three backends:

    - ``json``: one JSON object per line (default, suited for log shipping)
    - ``standard``: ``message [key=value ...]``
    - ``detailed``: timestamp, level, logger name and a context suffix

    Keyword arguments passed to the log methods become structured fields, and
    credentials (bearer tokens, ``api_key`` fields) are masked before emission.

    Usage:
    ```python
    from utils.logging import LoggerAdaptor

    logger = LoggerAdaptor.get_logger("workflows.parser")
    logger.info("Attempt failed", attempt=2, error="DeepSeek 500: ...")

    logger.set_context(request_id="abc")
    logger.warning("Retrying")
    ```

    Args:
        name: Logger name (for identification)
        environment: Environment name (dev, staging, prod, test) - optional
        config: Optional configuration dictionary. Falls back to the class-wide
               defaults set through ``configure_defaults``.
    """

    _instances = {}
    _config = None

    @classmethod
    def clear_instances(cls):
        """
        Clear all cached logger instances.

        This is useful for testing or when you want to force recreation
        of logger instances with new configurations.
        """
        for instance in cls._instances.values():
            instance.shutdown()
        cls._instances.clear()

    @classmethod
    def configure_defaults(cls, level: str = None, backend: str = None) -> None:
        """
        Override the default level/backend used by loggers created afterwards.

        Already-created loggers are reconfigured in place.
        """
        config = dict(cls._config or DEFAULT_CONFIG)
        if level:
            config["level"] = level.upper()
        if backend:
            config["backend"] = backend.lower()
        cls._config = config
        for instance in cls._instances.values():
            instance._initialize_logger()

    def __init__(self, name: str = "default", environment: str = None, config: dict[str, Any] = None):
        self.environment = (environment or self._detect_environment()).lower()
        self.name = name
        self._own_config = config

        self.logger = None
        self.redaction_manager = None
        self.context = {}  # For structured logging context

        self._initialize_logger()

    @classmethod
    def get_logger(
            cls,
            name: str = "default",
            environment: str = None,
            config: dict[str, Any] = None) -> 'LoggerAdaptor':
        """
        Get or create a logger instance (singleton pattern per name/environment).

        Args:
            name: Logger name (for identification)
            environment: Environment name (dev, staging, prod, test)
            config: Optional configuration dictionary

        Returns:
            LoggerAdaptor instance
        """
        env = (environment or cls._detect_environment()).lower()
        instance_key = f"{name}_{env}"
        if instance_key not in cls._instances:
            cls._instances[instance_key] = cls(name, environment, config)
        return cls._instances[instance_key]

    @staticmethod
    def _detect_environment() -> str:
        """Detect current environment from env variables.

        Defaults to 'prod' if not set.
        """
        return os.environ.get(ENV_LOG_ENVIRONMENT, Environment.PROD.value)

    @property
    def config(self) -> dict[str, Any]:
        return self._own_config or LoggerAdaptor._config or DEFAULT_CONFIG

    def _initialize_logger(self):
        """Initialize the logger based on configuration."""
        config = self.config
        self.backend = config.get('backend', LoggingFormat.JSON.value).lower()

        redaction_config = config.get('redaction', {})
        if redaction_config.get(RedactionConfig.ENABLED.value, False):
            self.redaction_manager = RedactionManager(redaction_config)
        else:
            self.redaction_manager = None

        self.logger = logging.getLogger(self.name)
        self._configure_logger(config)

    def _configure_logger(self, config: dict[str, Any]):
        """Configure the logger based on configuration."""
        self.logger.handlers.clear()
        self.logger.propagate = config.get('propagate', False)

        level_str = config.get('level', 'INFO').upper()
        self.logger.setLevel(getattr(logging, level_str))

        formatters = self._create_formatters(config.get('formatters', {}))

        for handler_config in config.get('handlers', {}).values():
            handler = self._create_handler(handler_config, formatters)
            if handler:
                self.logger.addHandler(handler)

    def _create_formatters(self, formatters_config: dict[str, Any]) -> dict[str, logging.Formatter]:
        """Create formatters from configuration."""
        formatters = {}
        for name, format_config in formatters_config.items():
            format_string = format_config.get(
                'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            date_format = format_config.get('datefmt')
            formatters[name] = logging.Formatter(format_string, date_format)
        return formatters

    def _create_handler(
        self,
        handler_config: dict[str, Any],
        formatters: dict[str, logging.Formatter],
    ) -> logging.Handler | None:
        """Create a handler from configuration."""
        handler_type = handler_config.get('type')
        formatter_name = handler_config.get('formatter', 'default')
        level_str = handler_config.get('level', 'INFO').upper()

        handler = None

        if handler_type == 'console':
            handler = logging.StreamHandler()
        elif handler_type == 'file':
            handler = logging.FileHandler(handler_config.get('filename', 'flowparse.log'))

        if handler:
            handler.setLevel(getattr(logging, level_str))
            if formatter_name in formatters:
                handler.setFormatter(formatters[formatter_name])

        return handler

    def _format_message(self, *args) -> str:
        """Format message from multiple arguments."""
        if not args:
            return ""
        if len(args) == 1 and isinstance(args[0], str):
            return args[0]
        return " ".join(str(arg) for arg in args)

    def _redact_if_enabled(self, message: str, **kwargs) -> tuple[str, dict[str, Any]]:
        """Apply redaction if enabled."""
        if self.redaction_manager:
            redacted_message = self.redaction_manager.redact_message(message)
            redacted_kwargs = self.redaction_manager.redact_data(kwargs)
            return redacted_message, redacted_kwargs
        return message, kwargs

    def _log_message(self, level: str, *args, **kwargs):
        """Log message based on backend type."""
        if not self.logger.isEnabledFor(getattr(logging, level)):
            return

        message = self._format_message(*args)
        redacted_message, redacted_kwargs = self._redact_if_enabled(message, **kwargs)

        all_context = {**self.context, **redacted_kwargs}

        if self.backend == LoggingFormat.JSON.value:
            self._log_json(level, redacted_message, **all_context)
        elif self.backend == LoggingFormat.DETAILED.value:
            self._log_detailed(level, redacted_message, **all_context)
        else:
            self._log_standard(level, redacted_message, **all_context)

    def _log_standard(self, level: str, message: str, **kwargs):
        """Log using standard Python logging."""
        if kwargs:
            extra_info = " ".join([f"{k}={v}" for k, v in kwargs.items()])
            full_message = f"{message} [{extra_info}]"
        else:
            full_message = message

        self.logger.log(getattr(logging, level), full_message)

    def _log_json(self, level: str, message: str, **kwargs):
        """Log as JSON format."""
        log_data = {
            'timestamp': datetime.utcnow().isoformat(),
            'level': level,
            'logger': self.name,
            'message': message,
        }
        log_data.update(kwargs)

        self.logger.log(getattr(logging, level), json.dumps(log_data, default=str))

    def _log_detailed(self, level: str, message: str, **kwargs):
        """Log with detailed context as formatted text."""
        timestamp = datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S")
        detailed_message = f"[{timestamp}] {level} [{self.name}] {message}"

        if kwargs:
            context_parts = [f"{k}={v}" for k, v in kwargs.items()]
            detailed_message += f" | Context: {', '.join(context_parts)}"

        self.logger.log(getattr(logging, level), detailed_message)

    def debug(self, *args, **kwargs):
        """Log debug message."""
        self._log_message('DEBUG', *args, **kwargs)

    def info(self, *args, **kwargs):
        """Log info message."""
        self._log_message('INFO', *args, **kwargs)

    def warning(self, *args, **kwargs):
        """Log warning message."""
        self._log_message('WARNING', *args, **kwargs)

    def error(self, *args, **kwargs):
        """Log error message."""
        self._log_message('ERROR', *args, **kwargs)

    def critical(self, *args, **kwargs):
        """Log critical message."""
        self._log_message('CRITICAL', *args, **kwargs)

    def set_context(self, **kwargs):
        """Set persistent context for structured logging."""
        self.context.update(kwargs)

    def clear_context(self):
        """Clear all persistent context."""
        self.context.clear()

    def log_duration(self, operation_name: str, duration_seconds: float, **kwargs) -> None:
        """
        Log the duration of an operation at DEBUG level.

        Args:
            operation_name: Name/description of the operation
            duration_seconds: Duration in seconds
            **kwargs: Additional context for the log entry
        """
        duration_ms = duration_seconds * 1000
        if duration_ms < 1000:
            duration_str = f"{duration_ms:.2f}ms"
        else:
            duration_str = f"{duration_ms/1000:.2f}s"

        self.debug(
            f"Operation '{operation_name}' completed in {duration_str}",
            operation=operation_name,
            duration_ms=round(duration_ms, 2),
            **kwargs
        )

    def shutdown(self):
        """Flush and close all handlers."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)
