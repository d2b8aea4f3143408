"""
Logging Module.

Provides unified logging infrastructure with support for:
- Multiple backends (standard, JSON, detailed)
- Environment detection
- Redaction of credentials
- Duration logging

Version: 2.0.0
"""

from .LoggerAdaptor import LoggerAdaptor
from .RedactionManager import RedactionManager
from .Enum import (
    LogLevel,
    LoggingFormat,
    Environment,
    RedactionConfig,
)


__all__ = [
    "LoggerAdaptor",
    "RedactionManager",
    "LogLevel",
    "LoggingFormat",
    "Environment",
    "RedactionConfig",
]
