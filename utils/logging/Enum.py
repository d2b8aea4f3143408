from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingFormat(str, Enum):
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


class Environment(str, Enum):
    DEV = "dev"
    TEST = "test"
    STAGING = "staging"
    PROD = "prod"


class RedactionConfig(str, Enum):
    ENABLED = "enabled"
    PATTERNS = "patterns"
    KEYS = "keys"
    REPLACEMENT = "replacement"
