"""Cross-layer enumerations."""

from enum import Enum


class EnumEnvironment(str, Enum):
    """Deployment environment; ``production`` switches logs to JSON."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
