"""Configuration module for IssueClassifier."""

from .manager import ConfigManager
from .models import (
    DEFAULT_FALLBACK_MODEL,
    FALLBACK_API_KEY_ENV,
    PRIMARY_AGENT_ID_ENV,
    PRIMARY_API_KEY_ENV,
    ClassifierSettings,
    IssueClassifierConfig,
    LoggingSettings,
    ProviderCredentials,
    ProviderSettings,
)

__all__ = [
    "IssueClassifierConfig",
    "ClassifierSettings",
    "ProviderSettings",
    "ProviderCredentials",
    "LoggingSettings",
    "ConfigManager",
    "DEFAULT_FALLBACK_MODEL",
    "PRIMARY_API_KEY_ENV",
    "PRIMARY_AGENT_ID_ENV",
    "FALLBACK_API_KEY_ENV",
]
