"""
IssueClassifier - Rate GitHub issues by difficulty with an AI model.

Sends a rubric prompt to a primary completion provider, falls back to a
secondary provider on failure, and pulls a JSON verdict out of the reply.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import ClassificationRequest, ClassificationResult, IssueClassifier
from .config import ClassifierSettings, ConfigManager, ProviderCredentials
from .errors import (
    ConfigurationError,
    IssueClassifierError,
    MalformedJSONError,
    NoJSONFoundError,
    ProviderCallError,
    ResponseParseError,
    ResultValidationError,
)
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    "ConfigManager",
    # Classifier
    "IssueClassifier",
    "ClassificationRequest",
    "ClassificationResult",
    # Configuration
    "ClassifierSettings",
    "ProviderCredentials",
    # Errors
    "IssueClassifierError",
    "ConfigurationError",
    "ProviderCallError",
    "ResponseParseError",
    "NoJSONFoundError",
    "MalformedJSONError",
    "ResultValidationError",
]
