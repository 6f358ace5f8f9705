"""Classifier module for AI-powered issue difficulty classification."""

from .classifier import IssueClassifier, ProviderAttempt
from .models import ClassificationRequest, ClassificationResult, Difficulty
from .parsing import DIFFICULTY_TIERS, extract_json, validate_result
from .prompt import build_prompt, format_labels
from .sinks import AttemptEvent, DisplaySink, LoggingSink, RecordingSink

__all__ = [
    "IssueClassifier",
    "ProviderAttempt",
    "ClassificationRequest",
    "ClassificationResult",
    "Difficulty",
    "DIFFICULTY_TIERS",
    "extract_json",
    "validate_result",
    "build_prompt",
    "format_labels",
    "DisplaySink",
    "LoggingSink",
    "RecordingSink",
    "AttemptEvent",
]
