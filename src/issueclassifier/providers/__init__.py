"""Completion providers for IssueClassifier."""

from .client import CompletionClient

__all__ = ["CompletionClient"]
