"""Command line interface for IssueClassifier."""
