"""Exception hierarchy for IssueClassifier."""


class IssueClassifierError(Exception):
    """Base class for all IssueClassifier errors."""


class ConfigurationError(IssueClassifierError):
    """Raised when required credentials or settings are missing."""


class ProviderCallError(IssueClassifierError):
    """Raised when a completion request to a provider fails."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ResponseParseError(IssueClassifierError):
    """Raised when a model response cannot be turned into a JSON object."""


class NoJSONFoundError(ResponseParseError):
    """Raised when a response contains no brace-delimited object."""


class MalformedJSONError(ResponseParseError):
    """Raised when the brace-delimited text in a response is not valid JSON."""


class ResultValidationError(IssueClassifierError):
    """Raised when a parsed result does not name a known difficulty tier."""
