"""Issue difficulty classifier with primary and fallback completion providers."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from ..config.models import DEFAULT_FALLBACK_MODEL, ClassifierSettings, ProviderCredentials
from ..errors import ConfigurationError
from ..providers import CompletionClient
from ..utils.logging import get_logger
from .models import ClassificationRequest
from .parsing import extract_json, validate_result
from .prompt import build_prompt
from .sinks import DisplaySink, LoggingSink

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProviderAttempt:
    """A provider client paired with the model it should be asked for."""

    client: CompletionClient
    model: str

    @property
    def name(self) -> str:
        return self.client.name


class IssueClassifier:
    """
    Classifies GitHub issues as easy, medium or difficult.

    Providers are tried in order: the primary agent first, then the fallback
    model. The first response that yields a JSON object wins. When every
    provider fails the result is None; classify_issue never raises.
    """

    def __init__(
        self,
        credentials: ProviderCredentials,
        settings: ClassifierSettings | None = None,
        sink: DisplaySink | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the issue classifier.

        Args:
            credentials: API keys and agent id for both providers
            settings: Endpoints, fallback model and request limits
            sink: Receives a report for each provider attempt
            transport: Optional httpx transport shared by both clients

        Raises:
            ConfigurationError: If any credential is missing or empty
        """
        missing = credentials.missing()
        if missing:
            raise ConfigurationError(
                "All API keys and agent IDs must be provided; missing: " + ", ".join(missing)
            )

        self.settings = settings or ClassifierSettings()
        self.sink: DisplaySink = sink or LoggingSink()

        primary = CompletionClient(
            name=self.settings.primary.name,
            base_url=self.settings.primary.base_url,
            api_key=credentials.primary_api_key,
            request_timeout=self.settings.request_timeout,
            connect_timeout=self.settings.connect_timeout,
            transport=transport,
        )
        fallback = CompletionClient(
            name=self.settings.fallback.name,
            base_url=self.settings.fallback.base_url,
            api_key=credentials.fallback_api_key,
            request_timeout=self.settings.request_timeout,
            connect_timeout=self.settings.connect_timeout,
            transport=transport,
        )

        # The primary provider is addressed by agent id unless a model is pinned
        self.attempts: tuple[ProviderAttempt, ...] = (
            ProviderAttempt(primary, self.settings.primary.model or credentials.primary_agent_id),
            ProviderAttempt(fallback, self.settings.fallback.model or DEFAULT_FALLBACK_MODEL),
        )

    def build_prompt(
        self,
        title: str,
        description: str,
        language: str,
        labels: Sequence[str] | None = None,
    ) -> str:
        """Render the classification prompt for one issue."""
        return build_prompt(title, description, language, labels)

    @staticmethod
    def extract_json(text: str) -> Any:
        """Extract the JSON object from a raw model response."""
        return extract_json(text)

    async def classify_issue(
        self,
        title: str,
        description: str,
        language: str,
        labels: Sequence[str] | None = None,
    ) -> Any | None:
        """
        Classify an issue by difficulty.

        Args:
            title: Issue title
            description: Issue body
            language: Programming language or technology stack
            labels: Issue labels

        Returns:
            Parsed response object (normally {"difficulty": ...}) or None if
            every provider failed
        """
        prompt = self.build_prompt(title, description, language, labels)

        last_index = len(self.attempts) - 1
        for index, attempt in enumerate(self.attempts):
            try:
                return await self._run_attempt(attempt, prompt)
            except Exception as e:
                reason = str(e) or type(e).__name__
                self._report("attempt_failed", attempt.name, reason, index == last_index)

        logger.error(f"All {len(self.attempts)} providers failed; classification unavailable")
        return None

    async def classify(self, request: ClassificationRequest) -> Any | None:
        """Classify an issue described by a ClassificationRequest."""
        return await self.classify_issue(
            request.title, request.description, request.language, request.labels
        )

    async def _run_attempt(self, attempt: ProviderAttempt, prompt: str) -> Any:
        """Call one provider and parse its answer. Raises on any failure."""
        self._report("attempt_started", attempt.name, attempt.model)

        text = await attempt.client.complete(
            model=attempt.model,
            prompt=prompt,
            max_tokens=self.settings.max_tokens,
        )
        self._report("attempt_succeeded", attempt.name, text)

        data = extract_json(text)
        if self.settings.validate_difficulty:
            data = validate_result(data)
        return data

    def _report(self, method: str, *args) -> None:
        """Forward an event to the sink; sink errors never reach the caller."""
        try:
            getattr(self.sink, method)(*args)
        except Exception as e:
            logger.warning(f"Display sink {method} failed: {e}")
