"""Observers that receive a report for every provider attempt."""

from dataclasses import dataclass, field
from typing import Protocol

from ..utils.logging import get_logger

logger = get_logger(__name__)


class DisplaySink(Protocol):
    """Receives attempt reports from the classifier."""

    def attempt_started(self, provider: str, model: str) -> None: ...

    def attempt_succeeded(self, provider: str, raw_text: str) -> None: ...

    def attempt_failed(self, provider: str, reason: str, final: bool) -> None: ...


class LoggingSink:
    """Default sink that writes attempts to the package logger."""

    def attempt_started(self, provider: str, model: str) -> None:
        logger.debug(f"[{provider}] Requesting completion from {model}")

    def attempt_succeeded(self, provider: str, raw_text: str) -> None:
        logger.info(f"[{provider}] Raw response: {raw_text}")

    def attempt_failed(self, provider: str, reason: str, final: bool) -> None:
        if final:
            logger.error(f"[{provider}] Failed: {reason}")
        else:
            logger.warning(f"[{provider}] Failed: {reason}")


@dataclass
class AttemptEvent:
    """One reported attempt event."""

    provider: str
    kind: str  # "started", "succeeded" or "failed"
    detail: str
    final: bool = False


@dataclass
class RecordingSink:
    """Sink that keeps every event in memory."""

    events: list[AttemptEvent] = field(default_factory=list)

    def attempt_started(self, provider: str, model: str) -> None:
        self.events.append(AttemptEvent(provider, "started", model))

    def attempt_succeeded(self, provider: str, raw_text: str) -> None:
        self.events.append(AttemptEvent(provider, "succeeded", raw_text))

    def attempt_failed(self, provider: str, reason: str, final: bool) -> None:
        self.events.append(AttemptEvent(provider, "failed", reason, final))

    @property
    def providers_called(self) -> list[str]:
        """Providers in the order they were attempted."""
        return [e.provider for e in self.events if e.kind == "started"]

    def clear(self) -> None:
        self.events.clear()
