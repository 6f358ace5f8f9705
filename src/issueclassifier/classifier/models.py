"""Request and result types for issue classification."""

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, Field

Difficulty = Literal["easy", "medium", "difficult"]


@dataclass(frozen=True)
class ClassificationRequest:
    """Issue fields sent for classification."""

    title: str
    description: str
    language: str
    labels: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of labels but store an immutable copy
        object.__setattr__(self, "labels", tuple(self.labels))


class ClassificationResult(BaseModel):
    """Validated classification outcome."""

    difficulty: Difficulty = Field(description="Difficulty tier of the issue")
