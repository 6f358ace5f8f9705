"""Extraction of JSON objects from free-form model output."""

import json
import re
from typing import Any, get_args

from pydantic import ValidationError

from ..errors import MalformedJSONError, NoJSONFoundError, ResultValidationError
from .models import ClassificationResult, Difficulty

CODE_FENCE_PATTERN = re.compile(r"```json|```")

# First "{" through last "}", across lines
JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)

DIFFICULTY_TIERS = get_args(Difficulty)


def extract_json(text: str) -> Any:
    """
    Extract and parse the JSON object embedded in a model response.

    Code fences are removed and the text trimmed, then everything from the
    first opening brace to the last closing brace is parsed.

    Args:
        text: Raw response text

    Returns:
        The parsed value, unvalidated

    Raises:
        NoJSONFoundError: If the text has no brace-delimited span
        MalformedJSONError: If the span is not valid JSON
    """
    cleaned = CODE_FENCE_PATTERN.sub("", text).strip()

    match = JSON_OBJECT_PATTERN.search(cleaned)
    if not match:
        raise NoJSONFoundError("No JSON found in model response")

    try:
        return json.loads(match.group())
    except json.JSONDecodeError as e:
        raise MalformedJSONError(f"Invalid JSON in model response: {e}") from e


def validate_result(data: Any) -> dict:
    """Check that a parsed result names one of the difficulty tiers."""
    if not isinstance(data, dict):
        raise ResultValidationError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        ClassificationResult.model_validate(data)
    except ValidationError as e:
        raise ResultValidationError(
            f"Unknown difficulty {data.get('difficulty')!r}; "
            f"expected one of {', '.join(DIFFICULTY_TIERS)}"
        ) from e
    return data
