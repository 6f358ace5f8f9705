"""Tests for JSON extraction from model responses."""

import pytest
from pydantic import ValidationError

from issueclassifier.classifier import (
    DIFFICULTY_TIERS,
    ClassificationRequest,
    ClassificationResult,
    extract_json,
    validate_result,
)
from issueclassifier.errors import (
    MalformedJSONError,
    NoJSONFoundError,
    ResponseParseError,
    ResultValidationError,
)


class TestExtractJson:
    """Tests for extract_json."""

    def test_fenced_json(self):
        """Test a ```json fenced block is unwrapped."""
        assert extract_json('```json\n{"difficulty":"easy"}\n```') == {"difficulty": "easy"}

    def test_untagged_fence(self):
        """Test a plain ``` fence is unwrapped."""
        assert extract_json('```\n{"difficulty": "medium"}\n```') == {"difficulty": "medium"}

    def test_surrounding_text(self):
        """Test prose around the object is ignored."""
        text = 'Here is the result: {"difficulty":"medium"} thanks'
        assert extract_json(text) == {"difficulty": "medium"}

    def test_multiline_object(self):
        """Test objects spanning several lines are found."""
        text = 'Sure!\n{\n  "difficulty": "difficult"\n}\n'
        assert extract_json(text) == {"difficulty": "difficult"}

    def test_nested_object(self):
        """Test the span runs to the last closing brace."""
        text = '{"difficulty": "easy", "meta": {"confidence": 0.9}}'
        assert extract_json(text) == {"difficulty": "easy", "meta": {"confidence": 0.9}}

    def test_first_to_last_brace(self):
        """Test two separate objects are treated as one span."""
        text = 'Options {"a": 1} and {"difficulty": "easy"}'
        with pytest.raises(MalformedJSONError):
            extract_json(text)

    def test_returns_value_unvalidated(self):
        """Test parsed data is returned without checking its fields."""
        assert extract_json('{"level": 3}') == {"level": 3}

    def test_no_braces(self):
        """Test text without braces raises NoJSONFoundError."""
        with pytest.raises(NoJSONFoundError):
            extract_json("no braces here")

    def test_only_opening_brace(self):
        """Test an unclosed object raises NoJSONFoundError."""
        with pytest.raises(NoJSONFoundError):
            extract_json('{"difficulty": "easy"')

    def test_empty_text(self):
        """Test empty text raises NoJSONFoundError."""
        with pytest.raises(NoJSONFoundError):
            extract_json("")

    def test_invalid_json(self):
        """Test a brace span that is not JSON raises MalformedJSONError."""
        with pytest.raises(MalformedJSONError):
            extract_json("{not valid json}")

    def test_parse_errors_share_base(self):
        """Test both parse errors derive from ResponseParseError."""
        assert issubclass(NoJSONFoundError, ResponseParseError)
        assert issubclass(MalformedJSONError, ResponseParseError)


class TestValidateResult:
    """Tests for validate_result."""

    @pytest.mark.parametrize("difficulty", ["easy", "medium", "difficult"])
    def test_known_tiers(self, difficulty):
        """Test each tier passes validation."""
        assert validate_result({"difficulty": difficulty}) == {"difficulty": difficulty}

    def test_unknown_tier(self):
        """Test an unknown tier is rejected."""
        with pytest.raises(ResultValidationError):
            validate_result({"difficulty": "hard"})

    def test_missing_field(self):
        """Test a result without difficulty is rejected."""
        with pytest.raises(ResultValidationError):
            validate_result({"level": "easy"})

    def test_not_an_object(self):
        """Test non-object results are rejected."""
        with pytest.raises(ResultValidationError):
            validate_result(["easy"])


class TestModels:
    """Tests for request and result types."""

    def test_tiers_follow_result_model(self):
        assert DIFFICULTY_TIERS == ("easy", "medium", "difficult")

    def test_result_model_rejects_unknown(self):
        with pytest.raises(ValidationError):
            ClassificationResult(difficulty="hard")

    def test_request_labels_frozen(self):
        """Test labels are stored as a tuple in input order."""
        request = ClassificationRequest("T", "D", "Go", ["b", "a"])
        assert request.labels == ("b", "a")
