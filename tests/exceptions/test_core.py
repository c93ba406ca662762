"""
Tests for exception classes and message formatting.

This module tests SpecificationError locators, ErrorLevel formatting and the
messages of the specific error types.
"""

from taskcheck.exceptions.core import (
    ErrorLevel,
    IllegalArrayUsageError,
    MissingFieldError,
    SpecificationError,
    TaskCheckError,
    UndefinedReferenceError,
    UnresolvedVariableError,
)


class TestSpecificationError:
    """Tests for SpecificationError locators and formatting."""

    def test_field_path_joins_segments(self):
        """Test that path segments render as a dotted field path."""
        error = SpecificationError("bad", ["steps[0]", "args[1]"])
        assert error.field_path == "steps[0].args[1]"

    def test_empty_segments_are_dropped(self):
        """Test that empty segments do not produce stray dots."""
        error = SpecificationError("bad", ["", "steps", ""])
        assert error.paths == ("steps",)

    def test_via_field_prefixes_locator(self):
        """Test that via_field re-roots the error and updates its message."""
        error = SpecificationError("bad", ["args[0]"])
        result = error.via_field("spec", "steps[2]")

        assert result is error
        assert error.field_path == "spec.steps[2].args[0]"
        assert "spec.steps[2].args[0]" in str(error)

    def test_user_level_hides_details(self):
        """Test that USER level shows message and location only."""
        error = SpecificationError("bad", ["image"], details="use a scalar")
        formatted = error.format(ErrorLevel.USER)

        assert "bad" in formatted
        assert "at image" in formatted
        assert "use a scalar" not in formatted

    def test_developer_level_shows_details(self):
        """Test that DEVELOPER level adds the remediation details."""
        error = SpecificationError("bad", ["image"], details="use a scalar")
        assert "details: use a scalar" in error.format(ErrorLevel.DEVELOPER)

    def test_is_taskcheck_error(self):
        """Test the exception hierarchy root."""
        assert isinstance(SpecificationError("bad"), TaskCheckError)


class TestSpecificErrors:
    """Tests for messages and attributes of specific error types."""

    def test_undefined_reference_carries_variable(self):
        """Test UndefinedReferenceError stores the unresolved path."""
        error = UndefinedReferenceError("params.missing", ["steps[0]", "image"])

        assert error.variable == "params.missing"
        assert "params.missing" in str(error)
        assert error.field_path == "steps[0].image"

    def test_illegal_array_usage_names_field_and_variable(self):
        """Test IllegalArrayUsageError message and attributes."""
        error = IllegalArrayUsageError(
            "image", "flags", "$(params.flags)", "variable type invalid", ["image"]
        )

        assert error.field == "image"
        assert error.variable == "flags"
        assert "variable type invalid in '$(params.flags)' for step image" in str(error)
        assert "flags" in error.format(ErrorLevel.DEVELOPER)

    def test_missing_field_without_name(self):
        """Test MissingFieldError for the current field has no locator."""
        error = MissingFieldError()
        assert error.paths == ()
        assert str(error) == "missing field(s)"

    def test_unresolved_variable_message(self):
        """Test UnresolvedVariableError message includes the location."""
        error = UnresolvedVariableError("params.x", "steps[0].args[0]")

        assert str(error) == "Variable 'params.x' is not defined at steps[0].args[0]"
        assert error.reason == "is not defined"
