"""
Tests for the variable syntax classifier.

The classifier works on raw field text only; nothing here needs a context.
"""

from taskcheck.parsing.variables import (
    extract_parameter_references,
    is_isolated_reference,
    referenced_names,
    references_any,
    undeclared_references,
)

ARRAYS = {"flags"}


class TestExtractParameterReferences:
    """Test finding parameter references in field text."""

    def test_current_and_legacy_prefixes(self):
        """Test both params and inputs.params references are found."""
        references = extract_parameter_references("$(params.a)-$(inputs.params.b)")

        assert [r.name for r in references] == ["a", "b"]
        assert references[1].expression == "$(inputs.params.b)"
        assert references[1].start == 12

    def test_member_access_keeps_parameter_name(self):
        """Test a trailing member access still names the parameter."""
        references = extract_parameter_references("$(params.flags[*]) $(params.obj.key)")
        assert [r.name for r in references] == ["flags", "obj"]

    def test_other_scopes_are_not_parameters(self):
        """Test workspace and resource references are ignored."""
        value = "$(workspaces.src.path) $(resources.inputs.repo.url)"
        assert extract_parameter_references(value) == []

    def test_escaped_and_shell_text_ignored(self):
        """Test escaped placeholders and shell substitution are not references."""
        assert extract_parameter_references("$$(params.a) $(date)") == []


class TestArrayClassification:
    """Test the questions asked by the array isolation checks."""

    def test_references_any(self):
        """Test detection of a reference to one of the names."""
        assert references_any("prefix-$(params.flags)", ARRAYS)
        assert not references_any("prefix-$(params.tag)", ARRAYS)
        assert not references_any("", ARRAYS)

    def test_isolated_reference(self):
        """Test a field that is exactly one reference is isolated."""
        assert is_isolated_reference("$(params.flags)", ARRAYS)
        assert is_isolated_reference("$(inputs.params.flags)", ARRAYS)
        assert is_isolated_reference("$(params.flags[*])", ARRAYS)

    def test_extra_characters_break_isolation(self):
        """Test one leading or trailing character, whitespace included, breaks isolation."""
        assert not is_isolated_reference(" $(params.flags)", ARRAYS)
        assert not is_isolated_reference("$(params.flags)x", ARRAYS)
        assert not is_isolated_reference("-$(params.flags)", ARRAYS)

    def test_two_references_are_not_isolated(self):
        """Test repeated references are not a single isolated reference."""
        assert not is_isolated_reference("$(params.flags)$(params.flags)", ARRAYS)

    def test_isolated_scalar_is_not_an_array_reference(self):
        """Test isolation is only reported for the given names."""
        assert not is_isolated_reference("$(params.tag)", ARRAYS)

    def test_referenced_names_deduplicates(self):
        """Test names are listed once in order of appearance."""
        value = "$(params.b) $(params.a) $(params.b)"
        assert referenced_names(value, {"a", "b"}) == ["b", "a"]


class TestUndeclaredReferences:
    """Test detection of references to undeclared parameters."""

    def test_lists_undeclared_once(self):
        """Test undeclared names are reported once each."""
        value = "$(params.a) $(params.b) $(params.a)"
        assert undeclared_references(value, {"b"}) == ["a"]

    def test_all_declared(self):
        """Test nothing is reported when everything is declared."""
        assert undeclared_references("$(inputs.params.a)", {"a"}) == []
