"""
Variable syntax classification for step fields.

This module answers purely syntactic questions about a field's raw text: which
parameters it references, whether it references any of a given set of names,
and whether the whole field is exactly one such reference. Nothing is resolved
here; the checks look at unexpanded text only.

Parameters are referenced as ``$(params.<name>)`` or, in the legacy shape,
``$(inputs.params.<name>)``. A trailing member access (``$(params.flags[*])``)
still counts as a reference to ``flags``.
"""

# Group 1: External direct imports (alphabetical)
import re
from collections.abc import Collection
from dataclasses import dataclass

# Group 4: Internal from imports (alphabetical by source module)
from taskcheck.core.path_utils import PathComponents

# Scopes under which parameters are reachable, current shape first
PARAMETER_PREFIXES = ("params", "inputs.params")


def _reference_pattern(prefixes: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(re.escape(prefix) for prefix in prefixes)
    return re.compile(
        r"(?P<escape>\$)?\$\("
        rf"(?:{alternatives})\."
        r"(?P<var>[_a-zA-Z][_a-zA-Z0-9-]*(?:\.[A-Za-z0-9_-]+|\[(?:\d+|\*)\])*)"
        r"\)"
    )


PARAMETER_REFERENCE_PATTERN = _reference_pattern(PARAMETER_PREFIXES)


@dataclass(frozen=True)
class VariableReference:
    """
    A parameter reference found in a field's raw text.

    Params:
        name: Parameter name (first segment after the scope prefix)
        expression: Full placeholder text, e.g. "$(params.flags)"
        start: Offset of the placeholder in the field value
    """

    name: str
    expression: str
    start: int


def _variable_name(body: str) -> str:
    head = PathComponents.split_path(body).first_part
    return head.split("[", 1)[0]


def extract_parameter_references(value: str) -> list[VariableReference]:
    """
    Find every parameter reference in a field value.

    Params:
        value: Raw field text

    Returns:
        References in order of appearance; escaped placeholders are skipped
    """
    if not value or "$(" not in value:
        return []

    return [
        VariableReference(
            name=_variable_name(match.group("var")),
            expression=match.group(),
            start=match.start(),
        )
        for match in PARAMETER_REFERENCE_PATTERN.finditer(value)
        if not match.group("escape")
    ]


def referenced_names(value: str, names: Collection[str]) -> list[str]:
    """
    List the names from ``names`` referenced by a field, in order of appearance.

    Params:
        value: Raw field text
        names: Parameter names of interest

    Returns:
        Referenced names, without duplicates
    """
    found = []
    for reference in extract_parameter_references(value):
        if reference.name in names and reference.name not in found:
            found.append(reference.name)
    return found


def references_any(value: str, names: Collection[str]) -> bool:
    """Check whether a field references at least one of ``names``."""
    return bool(referenced_names(value, names))


def is_isolated_reference(value: str, names: Collection[str]) -> bool:
    """
    Check whether the whole field is exactly one reference to one of ``names``.

    Any surrounding or interleaved text, including whitespace, makes the
    reference non-isolated.

    Params:
        value: Raw field text
        names: Parameter names of interest

    Returns:
        True only for a field consisting of a single matching placeholder
    """
    references = extract_parameter_references(value)
    if len(references) != 1:
        return False
    reference = references[0]
    return reference.name in names and reference.expression == value


def undeclared_references(value: str, declared: Collection[str]) -> list[str]:
    """
    List referenced parameter names that are not declared.

    Params:
        value: Raw field text
        declared: All declared parameter names

    Returns:
        Undeclared names, without duplicates, in order of appearance
    """
    missing = []
    for reference in extract_parameter_references(value):
        if reference.name not in declared and reference.name not in missing:
            missing.append(reference.name)
    return missing
