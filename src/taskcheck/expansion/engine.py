"""
Placeholder expansion over JSON-like trees.

A placeholder is ``$(<root>...)`` where the body is a dotted variable path with
at least one member access, e.g. ``$(params.image)``,
``$(resources.inputs.source.path)`` or ``$(params.flags[0])``. Anything else
that happens to start with ``$(``, such as shell command substitution
``$(date +%s)``, is literal text. ``$$(`` escapes a placeholder.

Expansion rules:
- a string that is exactly one placeholder is replaced by the resolved value,
  whatever its JSON type;
- otherwise each placeholder is rendered into the surrounding text, strings
  verbatim and other values as compact JSON;
- mapping keys are never expanded.
"""

import json
import re
from typing import Any

from taskcheck.core.path_utils import format_locator, split_variable_path
from taskcheck.core.types import JSONValue, LookupContext, PathSegment
from taskcheck.exceptions import UnresolvedVariableError

PLACEHOLDER_PATTERN = re.compile(
    r"(?P<escape>\$)?\$\("
    r"(?P<path>[A-Za-z_][A-Za-z0-9_-]*(?:\.[A-Za-z0-9_-]+|\[(?:\d+|\*)\])+)"
    r"\)"
)


def find_placeholders(value: str) -> list[str]:
    """
    List the variable paths referenced by unescaped placeholders.

    Params:
        value: Raw string to scan

    Returns:
        Variable paths in order of appearance, duplicates kept
    """
    if not value:
        return []
    return [
        match.group("path")
        for match in PLACEHOLDER_PATTERN.finditer(value)
        if not match.group("escape")
    ]


def resolve_variable(path: str, context: LookupContext | None) -> Any:
    """
    Resolve a dotted variable path against a lookup context.

    Params:
        path: Variable path as written inside the placeholder
        context: Nested mapping to resolve against; None behaves as empty

    Returns:
        The value stored at the path; an index past the end of a list
        resolves to an empty string

    Raises:
        UnresolvedVariableError: If any segment of the path does not exist
    """
    current: Any = context if context is not None else {}
    for segment in split_variable_path(path):
        if segment == "*" and isinstance(current, list):
            continue
        if isinstance(current, dict) and isinstance(segment, str):
            if segment not in current:
                raise UnresolvedVariableError(path, "")
            current = current[segment]
        elif isinstance(current, list) and isinstance(segment, int):
            # Array lengths are only known at run time
            current = current[segment] if segment < len(current) else ""
        else:
            raise UnresolvedVariableError(path, "")
    return current


def render_value(value: Any) -> str:
    """Render a resolved value for interpolation into surrounding text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def expand_string(
    value: str, context: LookupContext | None, location: str = ""
) -> JSONValue:
    """
    Expand all placeholders in a single string.

    Params:
        value: Raw string that may contain placeholders
        context: Lookup context
        location: Field path of the string, used in error messages

    Returns:
        The resolved value for an isolated placeholder, otherwise the
        interpolated string

    Raises:
        UnresolvedVariableError: If a placeholder does not resolve
    """
    if "$(" not in value:
        return value

    def _lookup(path: str) -> Any:
        try:
            return resolve_variable(path, context)
        except UnresolvedVariableError as e:
            raise UnresolvedVariableError(path, location, e.reason) from None

    whole = PLACEHOLDER_PATTERN.fullmatch(value)
    if whole and not whole.group("escape"):
        return _lookup(whole.group("path"))

    def _substitute(match: re.Match) -> str:
        if match.group("escape"):
            return match.group()[1:]
        return render_value(_lookup(match.group("path")))

    return PLACEHOLDER_PATTERN.sub(_substitute, value)


def expand(
    tree: JSONValue,
    context: LookupContext | None,
    location: tuple[PathSegment, ...] = (),
) -> JSONValue:
    """
    Expand every placeholder found anywhere in a JSON-like tree.

    Params:
        tree: Value built from dicts, lists, strings and scalars
        context: Lookup context placeholders resolve against
        location: Locator of ``tree`` within an enclosing document

    Returns:
        A new tree with placeholders substituted; the input is not modified

    Raises:
        UnresolvedVariableError: On the first placeholder that does not resolve,
            with its location rendered as a field path (e.g. "steps[0].args[1]")
    """
    if isinstance(tree, dict):
        return {
            key: expand(item, context, location + (key,)) for key, item in tree.items()
        }
    if isinstance(tree, list):
        return [
            expand(item, context, location + (index,))
            for index, item in enumerate(tree)
        ]
    if isinstance(tree, str):
        return expand_string(tree, context, format_locator(location))
    return tree
