"""
Placeholder expansion engine.

Substitutes ``$(...)`` placeholders in arbitrary JSON-like trees against a
nested lookup context and reports references to paths that do not exist.
"""

from taskcheck.expansion.engine import (
    PLACEHOLDER_PATTERN,
    expand,
    expand_string,
    find_placeholders,
    render_value,
    resolve_variable,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "expand",
    "expand_string",
    "find_placeholders",
    "render_value",
    "resolve_variable",
]
