"""
taskcheck parsing components.

This package provides the syntactic classification of variable references in
raw step field text.
"""

from taskcheck.parsing.variables import (
    PARAMETER_PREFIXES,
    PARAMETER_REFERENCE_PATTERN,
    VariableReference,
    extract_parameter_references,
    is_isolated_reference,
    referenced_names,
    references_any,
    undeclared_references,
)

__all__ = [
    "PARAMETER_PREFIXES",
    "PARAMETER_REFERENCE_PATTERN",
    "VariableReference",
    "extract_parameter_references",
    "is_isolated_reference",
    "referenced_names",
    "references_any",
    "undeclared_references",
]
