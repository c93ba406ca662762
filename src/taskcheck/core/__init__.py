"""
Core taskcheck components.

This package provides the type definitions and path helpers shared by the
expansion engine, the context builder and the validators.
"""

from taskcheck.core.path_utils import (
    clean_path,
    format_locator,
    join_under,
    split_variable_path,
)
from taskcheck.core.types import JSONValue, LookupContext, PathSegment

__all__ = [
    "JSONValue",
    "LookupContext",
    "PathSegment",
    "clean_path",
    "format_locator",
    "join_under",
    "split_variable_path",
]
