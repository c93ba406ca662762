"""
Core type definitions for taskcheck.

This module contains the type aliases shared by the expansion engine, the
context builder and the validators.
"""

from typing import Any

JSONValue = str | int | float | bool | list | dict | None

LookupContext = dict[str, Any]

# A locator segment is a field name or an integer list index
PathSegment = str | int
