"""
taskcheck exception classes.

This package provides all exception types used throughout taskcheck for
consistent error handling and reporting.
"""

from taskcheck.exceptions.core import (
    ErrorLevel,
    ExpansionError,
    IllegalArrayUsageError,
    InvalidValueError,
    MalformedDeclarationError,
    MissingFieldError,
    SpecificationError,
    TaskCheckError,
    UndefinedReferenceError,
    UnresolvedVariableError,
)

__all__ = [
    "ErrorLevel",
    "TaskCheckError",
    "SpecificationError",
    "UndefinedReferenceError",
    "IllegalArrayUsageError",
    "MalformedDeclarationError",
    "MissingFieldError",
    "InvalidValueError",
    "ExpansionError",
    "UnresolvedVariableError",
]
