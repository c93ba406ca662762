"""
Exception classes for task specification validation.

This module defines specific exception types for the different error conditions
that can occur while validating a task specification: unresolved variable
references, illegal use of array parameters, malformed declarations and the
structural rule violations reported by the sibling checks.
"""

from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Message and field path only
    DEVELOPER = "developer"  # Adds remediation details


class TaskCheckError(Exception):
    """Base exception for all taskcheck errors."""

    pass


class SpecificationError(TaskCheckError):
    """
    A validation failure located at a field of the task specification.

    The locator is a sequence of path segments from the specification root to
    the offending field. Segments are joined with dots when rendered, so a
    segment may itself carry an index suffix such as ``steps[0]``.
    """

    def __init__(
        self,
        message: str,
        paths: list[str] | tuple[str, ...] = (),
        details: str | None = None,
    ):
        """
        Initialize the exception.

        Params:
            message: Human-readable description of the failure
            paths: Path segments from the specification root to the field
            details: Optional remediation hint shown at developer level
        """
        self.message = message
        self.paths = tuple(segment for segment in paths if segment)
        self.details = details
        super().__init__(self.format(ErrorLevel.USER))

    @property
    def field_path(self) -> str:
        """Return the dotted field path of the offending field."""
        return ".".join(self.paths)

    def via_field(self, *segments: str) -> "SpecificationError":
        """
        Prefix the locator with parent field segments.

        Params:
            segments: Parent segments, outermost first

        Returns:
            The same error, re-rooted under the given segments
        """
        self.paths = tuple(s for s in segments if s) + self.paths
        self.args = (self.format(ErrorLevel.USER),)
        return self

    def format(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """
        Format the error message based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted error message
        """
        lines = [self.message]
        if self.paths:
            lines.append(f"  at {self.field_path}")
        if error_level == ErrorLevel.DEVELOPER and self.details:
            lines.append(f"  details: {self.details}")
        return "\n".join(lines)


class UndefinedReferenceError(SpecificationError):
    """Raised when a placeholder refers to a variable that was never declared."""

    def __init__(
        self,
        variable: str,
        paths: list[str] | tuple[str, ...] = (),
        message: str | None = None,
    ):
        """
        Initialize the exception.

        Params:
            variable: The dotted variable path that does not resolve
            paths: Locator of the field holding the reference
            message: Override for the default message
        """
        self.variable = variable
        super().__init__(
            message or f"non-existent variable {variable!r}",
            paths,
            details="declare the variable or fix the reference",
        )


class IllegalArrayUsageError(SpecificationError):
    """Raised when an array parameter is referenced where it cannot expand."""

    def __init__(
        self,
        field: str,
        variable: str,
        value: str,
        reason: str,
        paths: list[str] | tuple[str, ...] = (),
    ):
        """
        Initialize the exception.

        Params:
            field: Name of the step field holding the reference
            variable: Name of the array parameter
            value: Raw field value
            reason: Short description of the violated rule
            paths: Locator of the field
        """
        self.field = field
        self.variable = variable
        self.value = value
        super().__init__(
            f"{reason} in {value!r} for step {field}",
            paths,
            details=f"array parameter {variable!r} must be referenced alone "
            "in a command or args entry",
        )


class MalformedDeclarationError(SpecificationError):
    """Raised when a declaration cannot be turned into a lookup context entry."""

    pass


class MissingFieldError(SpecificationError):
    """Raised when a required field is absent."""

    def __init__(self, field_name: str = ""):
        """
        Initialize the exception.

        Params:
            field_name: Name of the missing field, empty for the current one
        """
        self.field_name = field_name
        super().__init__("missing field(s)", [field_name])


class InvalidValueError(SpecificationError):
    """Raised when a field holds a value outside its allowed set."""

    def __init__(self, value: object, field_path: str, details: str | None = None):
        """
        Initialize the exception.

        Params:
            value: The rejected value
            field_path: Dotted path of the field
            details: Optional remediation hint
        """
        self.value = value
        super().__init__(f"invalid value: {value}", [field_path], details)


class ExpansionError(TaskCheckError):
    """Base exception for placeholder expansion failures."""

    pass


class UnresolvedVariableError(ExpansionError):
    """Raised when a placeholder refers to a path absent from the context."""

    def __init__(self, variable: str, location: str, reason: str = "is not defined"):
        """
        Initialize the exception.

        Params:
            variable: The dotted variable path as written in the placeholder
            location: Path of the value holding the placeholder within the tree
            reason: Why the path could not be resolved
        """
        self.variable = variable
        self.location = location
        self.reason = reason
        where = f" at {location}" if location else ""
        super().__init__(f"Variable '{variable}' {reason}{where}")
