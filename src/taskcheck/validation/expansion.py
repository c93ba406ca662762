"""
Expansion dry run over a whole task specification.

The specification is serialized to its authored (camelCase) JSON shape and
every placeholder in it, declarations included, is expanded against the lookup
context. Only failures matter; the expanded tree is thrown away.
"""

import logging

from pydantic_core import PydanticSerializationError

from taskcheck.context import TaskContext, build_task_context
from taskcheck.core.types import JSONValue
from taskcheck.exceptions import (
    MalformedDeclarationError,
    UndefinedReferenceError,
    UnresolvedVariableError,
)
from taskcheck.expansion import expand
from taskcheck.models import TaskSpec

logger = logging.getLogger(__name__)


def serialize_spec(spec: TaskSpec) -> JSONValue:
    """
    Serialize a specification to a generic JSON-like tree.

    Raises:
        MalformedDeclarationError: If the specification cannot be serialized
    """
    try:
        return spec.model_dump(mode="json", by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise MalformedDeclarationError(
            f"cannot serialize task spec: {e}", ["spec"]
        ) from e


def validate_expansion(spec: TaskSpec, context: TaskContext | None = None) -> None:
    """
    Check that every placeholder in the specification resolves.

    Params:
        spec: Task specification to check
        context: Prebuilt context; built from ``spec`` when omitted

    Raises:
        UndefinedReferenceError: On the first placeholder whose path does not
            exist, located at the field holding it
        MalformedDeclarationError: If the specification cannot be serialized
    """
    if context is None:
        context = build_task_context(spec)
    tree = serialize_spec(spec)

    try:
        expand(tree, context.to_lookup())
    except UnresolvedVariableError as e:
        logger.debug("Expansion dry run failed: %s", e)
        raise UndefinedReferenceError(
            e.variable,
            [e.location],
            message=f"non-existent variable {e.variable!r}: {e.reason}",
        ) from e
