"""
Task specification validation entry points.

``check_task_spec`` runs every check in a fixed order and raises the first
failure. ``validate_task_spec`` wraps it for callers that prefer a result
value: a list holding zero or one error. Both are pure; a fresh context is
built on every call.
"""

import logging
from collections.abc import Mapping
from typing import Any

from taskcheck.exceptions import MissingFieldError, SpecificationError
from taskcheck.merge import merge_steps_with_step_template
from taskcheck.models import Task, TaskSpec
from taskcheck.validation.array_usage import validate_parameter_variables
from taskcheck.validation.expansion import validate_expansion
from taskcheck.validation.structural import (
    validate_declared_workspaces,
    validate_object_metadata,
    validate_parameter_types,
    validate_resources,
    validate_step_names,
    validate_steps,
    validate_volumes,
)

logger = logging.getLogger(__name__)


def check_task_spec(spec: TaskSpec | Mapping[str, Any]) -> None:
    """
    Validate a task specification, failing fast.

    Params:
        spec: TaskSpec, or a mapping in the authored camelCase shape

    Raises:
        SpecificationError: The first violation found, with its field path
        pydantic.ValidationError: If a mapping does not decode to a TaskSpec
    """
    if not isinstance(spec, TaskSpec):
        spec = TaskSpec.model_validate(spec)

    if spec.is_empty():
        raise MissingFieldError()
    if not spec.steps:
        raise MissingFieldError("steps")

    logger.debug("Validating task spec with %d steps", len(spec.steps))
    validate_expansion(spec)

    try:
        validate_volumes(spec.volumes)
    except SpecificationError as e:
        raise e.via_field("volumes")
    validate_declared_workspaces(spec.workspaces, spec.steps, spec.step_template)

    merged_steps = merge_steps_with_step_template(spec.step_template, spec.steps)
    try:
        validate_steps(merged_steps)
    except SpecificationError as e:
        raise e.via_field("steps")

    validate_resources(spec.resources)
    validate_parameter_types(spec.params)
    validate_step_names(spec.steps)
    validate_parameter_variables(spec.steps, spec.params)


def validate_task_spec(spec: TaskSpec | Mapping[str, Any]) -> list[SpecificationError]:
    """
    Validate a task specification and return the outcome as a value.

    Returns:
        Empty list when the specification is accepted, otherwise a list with
        the single error that stopped validation
    """
    try:
        check_task_spec(spec)
    except SpecificationError as e:
        return [e]
    return []


def check_task(task: Task | Mapping[str, Any]) -> None:
    """
    Validate a whole task: its metadata, then its spec.

    Raises:
        SpecificationError: Located under ``metadata`` or ``spec``
    """
    if not isinstance(task, Task):
        task = Task.model_validate(task)

    try:
        validate_object_metadata(task.metadata)
    except SpecificationError as e:
        raise e.via_field("metadata")

    try:
        check_task_spec(task.spec)
    except SpecificationError as e:
        raise e.via_field("spec")


def validate_task(task: Task | Mapping[str, Any]) -> list[SpecificationError]:
    """Validate a whole task, returning zero or one error."""
    try:
        check_task(task)
    except SpecificationError as e:
        return [e]
    return []
