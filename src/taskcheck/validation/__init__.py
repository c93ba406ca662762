"""
taskcheck validation components.

This package provides the declaration catalog, the expansion dry run, the
array usage checks, the structural checks and the task level entry points.
"""

from taskcheck.validation.array_usage import (
    FieldPolicy,
    StepField,
    check_field,
    iter_step_fields,
    validate_array_usage,
    validate_parameter_variables,
    validate_variables,
)
from taskcheck.validation.catalog import ParameterNames, collect_parameter_names
from taskcheck.validation.expansion import serialize_spec, validate_expansion
from taskcheck.validation.structural import (
    is_dns1123_label,
    validate_declared_workspaces,
    validate_object_metadata,
    validate_parameter_types,
    validate_resources,
    validate_step_names,
    validate_steps,
    validate_volumes,
)
from taskcheck.validation.task import (
    check_task,
    check_task_spec,
    validate_task,
    validate_task_spec,
)

__all__ = [
    # Declaration catalog
    "ParameterNames",
    "collect_parameter_names",
    # Expansion dry run
    "serialize_spec",
    "validate_expansion",
    # Array usage
    "FieldPolicy",
    "StepField",
    "check_field",
    "iter_step_fields",
    "validate_array_usage",
    "validate_parameter_variables",
    "validate_variables",
    # Structural checks
    "is_dns1123_label",
    "validate_declared_workspaces",
    "validate_object_metadata",
    "validate_parameter_types",
    "validate_resources",
    "validate_step_names",
    "validate_steps",
    "validate_volumes",
    # Entry points
    "check_task",
    "check_task_spec",
    "validate_task",
    "validate_task_spec",
]
