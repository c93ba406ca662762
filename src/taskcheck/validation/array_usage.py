"""
Field policy walker and array isolation checks for steps.

Array parameters expand into several values, which only makes sense where a
field is itself one item of a list: a single ``command`` or ``args`` entry that
consists of nothing but the reference. Every other substitution-eligible step
field must not reference an array parameter at all.

The checks are purely syntactic and work on raw field text; they do not need
the lookup context or an expansion pass.
"""

# Group 1: External direct imports (alphabetical)
import logging
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

# Group 4: Internal from imports (alphabetical by source module)
from taskcheck.exceptions import IllegalArrayUsageError, UndefinedReferenceError
from taskcheck.models import ParamSpec, Step
from taskcheck.parsing.variables import (
    is_isolated_reference,
    referenced_names,
    undeclared_references,
)
from taskcheck.validation.catalog import collect_parameter_names

logger = logging.getLogger(__name__)


class FieldPolicy(Enum):
    """How array parameter references are treated in a step field."""

    NO_ARRAY = "no_array"  # Never, not even as the whole value
    ISOLATED_ARRAY = "isolated_array"  # Only as the whole value


@dataclass(frozen=True)
class StepField:
    """
    One substitution-eligible string field of a step.

    Params:
        name: Field path relative to the step, e.g. "args[1]"
        value: Raw field text
        policy: Array policy applying to the field
    """

    name: str
    value: str
    policy: FieldPolicy


def iter_step_fields(step: Step) -> Iterator[StepField]:
    """
    Yield every substitution-eligible field of a step with its policy.

    Fields come in a fixed order: name, image, workingDir, command entries,
    args entries, env values, then volume mount name, mountPath and subPath.
    """
    yield StepField("name", step.name, FieldPolicy.NO_ARRAY)
    yield StepField("image", step.image, FieldPolicy.NO_ARRAY)
    yield StepField("workingDir", step.working_dir, FieldPolicy.NO_ARRAY)
    for i, cmd in enumerate(step.command):
        yield StepField(f"command[{i}]", cmd, FieldPolicy.ISOLATED_ARRAY)
    for i, arg in enumerate(step.args):
        yield StepField(f"args[{i}]", arg, FieldPolicy.ISOLATED_ARRAY)
    for i, env in enumerate(step.env):
        yield StepField(f"env[{i}].value", env.value, FieldPolicy.NO_ARRAY)
    for i, mount in enumerate(step.volume_mounts):
        yield StepField(f"volumeMounts[{i}].name", mount.name, FieldPolicy.NO_ARRAY)
        yield StepField(
            f"volumeMounts[{i}].mountPath", mount.mount_path, FieldPolicy.NO_ARRAY
        )
        yield StepField(
            f"volumeMounts[{i}].subPath", mount.sub_path, FieldPolicy.NO_ARRAY
        )


def check_field(field: StepField, array_names: Collection[str]) -> None:
    """
    Apply a field's array policy to its raw value.

    Params:
        field: The step field to check
        array_names: Names of the declared array parameters

    Raises:
        IllegalArrayUsageError: If an array parameter is referenced where the
            policy forbids it
    """
    found = referenced_names(field.value, array_names)
    if not found:
        return

    if field.policy is FieldPolicy.NO_ARRAY:
        raise IllegalArrayUsageError(
            field.name, found[0], field.value, "variable type invalid", [field.name]
        )
    if not is_isolated_reference(field.value, array_names):
        raise IllegalArrayUsageError(
            field.name,
            found[0],
            field.value,
            "variable is not properly isolated",
            [field.name],
        )


def validate_array_usage(steps: Iterable[Step], array_names: Collection[str]) -> None:
    """
    Check every step field against its array policy, stopping at the first failure.

    Raises:
        IllegalArrayUsageError: Located at ``steps[i].<field>``
    """
    if not array_names:
        return
    for index, step in enumerate(steps):
        for field in iter_step_fields(step):
            try:
                check_field(field, array_names)
            except IllegalArrayUsageError as e:
                raise e.via_field(f"steps[{index}]")


def validate_variables(steps: Iterable[Step], declared: Collection[str]) -> None:
    """
    Check that every parameter referenced by a step field is declared.

    Raises:
        UndefinedReferenceError: Located at ``steps[i].<field>``
    """
    for index, step in enumerate(steps):
        for field in iter_step_fields(step):
            missing = undeclared_references(field.value, declared)
            if missing:
                raise UndefinedReferenceError(
                    f"params.{missing[0]}",
                    [f"steps[{index}]", field.name],
                    message=f"non-existent variable in {field.value!r} "
                    f"for step {field.name}",
                )


def validate_parameter_variables(
    steps: Iterable[Step], params: Iterable[ParamSpec]
) -> None:
    """
    Check parameter references in steps: existence first, then array usage.

    Params:
        steps: Steps as authored
        params: Parameter declarations

    Raises:
        UndefinedReferenceError: If a step references an undeclared parameter
        IllegalArrayUsageError: If an array parameter is used illegally
    """
    steps = list(steps)
    names = collect_parameter_names(params)
    logger.debug(
        "Checking parameter variables: %d params, %d arrays",
        len(names.all),
        len(names.arrays),
    )
    validate_variables(steps, names.all)
    validate_array_usage(steps, names.arrays)
