"""
Tests for the field policy walker and array isolation checks.
"""

import pytest

from taskcheck.exceptions import IllegalArrayUsageError, UndefinedReferenceError
from taskcheck.models import ParamSpec, Step
from taskcheck.validation.array_usage import (
    FieldPolicy,
    StepField,
    check_field,
    iter_step_fields,
    validate_array_usage,
    validate_parameter_variables,
    validate_variables,
)

ARRAYS = {"flags"}


def _step(**fields):
    return Step.model_validate({"name": "build", "image": "alpine", **fields})


class TestIterStepFields:
    """Test which fields are walked and how they are classified."""

    def test_fields_and_policies(self):
        """Test every eligible field is yielded once with its policy."""
        step = _step(
            workingDir="/src",
            command=["sh"],
            args=["-c", "make"],
            env=[{"name": "A", "value": "1"}],
            volumeMounts=[{"name": "cache", "mountPath": "/cache", "subPath": "x"}],
        )
        fields = {field.name: field.policy for field in iter_step_fields(step)}

        assert fields == {
            "name": FieldPolicy.NO_ARRAY,
            "image": FieldPolicy.NO_ARRAY,
            "workingDir": FieldPolicy.NO_ARRAY,
            "command[0]": FieldPolicy.ISOLATED_ARRAY,
            "args[0]": FieldPolicy.ISOLATED_ARRAY,
            "args[1]": FieldPolicy.ISOLATED_ARRAY,
            "env[0].value": FieldPolicy.NO_ARRAY,
            "volumeMounts[0].name": FieldPolicy.NO_ARRAY,
            "volumeMounts[0].mountPath": FieldPolicy.NO_ARRAY,
            "volumeMounts[0].subPath": FieldPolicy.NO_ARRAY,
        }

    def test_script_is_not_walked(self):
        """Test the script body is left to the expansion dry run."""
        names = [field.name for field in iter_step_fields(_step(script="echo hi"))]
        assert "script" not in names


class TestCheckField:
    """Test the per-field decision."""

    def test_isolated_reference_passes(self):
        """Test an args entry that is exactly the array reference passes."""
        check_field(
            StepField("args[0]", "$(params.flags)", FieldPolicy.ISOLATED_ARRAY), ARRAYS
        )

    def test_concatenation_fails(self):
        """Test one extra leading or trailing character fails."""
        for value in ("x$(params.flags)", "$(params.flags)x", " $(params.flags)"):
            field = StepField("args[0]", value, FieldPolicy.ISOLATED_ARRAY)
            with pytest.raises(IllegalArrayUsageError) as exc_info:
                check_field(field, ARRAYS)
            assert "not properly isolated" in str(exc_info.value)
            assert exc_info.value.variable == "flags"

    def test_scalar_concatenation_is_free(self):
        """Test scalar references and literal text are unrestricted."""
        check_field(
            StepField("args[0]", "--tag=$(params.tag)", FieldPolicy.ISOLATED_ARRAY),
            ARRAYS,
        )

    def test_no_array_rejects_even_isolated_reference(self):
        """Test a no-array field fails even when the reference is the whole value."""
        field = StepField("image", "$(params.flags)", FieldPolicy.NO_ARRAY)

        with pytest.raises(IllegalArrayUsageError) as exc_info:
            check_field(field, ARRAYS)
        assert "variable type invalid" in str(exc_info.value)
        assert exc_info.value.field == "image"


class TestValidateArrayUsage:
    """Test the walk over whole step lists."""

    def test_locator_points_at_field(self):
        """Test the error is located at steps[i].<field>."""
        steps = [_step(), _step(command=["run", "--x=$(params.flags)"])]

        with pytest.raises(IllegalArrayUsageError) as exc_info:
            validate_array_usage(steps, ARRAYS)
        assert exc_info.value.field_path == "steps[1].command[1]"

    def test_no_array_fields(self):
        """Test env values and volume mount fields reject array references."""
        cases = [
            (_step(env=[{"name": "F", "value": "$(params.flags)"}]), "env[0].value"),
            (
                _step(volumeMounts=[{"name": "v", "mountPath": "/m", "subPath": "$(params.flags)"}]),
                "volumeMounts[0].subPath",
            ),
            (_step(workingDir="/src/$(inputs.params.flags)"), "workingDir"),
        ]
        for step, field_name in cases:
            with pytest.raises(IllegalArrayUsageError) as exc_info:
                validate_array_usage([step], ARRAYS)
            assert exc_info.value.field_path == f"steps[0].{field_name}"

    def test_without_arrays_nothing_fails(self):
        """Test steps pass when no array parameter is declared."""
        validate_array_usage([_step(image="$(params.flags)")], set())


class TestValidateVariables:
    """Test the syntactic check for undeclared parameters."""

    def test_undeclared_parameter(self):
        """Test a reference to an undeclared parameter is reported."""
        steps = [_step(), _step(image="registry/$(params.nope)")]

        with pytest.raises(UndefinedReferenceError) as exc_info:
            validate_variables(steps, {"tag"})
        assert exc_info.value.variable == "params.nope"
        assert exc_info.value.field_path == "steps[1].image"

    def test_existence_checked_before_array_usage(self):
        """Test undeclared references are reported before array misuse."""
        steps = [_step(image="$(params.flags)", args=["$(params.nope)"])]
        params = [ParamSpec(name="flags", type="array")]

        with pytest.raises(UndefinedReferenceError):
            validate_parameter_variables(steps, params)

    def test_parameter_variables_array_misuse(self):
        """Test array misuse is reported once all references exist."""
        steps = [_step(image="$(params.flags)")]
        params = [ParamSpec(name="flags", type="array")]

        with pytest.raises(IllegalArrayUsageError):
            validate_parameter_variables(steps, params)
