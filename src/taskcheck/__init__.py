"""
taskcheck - Static validation of variable references in task specifications

taskcheck checks, before anything runs, that every ``$(...)`` placeholder in a
task specification refers to a declared parameter, workspace, resource or
result, and that array parameters are only used where they can expand.
"""

from importlib.metadata import version

from taskcheck.exceptions import SpecificationError
from taskcheck.models import Task, TaskSpec
from taskcheck.validation import (
    check_task,
    check_task_spec,
    validate_task,
    validate_task_spec,
)

__version__ = version("taskcheck")

__all__ = [
    "__version__",
    "Task",
    "TaskSpec",
    "SpecificationError",
    "check_task",
    "check_task_spec",
    "validate_task",
    "validate_task_spec",
]
