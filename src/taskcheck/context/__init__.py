"""
Lookup context construction.

This package builds the typed, type-aware context that mirrors what the
runtime variable substitution will see for a task specification.
"""

from taskcheck.context.builder import (
    RESOURCE_PLACEHOLDER_KEYS,
    build_param_entry,
    build_resource_entry,
    build_result_entry,
    build_task_context,
    build_workspace_entry,
    resource_path,
    resource_type,
    workspace_path,
)
from taskcheck.context.entries import (
    ArrayEntry,
    ContextEntry,
    ParamEntry,
    ResourceEntry,
    ResultEntry,
    ScalarEntry,
    TaskContext,
    WorkspaceEntry,
)

__all__ = [
    "RESOURCE_PLACEHOLDER_KEYS",
    "ArrayEntry",
    "ContextEntry",
    "ParamEntry",
    "ResourceEntry",
    "ResultEntry",
    "ScalarEntry",
    "TaskContext",
    "WorkspaceEntry",
    "build_param_entry",
    "build_resource_entry",
    "build_result_entry",
    "build_task_context",
    "build_workspace_entry",
    "resource_path",
    "resource_type",
    "workspace_path",
]
