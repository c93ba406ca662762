"""
Context construction for variable expansion dry runs.

The builder turns typed declarations into the lookup context the runtime
substitution will see, with placeholder values in place of anything only known
at execution time. Only the shape matters: every key a correct reference can
reach exists, and nothing else does.
"""

import logging

from taskcheck.config import DEFAULT_PATHS, PathDefaults
from taskcheck.context.entries import (
    ArrayEntry,
    ParamEntry,
    ResourceEntry,
    ResultEntry,
    ScalarEntry,
    TaskContext,
    WorkspaceEntry,
)
from taskcheck.core.path_utils import join_under
from taskcheck.models import (
    ParamSpec,
    ParamType,
    ResourceType,
    TaskResource,
    TaskResult,
    TaskSpec,
    WorkspaceDeclaration,
)

logger = logging.getLogger(__name__)

# Keys each resource type exposes besides path, name and type
RESOURCE_PLACEHOLDER_KEYS: dict[ResourceType, tuple[str, ...]] = {
    ResourceType.GIT: ("url", "revision", "depth", "sslVerify"),
    ResourceType.IMAGE: ("url", "digest"),
    ResourceType.CLUSTER: (
        "url",
        "revision",
        "username",
        "password",
        "namespace",
        "token",
        "insecure",
        "cadata",
    ),
    ResourceType.STORAGE: ("location",),
    ResourceType.PULL_REQUEST: ("url", "provider", "insecure-skip-tls-verify"),
    ResourceType.CLOUD_EVENT: ("target-uri",),
}


def build_param_entry(param: ParamSpec) -> ParamEntry:
    """
    Build the context entry of a parameter.

    Params:
        param: Parameter declaration

    Returns:
        The default verbatim when present, otherwise an empty ArrayEntry for
        array parameters and an empty ScalarEntry for everything else
    """
    # A default of the wrong type is reported later by the parameter type check
    if isinstance(param.default, list):
        return ArrayEntry(param.name, tuple(param.default))
    if param.default is not None:
        return ScalarEntry(param.name, param.default)
    if param.effective_type == ParamType.ARRAY.value:
        return ArrayEntry(param.name)
    return ScalarEntry(param.name)


def workspace_path(
    workspace: WorkspaceDeclaration, paths: PathDefaults = DEFAULT_PATHS
) -> str:
    """Return the declared mount path, else the default under the workspace root."""
    return workspace.mount_path or f"{paths.workspace_root}/{workspace.name}"


def build_workspace_entry(
    workspace: WorkspaceDeclaration, paths: PathDefaults = DEFAULT_PATHS
) -> WorkspaceEntry:
    return WorkspaceEntry(workspace.name, workspace_path(workspace, paths))


def resource_path(
    resource: TaskResource, is_output: bool, paths: PathDefaults = DEFAULT_PATHS
) -> str:
    """
    Compute the effective path of a resource.

    Params:
        resource: Resource declaration
        is_output: Whether the resource is declared under outputs
        paths: Directory conventions

    Returns:
        Absolute target path verbatim, relative target path joined under the
        workspace root, else the default input or output directory
    """
    if resource.target_path:
        return join_under(paths.workspace_root, resource.target_path)
    root = paths.output_root if is_output else paths.workspace_root
    return join_under(root, resource.name)


def resource_type(resource: TaskResource) -> ResourceType | None:
    """Return the recognized type of a resource, None when absent or unknown."""
    if not resource.type:
        return None
    try:
        return ResourceType(resource.type)
    except ValueError:
        return None


def build_resource_entry(
    resource: TaskResource, is_output: bool, paths: PathDefaults = DEFAULT_PATHS
) -> ResourceEntry:
    kind = resource_type(resource)
    if kind is None:
        return ResourceEntry(resource.name, resource_path(resource, is_output, paths))
    return ResourceEntry(
        name=resource.name,
        path=resource_path(resource, is_output, paths),
        type=kind.value,
        placeholder_keys=RESOURCE_PLACEHOLDER_KEYS[kind],
    )


def build_result_entry(
    result: TaskResult, paths: PathDefaults = DEFAULT_PATHS
) -> ResultEntry:
    path = result.path or f"{paths.results_root}/{result.name}"
    return ResultEntry(result.name, path)


def build_task_context(
    spec: TaskSpec, paths: PathDefaults = DEFAULT_PATHS
) -> TaskContext:
    """
    Build the typed lookup context for a task specification.

    Declaration values are used verbatim; placeholders inside declarations are
    checked by the expansion dry run over the whole specification. An empty
    declaration name becomes an empty key.

    Params:
        spec: Task specification
        paths: Directory conventions for effective paths

    Returns:
        TaskContext holding one entry per declaration
    """
    params = {}
    for param in spec.params:
        params[param.name] = build_param_entry(param)

    workspaces = {}
    for workspace in spec.workspaces:
        workspaces[workspace.name] = build_workspace_entry(workspace, paths)

    input_resources = {}
    output_resources = {}
    if spec.resources is not None:
        for resource in spec.resources.inputs:
            input_resources[resource.name] = build_resource_entry(
                resource, False, paths
            )
        for resource in spec.resources.outputs:
            output_resources[resource.name] = build_resource_entry(
                resource, True, paths
            )

    results = {}
    for result in spec.results:
        results[result.name] = build_result_entry(result, paths)

    context = TaskContext(
        params=params,
        workspaces=workspaces,
        input_resources=input_resources,
        output_resources=output_resources,
        results=results,
    )
    logger.debug(
        "Built task context: %d params, %d workspaces, %d input resources, "
        "%d output resources, %d results",
        len(params),
        len(workspaces),
        len(input_resources),
        len(output_resources),
        len(results),
    )
    return context
