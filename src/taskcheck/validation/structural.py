"""
Structural checks of a task specification.

These are uniqueness and membership checks that need no variable context:
volume and workspace names, mount path collisions, step rules, resource and
parameter types, step name syntax and object metadata.
"""

import re
from collections.abc import Iterable

from taskcheck.config import (
    ALLOWED_RESERVED_MOUNT,
    DEFAULT_PATHS,
    MAX_NAME_LENGTH,
    RESERVED_MOUNT_ROOT,
    RESERVED_VOLUME_PREFIX,
    PathDefaults,
)
from taskcheck.context.builder import workspace_path
from taskcheck.core.path_utils import clean_path
from taskcheck.exceptions import (
    InvalidValueError,
    MissingFieldError,
    SpecificationError,
)
from taskcheck.models import (
    Container,
    ObjectMeta,
    ParamSpec,
    ParamType,
    ResourceType,
    Step,
    TaskResource,
    TaskResources,
    Volume,
    WorkspaceDeclaration,
)

DNS1123_LABEL_PATTERN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?")


def validate_volumes(volumes: Iterable[Volume]) -> None:
    """
    Reject duplicate volume names.

    Raises:
        SpecificationError: Located at ``name``; callers prefix ``volumes``
    """
    seen = set()
    for volume in volumes:
        if volume.name in seen:
            raise SpecificationError(
                f"multiple volumes with same name {volume.name!r}", ["name"]
            )
        seen.add(volume.name)


def validate_declared_workspaces(
    workspaces: Iterable[WorkspaceDeclaration],
    steps: Iterable[Step],
    step_template: Container | None = None,
    paths: PathDefaults = DEFAULT_PATHS,
) -> None:
    """
    Check workspace names are unique and their mount paths collide with nothing.

    A workspace mount path may not equal another workspace's mount path, nor a
    volume mount path declared by any step or the step template.

    Raises:
        SpecificationError: On the first duplicate name or colliding path
    """
    mount_paths = set()
    for step in steps:
        for mount in step.volume_mounts:
            mount_paths.add(clean_path(mount.mount_path))
    if step_template is not None:
        for mount in step_template.volume_mounts:
            mount_paths.add(clean_path(mount.mount_path))

    names = set()
    for workspace in workspaces:
        if workspace.name in names:
            raise SpecificationError(
                f"workspace name {workspace.name!r} must be unique",
                ["workspaces", "name"],
            )
        names.add(workspace.name)

        mount_path = clean_path(workspace_path(workspace, paths))
        if mount_path in mount_paths:
            raise SpecificationError(
                f"workspace mount path {mount_path!r} must be unique",
                ["workspaces", "mountpath"],
            )
        mount_paths.add(mount_path)


def validate_steps(steps: Iterable[Step]) -> None:
    """
    Check per-step rules on merged steps.

    Every step needs an image; ``script`` excludes ``command``; non-empty step
    names are unique; volume mounts stay out of the reserved directory and do
    not use the reserved volume name prefix.

    Raises:
        SpecificationError: Located relative to the steps list
    """
    names = set()
    for index, step in enumerate(steps):
        if not step.image:
            raise MissingFieldError("image")

        if step.script and step.command:
            raise SpecificationError(
                f"step {index} script cannot be used with command", ["script"]
            )

        if step.name:
            if step.name in names:
                raise InvalidValueError(step.name, "name")
            names.add(step.name)

        for mount in step.volume_mounts:
            if mount.mount_path.startswith(
                RESERVED_MOUNT_ROOT
            ) and not mount.mount_path.startswith(ALLOWED_RESERVED_MOUNT):
                raise SpecificationError(
                    f"step {index} volumeMount cannot be mounted under "
                    f"{RESERVED_MOUNT_ROOT} (volumeMount {mount.name!r} mounted "
                    f"at {mount.mount_path!r})",
                    ["volumeMounts", "mountPath"],
                )
            if mount.name.startswith(RESERVED_VOLUME_PREFIX):
                raise SpecificationError(
                    f"step {index} volumeMount name {mount.name!r} cannot start "
                    f"with {RESERVED_VOLUME_PREFIX!r}",
                    ["volumeMounts", "name"],
                )


def _validate_resource_list(resources: list[TaskResource], kind: str) -> None:
    allowed = {t.value for t in ResourceType}
    for resource in resources:
        if resource.type not in allowed:
            raise InvalidValueError(
                resource.type, f"resources.{kind}.{resource.name}.type"
            )

    names = set()
    for resource in resources:
        if resource.name in names:
            raise SpecificationError(
                f"resource name {resource.name!r} must be unique",
                ["resources", kind, "name"],
            )
        names.add(resource.name)


def validate_resources(resources: TaskResources | None) -> None:
    """
    Check resource declarations: known types and unique names per direction.

    Raises:
        InvalidValueError: If a resource type is absent or unknown
        SpecificationError: If a resource name repeats within inputs or outputs
    """
    if resources is None:
        return
    _validate_resource_list(resources.inputs, "inputs")
    _validate_resource_list(resources.outputs, "outputs")


def validate_parameter_types(params: Iterable[ParamSpec]) -> None:
    """
    Check parameter types and that defaults match them.

    Raises:
        InvalidValueError: If a declared type is unknown
        SpecificationError: If a default's type differs from the declared type
    """
    allowed = {t.value for t in ParamType}
    for index, param in enumerate(params):
        if param.effective_type not in allowed:
            raise InvalidValueError(param.type, f"params[{index}].type")

        if param.default_type is not None and param.default_type != param.effective_type:
            raise SpecificationError(
                f"{param.effective_type!r} type does not match default value's "
                f"type: {param.default_type!r}",
                [f"params[{index}]", "default"],
            )


def validate_step_names(steps: Iterable[Step]) -> None:
    """
    Check that set step names are DNS-1123 labels.

    Raises:
        SpecificationError: On the first invalid name
    """
    for index, step in enumerate(steps):
        if step.name and not is_dns1123_label(step.name):
            raise SpecificationError(
                f"invalid value {step.name!r}",
                [f"steps[{index}]", "name"],
                details="Task step name must be a valid DNS Label, For more info "
                "refer to https://kubernetes.io/docs/concepts/overview/"
                "working-with-objects/names/#names",
            )


def is_dns1123_label(value: str) -> bool:
    return len(value) <= MAX_NAME_LENGTH and bool(
        DNS1123_LABEL_PATTERN.fullmatch(value)
    )


def validate_object_metadata(metadata: ObjectMeta) -> None:
    """
    Check the task's object name.

    Raises:
        InvalidValueError: If the name contains a dot or is too long
    """
    if "." in metadata.name:
        raise InvalidValueError(
            metadata.name,
            "name",
            details="special character . must not be present",
        )
    if len(metadata.name) > MAX_NAME_LENGTH:
        raise InvalidValueError(
            metadata.name,
            "name",
            details=f"cannot be longer than {MAX_NAME_LENGTH} characters",
        )
