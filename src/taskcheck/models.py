"""
Typed task specification models.

Declarations and steps are pydantic models decoded from the camelCase shape
task authors write (``workingDir``, ``volumeMounts``, ``targetPath``...).
Models are frozen: validation never mutates the specification it inspects.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParamType(str, Enum):
    """Declared type of a task parameter."""

    STRING = "string"
    ARRAY = "array"


class ResourceType(str, Enum):
    """Types of pipeline resources a task may consume or produce."""

    GIT = "git"
    IMAGE = "image"
    CLUSTER = "cluster"
    STORAGE = "storage"
    PULL_REQUEST = "pullrequest"
    CLOUD_EVENT = "cloudevent"


class SpecModel(BaseModel):
    """Base class for all specification models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ParamSpec(SpecModel):
    """A parameter declaration.

    ``type`` is kept as written so the parameter type check can reject unknown
    values; when omitted it is inferred from the default.
    """

    name: str
    type: str | None = None
    description: str | None = None
    default: str | list[str] | None = None

    @property
    def effective_type(self) -> str:
        """Declared type, or the type implied by the default."""
        if self.type:
            return self.type
        if isinstance(self.default, list):
            return ParamType.ARRAY.value
        return ParamType.STRING.value

    @property
    def default_type(self) -> str | None:
        """Runtime type of the default value, None when there is no default."""
        if self.default is None:
            return None
        if isinstance(self.default, list):
            return ParamType.ARRAY.value
        return ParamType.STRING.value


class WorkspaceDeclaration(SpecModel):
    name: str
    description: str | None = None
    mount_path: str | None = None
    read_only: bool = False


class TaskResource(SpecModel):
    name: str
    type: str | None = None
    description: str | None = None
    target_path: str | None = None
    optional: bool = False


class TaskResources(SpecModel):
    inputs: list[TaskResource] = Field(default_factory=list)
    outputs: list[TaskResource] = Field(default_factory=list)


class TaskResult(SpecModel):
    name: str
    description: str | None = None
    path: str | None = None


class EnvVar(SpecModel):
    name: str
    value: str = ""


class VolumeMount(SpecModel):
    name: str
    mount_path: str = ""
    sub_path: str = ""
    read_only: bool = False


class Volume(SpecModel):
    """A pod volume; the volume source is carried through untouched."""

    model_config = ConfigDict(extra="allow")

    name: str


class Container(SpecModel):
    """Container fields shared by steps and the step template."""

    name: str = ""
    image: str = ""
    working_dir: str = ""
    command: list[str] = Field(default_factory=list)
    args: list[str] = Field(default_factory=list)
    env: list[EnvVar] = Field(default_factory=list)
    volume_mounts: list[VolumeMount] = Field(default_factory=list)


class Step(Container):
    script: str = ""


class TaskSpec(SpecModel):
    """The root value under validation."""

    description: str | None = None
    params: list[ParamSpec] = Field(default_factory=list)
    workspaces: list[WorkspaceDeclaration] = Field(default_factory=list)
    resources: TaskResources | None = None
    results: list[TaskResult] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)
    step_template: Container | None = None

    def is_empty(self) -> bool:
        """Check whether nothing at all was specified."""
        return not any(getattr(self, name) for name in type(self).model_fields)


class ObjectMeta(SpecModel):
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class Task(SpecModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: TaskSpec = Field(default_factory=TaskSpec)
