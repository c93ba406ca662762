from attrs import frozen


@frozen
class PathDefaults:
    """Directory conventions used to compute effective paths of declarations.

    Params:
        workspace_root: Parent of workspaces and input resources without an explicit path.
        output_root: Parent of output resources without an explicit target path.
        results_root: Directory holding result files without an explicit path.
    """

    workspace_root: str = "/workspace"
    output_root: str = "/workspace/output"
    results_root: str = "/tekton/results"


DEFAULT_PATHS = PathDefaults()

# Volume mounts may not shadow the runtime's internal directory, except for the home dir
RESERVED_MOUNT_ROOT = "/tekton/"
ALLOWED_RESERVED_MOUNT = "/tekton/home"
RESERVED_VOLUME_PREFIX = "tekton-internal-"

MAX_NAME_LENGTH = 63
