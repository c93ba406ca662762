"""
Common path utilities for taskcheck.

Two kinds of paths are handled here: dotted variable paths as written inside
placeholders (``params.images[0]``) and field locators into a specification
tree (``steps[0].args[1]``). Filesystem-style helpers for computing effective
mount paths live here as well.
"""

import posixpath
import re
from dataclasses import dataclass

from taskcheck.core.types import PathSegment

# One member access: ".key" or "[index]"; keys may contain dashes
_SEGMENT_PATTERN = re.compile(r"\.([A-Za-z0-9_-]+)|\[(\d+|\*)\]")
_ROOT_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


@dataclass
class PathComponents:
    """Result of splitting a path into its components."""

    first_part: str
    remainder: str
    has_remainder: bool

    @classmethod
    def split_path(cls, path: str) -> "PathComponents":
        """
        Split a path at the first dot separator.

        Params:
            path: Path string to split (e.g., "params.images")

        Returns:
            PathComponents with first_part, remainder, and has_remainder flag

        Examples:
            "resources.inputs.source.path" -> PathComponents("resources", "inputs.source.path", True)
            "params" -> PathComponents("params", "", False)
        """
        if not path or "." not in path:
            return cls(first_part=path, remainder="", has_remainder=False)

        first_part, remainder = path.split(".", 1)
        return cls(first_part=first_part, remainder=remainder, has_remainder=True)


def split_variable_path(path: str) -> list[PathSegment]:
    """
    Split a dotted variable path into lookup segments.

    Params:
        path: Variable path such as "params.images[0]" or "workspaces.src.path"

    Returns:
        List of segments; list indices become ints, "[*]" stays as "*"

    Raises:
        ValueError: If the path does not follow the member access syntax
    """
    root = _ROOT_PATTERN.match(path or "")
    if not root:
        raise ValueError(f"invalid variable path {path!r}")

    segments: list[PathSegment] = [root.group()]
    position = root.end()
    while position < len(path):
        match = _SEGMENT_PATTERN.match(path, position)
        if not match:
            raise ValueError(f"invalid variable path {path!r} at offset {position}")
        key, index = match.groups()
        if key is not None:
            segments.append(key)
        elif index == "*":
            segments.append("*")
        else:
            segments.append(int(index))
        position = match.end()
    return segments


def format_locator(segments: list[PathSegment] | tuple[PathSegment, ...]) -> str:
    """
    Render locator segments as a field path.

    Examples:
        ["steps", 0, "args", 1] -> "steps[0].args[1]"
    """
    rendered = ""
    for segment in segments:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


def clean_path(path: str) -> str:
    """Normalize a mount path the way the container runtime compares them."""
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    # POSIX keeps a leading "//"; mount paths treat it as "/"
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def join_under(root: str, path: str) -> str:
    """
    Resolve a target path against a root directory.

    Params:
        root: Directory used for relative paths
        path: Absolute or relative target path

    Returns:
        The absolute path verbatim, otherwise the cleaned join under root
    """
    if posixpath.isabs(path):
        return path
    return clean_path(posixpath.join(root, path))
