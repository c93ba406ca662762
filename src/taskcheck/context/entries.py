"""
Typed lookup context entries.

Each declared parameter, workspace, resource and result becomes one entry.
Entries know how to render themselves into the nested mapping the expansion
engine resolves against; ``TaskContext`` assembles them, legacy aliases
included.
"""

from typing import Any

from attrs import field, frozen

from taskcheck.core.types import LookupContext


@frozen
class ScalarEntry:
    """A string parameter: its default, or the empty string."""

    name: str
    value: str = ""

    def to_lookup(self) -> str:
        return self.value


@frozen
class ArrayEntry:
    """An array parameter: its default, or no items."""

    name: str
    values: tuple[str, ...] = ()

    def to_lookup(self) -> list[str]:
        return list(self.values)


@frozen
class WorkspaceEntry:
    name: str
    path: str

    def to_lookup(self) -> dict[str, str]:
        return {"path": self.path}


@frozen
class ResourceEntry:
    """
    A declared input or output resource.

    Params:
        name: Resource name
        path: Effective path of the resource inside the step containers
        type: Recognized resource type, None when absent or unknown
        placeholder_keys: Type specific keys, all rendered as empty strings
    """

    name: str
    path: str
    type: str | None = None
    placeholder_keys: tuple[str, ...] = ()

    def to_lookup(self) -> dict[str, str]:
        entry = {"path": self.path, "name": self.name}
        if self.type is not None:
            entry["type"] = self.type
            for key in self.placeholder_keys:
                entry[key] = ""
        return entry


@frozen
class ResultEntry:
    name: str
    path: str

    def to_lookup(self) -> dict[str, str]:
        return {"path": self.path}


ParamEntry = ScalarEntry | ArrayEntry
ContextEntry = ScalarEntry | ArrayEntry | WorkspaceEntry | ResourceEntry | ResultEntry


def _render(entries: dict[str, Any]) -> dict[str, Any]:
    return {name: entry.to_lookup() for name, entry in entries.items()}


@frozen
class TaskContext:
    """All entries available to placeholders of one task specification."""

    params: dict[str, ParamEntry] = field(factory=dict)
    workspaces: dict[str, WorkspaceEntry] = field(factory=dict)
    input_resources: dict[str, ResourceEntry] = field(factory=dict)
    output_resources: dict[str, ResourceEntry] = field(factory=dict)
    results: dict[str, ResultEntry] = field(factory=dict)

    def to_lookup(self) -> LookupContext:
        """
        Render the nested lookup mapping.

        Returns:
            Mapping with ``params``, ``workspaces``, ``resources``, ``results``
            and the legacy ``inputs``/``outputs`` aliases, which share the very
            same sub-mappings so both shapes resolve identically
        """
        params = _render(self.params)
        resources = {
            "inputs": _render(self.input_resources),
            "outputs": _render(self.output_resources),
        }
        return {
            "params": params,
            "workspaces": _render(self.workspaces),
            "resources": resources,
            "results": _render(self.results),
            "inputs": {"params": params, "resources": resources["inputs"]},
            "outputs": {"resources": resources["outputs"]},
        }

    def entries(self) -> list[ContextEntry]:
        """List every entry, parameters first."""
        return [
            *self.params.values(),
            *self.workspaces.values(),
            *self.input_resources.values(),
            *self.output_resources.values(),
            *self.results.values(),
        ]
