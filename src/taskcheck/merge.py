"""
Step template merging.

A task may declare a ``stepTemplate`` whose container fields every step
inherits. Fields a step sets itself win over the template; ``env`` entries are
merged by name and ``volumeMounts`` by mount path. The template's ``name`` is
never inherited, since step names must stay unique.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from taskcheck.models import Container, Step

T = TypeVar("T")

_SCALAR_FIELDS = ("image", "working_dir")
_LIST_FIELDS = ("command", "args")


def merge_keyed(
    template_items: list[T], step_items: list[T], key: Callable[[T], str]
) -> list[T]:
    """
    Merge two lists of keyed entries.

    Template entries keep their position and are replaced by a step entry with
    the same key; step entries with new keys are appended in step order.
    """
    overrides = {key(item): item for item in step_items}
    merged = [overrides.pop(key(item), item) for item in template_items]
    merged.extend(item for item in step_items if key(item) in overrides)
    return merged


def merge_step_with_template(template: Container, step: Step) -> Step:
    """Return a copy of ``step`` with the unset fields taken from ``template``."""
    updates = {}
    for name in _SCALAR_FIELDS + _LIST_FIELDS:
        if not getattr(step, name):
            updates[name] = getattr(template, name)
    updates["env"] = merge_keyed(template.env, step.env, lambda env: env.name)
    updates["volume_mounts"] = merge_keyed(
        template.volume_mounts, step.volume_mounts, lambda mount: mount.mount_path
    )
    return step.model_copy(update=updates)


def merge_steps_with_step_template(
    template: Container | None, steps: Iterable[Step]
) -> list[Step]:
    """
    Apply the step template to every step.

    Params:
        template: The task's step template, may be None
        steps: Steps as authored

    Returns:
        New list of merged steps; the input steps are returned unchanged
        when there is no template
    """
    if template is None:
        return list(steps)
    return [merge_step_with_template(template, step) for step in steps]
