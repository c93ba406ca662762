"""
Shared test fixtures and utilities for the taskcheck test suite.
"""

import pytest

from taskcheck.models import TaskSpec


@pytest.fixture
def make_spec():
    """Factory building a TaskSpec from authored (camelCase) sections.

    A single valid step is supplied when ``steps`` is not given, so tests only
    spell out the sections they care about.

    Usage:
        def test_something(make_spec):
            spec = make_spec(params=[{"name": "flags", "type": "array"}])
    """

    def _make(**sections):
        sections.setdefault("steps", [{"name": "build", "image": "alpine"}])
        return TaskSpec.model_validate(sections)

    return _make
