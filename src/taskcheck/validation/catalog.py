"""
Declaration catalog: the parameter names a specification declares.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from taskcheck.models import ParamSpec, ParamType


@dataclass(frozen=True)
class ParameterNames:
    """
    Declared parameter names of a specification.

    Params:
        all: Every declared parameter name
        arrays: Names of the parameters whose type is array
    """

    all: frozenset[str] = frozenset()
    arrays: frozenset[str] = frozenset()


def collect_parameter_names(params: Iterable[ParamSpec]) -> ParameterNames:
    """
    Collect all parameter names and the array-typed subset.

    Params:
        params: Parameter declarations, possibly empty

    Returns:
        ParameterNames; empty sets when nothing is declared
    """
    names = set()
    arrays = set()
    for param in params:
        names.add(param.name)
        if param.effective_type == ParamType.ARRAY.value:
            arrays.add(param.name)
    return ParameterNames(all=frozenset(names), arrays=frozenset(arrays))
