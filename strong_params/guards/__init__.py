"""Route-level parameter guards.

`params_contract` returns the `dependencies` list for a route. The allow
guard always precedes the require guard so `needs` sees the filtered set.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from strong_params.guards.allows import allows as allow_guard, filter_allowed
from strong_params.guards.needs import missing_parameters, needs as require_guard, require_params


def params_contract(allows: Optional[Iterable[Any]] = None, needs: Optional[Iterable[Any]] = None) -> list:
    dependencies: list = []
    if allows is not None:
        dependencies.append(allow_guard(*allows))
    if needs is not None:
        dependencies.append(require_guard(*needs))
    return dependencies


allows = allow_guard
needs = require_guard

__all__ = [
    "allows",
    "needs",
    "params_contract",
    "filter_allowed",
    "require_params",
    "missing_parameters",
]
