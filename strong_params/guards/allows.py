"""Allow-list guard dependency (`allows`).

Filters the request's active parameters down to the declared keys plus the
globally allowed keys. The unfiltered set is stashed on `request.state`
before the first filter. The guard never rejects a request.

    @router.get("/", dependencies=[allows("id", "action")])
    def index(params: ParameterSet = Depends(get_params)): ...
"""

from __future__ import annotations

from typing import Any, Iterable
import logging

from fastapi import Depends, Request

from strong_params.logic.parameter_set import ParameterSet, normalize_keys
from strong_params.logic.request_params import get_settings, load_params, stash_raw_params


logger = logging.getLogger(__name__)


def filter_allowed(params: ParameterSet, allowed: Iterable[Any], globally_allowed: Iterable[Any] = ()) -> ParameterSet:
    """Return ``params`` restricted to ``globally_allowed`` plus ``allowed``.

    An empty set is returned as-is. The result keeps the source set's fallback
    policy for absent keys.
    """
    if not params:
        return params
    permitted = normalize_keys(list(globally_allowed or ()) + list(allowed or ()))
    filtered = params.select(permitted)
    filtered.copy_default_from(params)
    return filtered


def allows(*keys: Any):
    """Build a route dependency that filters params to ``keys``."""

    declared = tuple(keys)

    async def allows_guard(request: Request) -> bool:
        params = await load_params(request)
        if not params:
            return True
        stash_raw_params(request, params)
        settings = get_settings(request)
        filtered = filter_allowed(params, declared, settings.globally_allowed_parameters)
        request.state.params = filtered
        logger.info(
            "strong_params.allows.filtered",
            extra={
                "path": str(getattr(request.url, "path", "")),
                "kept": sorted(str(k) for k in filtered.keys()),
                "dropped": sorted(str(k) for k in params.keys() if k not in filtered),
            },
        )
        return True

    return Depends(allows_guard)


__all__ = ["allows", "filter_allowed"]
