"""Required-parameter guard dependency (`needs`).

Inspects the active parameters and raises `RequiredParamMissing` before the
handler runs when a declared key is absent or blank. Never mutates the
request's parameters.

    @router.post("/", dependencies=[needs("id", "action")])
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence
import logging

from fastapi import Depends, Request

from strong_params.http.errors import RequiredParamMissing
from strong_params.logic.humanize import humanize
from strong_params.logic.parameter_set import ParameterSet, is_blank, normalize_keys
from strong_params.logic.request_params import get_settings, load_params


logger = logging.getLogger(__name__)


def missing_parameters(params: ParameterSet, needed: Iterable[Any]) -> list:
    """Return the normalized ``needed`` keys that are blank, in declared order."""
    sym_params = params.symbolized()
    return [key for key in normalize_keys(needed) if is_blank(dict.get(sym_params, key))]


def require_params(params: Optional[ParameterSet], needed: Sequence[Any], missing_message: str) -> None:
    """Raise `RequiredParamMissing` unless every ``needed`` key is present and non-blank.

    No params at all (with something needed) reports ``missing_message``
    rather than naming a field.
    """
    if params is None or (not params and len(needed) > 0):
        raise RequiredParamMissing(missing_message)
    missing = missing_parameters(params, needed)
    if missing:
        raise RequiredParamMissing(f"{humanize(missing[0])} cannot be blank")


def needs(*keys: Any):
    """Build a route dependency that requires ``keys``."""

    declared = tuple(keys)

    async def needs_guard(request: Request) -> bool:
        params = await load_params(request)
        settings = get_settings(request)
        try:
            require_params(params, declared, settings.missing_parameter_message)
        except RequiredParamMissing as exc:
            logger.info(
                "strong_params.needs.fail",
                extra={
                    "path": str(getattr(request.url, "path", "")),
                    "needed": [str(k) for k in declared],
                    "detail": exc.message,
                },
            )
            raise
        return True

    return Depends(needs_guard)


__all__ = ["needs", "require_params", "missing_parameters"]
