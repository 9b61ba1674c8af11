"""Request-scoped parameter loading and stashing.

Builds one merged `ParameterSet` per request (query string, form body, JSON
object body, then path params; later sources win) and caches it on
`request.state`:

- `request.state.params`: the active set, replaced by `allows` when filtered.
- `request.state.raw_params`: the unfiltered stash, written once.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import Request

from strong_params.config.settings import StrongParamsSettings
from strong_params.logic.parameter_set import ParameterSet


logger = logging.getLogger(__name__)

_FORM_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def _content_type_base(request: Request) -> str:
    raw = request.headers.get("content-type") or ""
    return str(raw).split(";", 1)[0].strip().lower()


async def _body_fields(request: Request) -> Dict[str, Any]:
    ctype = _content_type_base(request)
    if ctype in _FORM_TYPES:
        form = await request.form()
        fields: Dict[str, Any] = {}
        for key, value in form.multi_items():
            fields[key] = value
        return fields
    if ctype == "application/json":
        body = await request.body()
        if not body:
            return {}
        try:
            parsed = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.info("strong_params.body.unparseable", extra={"content_type_base": ctype})
            return {}
        if not isinstance(parsed, dict):
            logger.info("strong_params.body.not_object", extra={"content_type_base": ctype})
            return {}
        return parsed
    return {}


async def load_params(request: Request) -> ParameterSet:
    """Return the active parameter set, building and caching it on first use."""
    cached = getattr(request.state, "params", None)
    if isinstance(cached, ParameterSet):
        return cached
    merged: Dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        merged[key] = value
    merged.update(await _body_fields(request))
    merged.update(request.path_params or {})
    params = ParameterSet.from_mapping(merged)
    request.state.params = params
    return params


def stash_raw_params(request: Request, params: ParameterSet) -> ParameterSet:
    """Keep the first unfiltered set; later calls never overwrite it."""
    existing = getattr(request.state, "raw_params", None)
    if isinstance(existing, ParameterSet):
        return existing
    request.state.raw_params = params
    return params


async def get_params(request: Request) -> ParameterSet:
    """Dependency for handlers: the active (possibly filtered) parameter set."""
    return await load_params(request)


async def get_raw_params(request: Request) -> ParameterSet:
    """Dependency for handlers: the unfiltered parameter set."""
    existing = getattr(request.state, "raw_params", None)
    if isinstance(existing, ParameterSet):
        return existing
    return await load_params(request)


def get_settings(request: Request) -> StrongParamsSettings:
    settings = getattr(request.app.state, "strong_params", None)
    if isinstance(settings, StrongParamsSettings):
        return settings
    return StrongParamsSettings()


__all__ = [
    "load_params",
    "stash_raw_params",
    "get_params",
    "get_raw_params",
    "get_settings",
]
