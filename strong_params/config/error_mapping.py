"""Central error mapping for the strong params guards.

Single source of truth for the default status used when a required
parameter is missing. Guard and handler modules import from here instead
of hardcoding numbers. The `code` is not part of the response body; the
default handler logs it as the event code of `strong_params.required_missing`.
"""

from __future__ import annotations

STRONG_PARAMS_ERROR_MAP = {
    "required_missing": {"code": "PARAM_REQUIRED_MISSING", "status": 400},
}

__all__ = ["STRONG_PARAMS_ERROR_MAP"]
