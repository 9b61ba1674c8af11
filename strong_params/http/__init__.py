"""HTTP-facing error types and handlers."""

from __future__ import annotations

from strong_params.http.errors import RequiredParamMissing, handle_required_param_missing

__all__ = ["RequiredParamMissing", "handle_required_param_missing"]
