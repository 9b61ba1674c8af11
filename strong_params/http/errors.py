"""Missing-parameter error and its default response mapping.

`RequiredParamMissing` escapes guard evaluation untouched and is mapped to a
response by whatever handler the application registers for it. The default
handler answers 400 with the message as a plain-text body.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from strong_params.config.error_mapping import STRONG_PARAMS_ERROR_MAP


logger = logging.getLogger(__name__)


class RequiredParamMissing(ValueError):
    """A required request parameter is absent or blank."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def handle_required_param_missing(request: Request, exc: RequiredParamMissing) -> PlainTextResponse:
    mapping = STRONG_PARAMS_ERROR_MAP["required_missing"]
    status = int(mapping.get("status", 400))
    logger.info(
        "strong_params.required_missing",
        extra={
            "code": mapping.get("code"),
            "status": status,
            "path": str(getattr(request.url, "path", "")),
            "method": str(getattr(request, "method", "")),
        },
    )
    return PlainTextResponse(getattr(exc, "message", str(exc)), status_code=status)


__all__ = ["RequiredParamMissing", "handle_required_param_missing"]
