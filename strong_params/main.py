from __future__ import annotations

import logging
from typing import Iterable, Optional

from fastapi import APIRouter, FastAPI

from strong_params.config.settings import StrongParamsSettings, load_settings
from strong_params.http.errors import RequiredParamMissing, handle_required_param_missing
from strong_params.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def install_strong_params(app: FastAPI, settings: Optional[StrongParamsSettings] = None) -> FastAPI:
    """Attach settings and the default missing-parameter handler to ``app``.

    A handler the application already registered for `RequiredParamMissing`
    is kept; one registered afterwards replaces the default.
    """
    cfg = settings if settings is not None else load_settings()
    app.state.strong_params = cfg
    if RequiredParamMissing not in app.exception_handlers:
        app.add_exception_handler(RequiredParamMissing, handle_required_param_missing)
    logger.info(
        "strong_params.installed",
        extra={
            "globally_allowed_parameters": list(cfg.globally_allowed_parameters),
            "custom_handler": app.exception_handlers.get(RequiredParamMissing) is not handle_required_param_missing,
        },
    )
    return app


def create_app(
    settings: Optional[StrongParamsSettings] = None,
    routers: Optional[Iterable[APIRouter]] = None,
) -> FastAPI:
    try:
        configure_logging()
    except Exception:
        logging.getLogger(__name__).error("global_logging_configuration_failed", exc_info=True)
    app = FastAPI()
    install_strong_params(app, settings)
    if routers is None:
        from strong_params.routes import api_router

        routers = [api_router]
    for router in routers:
        app.include_router(router)
    return app


__all__ = ["create_app", "install_strong_params"]
