"""Strong params: declarative parameter contracts for FastAPI routes.

Routes declare which request parameters they permit (`allows`) and which
they require (`needs`):

    @router.post("/", dependencies=params_contract(allows=["id", "action"], needs=["id"]))

`install_strong_params` attaches the process-wide settings and the default
400 handler for `RequiredParamMissing` to an application.
"""

from __future__ import annotations

from strong_params.config.settings import StrongParamsSettings, load_settings
from strong_params.guards import allows, needs, params_contract
from strong_params.http.errors import RequiredParamMissing
from strong_params.logic.parameter_set import ParameterSet
from strong_params.logic.request_params import get_params, get_raw_params
from strong_params.main import create_app, install_strong_params
from strong_params.version import __version__

__all__ = [
    "__version__",
    "ParameterSet",
    "RequiredParamMissing",
    "StrongParamsSettings",
    "allows",
    "create_app",
    "get_params",
    "get_raw_params",
    "install_strong_params",
    "load_settings",
    "needs",
    "params_contract",
]
