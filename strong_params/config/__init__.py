"""Configuration for strong params: settings loading and error mapping."""

from __future__ import annotations

from strong_params.config.error_mapping import STRONG_PARAMS_ERROR_MAP
from strong_params.config.settings import (
    DEFAULT_MISSING_PARAMETER_MESSAGE,
    StrongParamsSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_MISSING_PARAMETER_MESSAGE",
    "STRONG_PARAMS_ERROR_MAP",
    "StrongParamsSettings",
    "load_settings",
]
