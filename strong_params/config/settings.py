"""Process-wide strong params settings.

This module loads the two settings read by the guards on every request:
- `globally_allowed_parameters`: keys always passed through `allows`.
- `missing_parameter_message`: message used when `needs` finds no params.

Precedence mirrors the rest of the configuration stack:
- Environment variables.
- Text files under `config/`.
- `strong_params.json` at the project root.
- Defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from strong_params.logic.parameter_set import normalize_key


CONFIG_DIR = Path("config")
ROOT_SETTINGS_FILE = Path("strong_params.json")
DEFAULT_MISSING_PARAMETER_MESSAGE = "One or more required parameters were missing."
logger = logging.getLogger(__name__)


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return data if isinstance(data, dict) else {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:  # pragma: no cover - defensive
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def _split_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.replace("\n", ",").split(",") if part.strip()]


class StrongParamsSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    globally_allowed_parameters: tuple[str, ...] = Field(default=())
    missing_parameter_message: str = Field(default=DEFAULT_MISSING_PARAMETER_MESSAGE)

    @field_validator("globally_allowed_parameters", mode="before")
    @classmethod
    def coerce_allowed(cls, v: object) -> tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(_split_list(v))
        return tuple(normalize_key(item) for item in v)  # type: ignore[union-attr]

    @field_validator("missing_parameter_message")
    @classmethod
    def message_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("missing_parameter_message must be a non-empty string")
        return v


def load_settings() -> StrongParamsSettings:
    """Load strong params settings with validation."""

    base = _read_json_file(ROOT_SETTINGS_FILE)

    allowed_text = os.environ.get("STRONG_PARAMS_GLOBALLY_ALLOWED") or _read_config_file("globally_allowed_parameters")
    allowed: object = _split_list(allowed_text) if allowed_text else base.get("globally_allowed_parameters", ())

    message = (
        os.environ.get("STRONG_PARAMS_MISSING_MESSAGE")
        or _read_config_file("missing_parameter_message")
        or base.get("missing_parameter_message")
        or DEFAULT_MISSING_PARAMETER_MESSAGE
    )

    try:
        return StrongParamsSettings(
            globally_allowed_parameters=allowed,
            missing_parameter_message=message,
        )
    except PydanticValidationError as e:
        logger.error("Invalid strong params configuration: %s", e)
        raise


__all__ = [
    "DEFAULT_MISSING_PARAMETER_MESSAGE",
    "StrongParamsSettings",
    "load_settings",
]
