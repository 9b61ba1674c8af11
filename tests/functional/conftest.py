from __future__ import annotations

"""Functional test bootstrap for strong params.

Each test builds its own in-process FastAPI app through `create_app` with
explicit settings so that environment variables or config files on the
developer machine never leak into assertions.
"""

import pytest
from fastapi.testclient import TestClient

from strong_params.config.settings import StrongParamsSettings
from strong_params.main import create_app


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every test from an empty directory without settings env vars."""
    monkeypatch.delenv("STRONG_PARAMS_GLOBALLY_ALLOWED", raising=False)
    monkeypatch.delenv("STRONG_PARAMS_MISSING_MESSAGE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_client():
    def _make(**settings_kwargs) -> TestClient:
        return TestClient(create_app(StrongParamsSettings(**settings_kwargs)))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
