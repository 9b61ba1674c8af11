"""Step definitions for route parameter contract scenarios."""

from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import parse_qsl

from behave import given, then, when
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from strong_params.config.settings import StrongParamsSettings
from strong_params.guards import params_contract
from strong_params.logic.parameter_set import ParameterSet
from strong_params.logic.request_params import get_params
from strong_params.main import install_strong_params


def _split(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _mount(context: Any, path: str, dependencies: list) -> None:
    router = APIRouter()

    @router.get(path, dependencies=dependencies)
    async def handler(params: ParameterSet = Depends(get_params)) -> Dict[str, Any]:
        return {"params": {str(k): v for k, v in params.items()}}

    context.app.include_router(router)
    context.client = TestClient(context.app)


@given('an application with globally allowed parameters "{names}"')
def step_application(context: Any, names: str) -> None:
    context.app = FastAPI()
    install_strong_params(context.app, StrongParamsSettings(globally_allowed_parameters=_split(names)))


@given('a route "{path}" that allows "{names}"')
def step_route_allows(context: Any, path: str, names: str) -> None:
    _mount(context, path, params_contract(allows=_split(names)))


@given('a route "{path}" that needs "{names}"')
def step_route_needs(context: Any, path: str, names: str) -> None:
    _mount(context, path, params_contract(needs=_split(names)))


@given('a route "{path}" without a contract')
def step_route_plain(context: Any, path: str) -> None:
    _mount(context, path, [])


@when('I GET "{path}" with query "{query}"')
def step_get(context: Any, path: str, query: str) -> None:
    context.response = context.client.get(path, params=parse_qsl(query))


@when('I GET "{path}" with query ""')
def step_get_empty(context: Any, path: str) -> None:
    context.response = context.client.get(path)


@then("the response status is {status:d}")
def step_status(context: Any, status: int) -> None:
    assert context.response.status_code == status, (context.response.status_code, context.response.text)


@then('the response body is "{body}"')
def step_body(context: Any, body: str) -> None:
    assert context.response.text == body, context.response.text


@then('the handler sees parameters "{query}"')
def step_params(context: Any, query: str) -> None:
    assert context.response.json()["params"] == dict(parse_qsl(query))
