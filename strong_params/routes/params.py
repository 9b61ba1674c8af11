"""Sample routes that echo their parameters under each guard combination."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from strong_params.guards import allows, needs, params_contract
from strong_params.logic.parameter_set import ParameterSet
from strong_params.logic.request_params import get_params, get_raw_params


router = APIRouter(prefix="/params")

_JSON_SCALARS = (str, int, float, bool, list, dict, type(None))


def _as_json(params: ParameterSet) -> Dict[str, Any]:
    return {str(k): (v if isinstance(v, _JSON_SCALARS) else str(v)) for k, v in params.items()}


@router.api_route("/echo", methods=["GET", "POST"], summary="Echo parameters without a contract")
async def echo(params: ParameterSet = Depends(get_params)):
    return {"params": _as_json(params)}


@router.api_route("/allowed", methods=["GET", "POST"], dependencies=[allows("id", "action")])
async def allowed(params: ParameterSet = Depends(get_params)):
    return {"params": _as_json(params)}


@router.api_route("/required", methods=["GET", "POST"], dependencies=[needs("id", "action")])
async def required(params: ParameterSet = Depends(get_params)):
    return {"params": _as_json(params)}


@router.api_route(
    "/contract",
    methods=["GET", "POST"],
    dependencies=params_contract(allows=["id", "name"], needs=["id", "name"]),
)
async def contract(
    params: ParameterSet = Depends(get_params),
    raw: ParameterSet = Depends(get_raw_params),
):
    return {"params": _as_json(params), "raw": _as_json(raw)}


@router.get("/items/{item_id}", dependencies=params_contract(allows=["item_id", "view"], needs=["item_id", "view"]))
async def item(params: ParameterSet = Depends(get_params)):
    return {"params": _as_json(params)}


__all__ = ["router"]
