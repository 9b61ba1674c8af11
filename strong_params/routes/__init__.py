"""APIRouter registration for the bundled sample routes."""

from __future__ import annotations

from fastapi import APIRouter

from strong_params.routes.params import router as params_router

api_router = APIRouter()
api_router.include_router(params_router, tags=["Params"])

__all__ = ["api_router"]
