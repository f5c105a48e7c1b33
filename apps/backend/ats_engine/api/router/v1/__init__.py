from fastapi import APIRouter

from .ats import ats_router

v1_router = APIRouter(prefix="/api/v1", tags=["v1"])
v1_router.include_router(ats_router, prefix="/ats")

__all__ = ["v1_router"]
